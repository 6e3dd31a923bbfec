"""Coloured status lines printed to the terminal."""

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, style: str) -> None:
    console = Console(highlight=False, soft_wrap=True)
    marker = fallback if no_emoji() else symbol
    console.print(Text(marker, style=style), Text(message, style=style))


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅", "✓", message, "green")