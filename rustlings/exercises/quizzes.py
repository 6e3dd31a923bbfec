"""Quiz solutions: apple prices, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


class CommandKind(Enum):
    UPPERCASE = auto()
    TRIM = auto()
    APPEND = auto()


@dataclass(frozen=True)
class Command:
    """A transformation; ``times`` is the repeat count for APPEND."""

    kind: CommandKind
    times: int = 0


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times
    raise ValueError(f"unknown command: {command.kind}")


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"