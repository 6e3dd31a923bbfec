"""Conversion of integer triples into RGB colours, with checked ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_COMPONENT_RANGE = range(0, 256)


class ColorError(ValueError):
    """A value could not be turned into a colour."""


class BadLength(ColorError):
    """The sequence did not hold exactly three components."""


class IntConversion(ColorError):
    """A component lies outside 0..=255."""


def _component(value: int) -> int:
    if value not in _COMPONENT_RANGE:
        raise IntConversion(f"component {value} is outside 0..=255")
    return value


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_components(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour; raise IntConversion if any component is out of range."""
        return cls(red=_component(red), green=_component(green), blue=_component(blue))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Build a colour from exactly three values; raise BadLength otherwise."""
        if len(values) != 3:
            raise BadLength(f"expected 3 components, got {len(values)}")
        red, green, blue = values
        return cls.from_components(red, green, blue)