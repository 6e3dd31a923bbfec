"""Error-handling exercises: nametags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed decimal integer strictly, raising ValueError like a checked parse."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens: 5 per item plus a processing fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32)
    return qty * cost_per_item + processing_fee


class CreationErrorKind(Enum):
    NEGATIVE = auto()
    ZERO = auto()


_DESCRIPTIONS = {
    CreationErrorKind.NEGATIVE: "number is negative",
    CreationErrorKind.ZERO: "number is zero",
}


class CreationError(ValueError):
    """The value is not a positive, non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(_DESCRIPTIONS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind is self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text did not parse as an integer, or the integer was not positive."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err