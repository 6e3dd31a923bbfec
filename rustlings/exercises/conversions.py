"""Conversion exercises: parsing people, averages and counting text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

_UNSIGNED = re.compile(r"\+?[0-9]+")
_UNSIGNED_MAX = 2**64 - 1


def _parse_unsigned(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _UNSIGNED_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonErrorKind(Enum):
    EMPTY = auto()
    BAD_LEN = auto()
    NO_NAME = auto()
    PARSE_INT = auto()


class ParsePersonError(ValueError):
    """Text could not be parsed as ``name,age``."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None) -> None:
        super().__init__(detail or kind.name.lower())
        self.kind = kind
        self.detail = detail


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Build from ``name,age``, falling back to the default person on any problem."""
        if not text:
            return cls.default()
        parts = text.split(",")
        name = parts[0]
        if not name or len(parts) < 2:
            return cls.default()
        try:
            age = _parse_unsigned(parts[1])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse exactly ``name,age``; raise ParsePersonError otherwise."""
        if not text:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        parts = text.split(",")
        if len(parts) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = parts
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_unsigned(age_text)
        except ValueError as err:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(err)) from err
        return cls(name=name, age=age)


def average(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def byte_counter(arg: str) -> int:
    """Number of UTF-8 bytes in the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


def num_sq(value: int) -> int:
    return value * value