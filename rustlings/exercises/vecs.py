"""Vector exercises and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T