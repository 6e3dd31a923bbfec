"""Smart pointer exercises: copy-on-write absolute values and a cons list.

For ``abs_all`` a tuple stands for borrowed data and a list for owned data.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every element non-negative, copying borrowed data only when a change is needed.

    A list is changed in place and returned; a tuple is returned unchanged if it
    holds no negative value, otherwise a new list is returned.
    """
    if not any(v < 0 for v in values):
        return values
    absolute = [abs(v) for v in values]
    if isinstance(values, list):
        values[:] = absolute
        return values
    return absolute


@dataclass(frozen=True)
class Cons:
    """A cons cell; a tail of None is the empty list."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2))