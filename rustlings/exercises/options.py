"""Option exercises: ice cream left in the fridge and draining optional values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

T = TypeVar("T")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a 24-hour time; None for an invalid hour."""
    if time_of_day < 22:
        return 5
    if time_of_day < 24:
        return 0
    return None


def drain_present(values: list[T | None]) -> Iterator[T]:
    """Pop values off the end of the list, yielding them until a None or an empty list.

    The None that stops the iteration is removed from the list as well.
    """
    while values:
        item = values.pop()
        if item is None:
            return
        yield item