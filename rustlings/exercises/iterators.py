"""Iterator exercises: capitalisation, division results, factorials and progress counts."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum, auto


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not produce an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, NotDivisibleError)
            and (other.dividend, other.divisor) == (self.dividend, self.divisor)
        )

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DivideByZeroError)

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b exactly; raise a DivisionError when that is impossible."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """All quotients by 27, raising at the first division that fails."""
    return [divide(n, 27) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Each quotient by 27, or the error that division produced."""
    return [_try_divide(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    return math.prod(range(1, num + 1))


class Progress(Enum):
    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    count = 0
    for progress in mapping.values():
        if progress is value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_for(collection: Sequence[Mapping[str, Progress]], value: Progress) -> int:
    count = 0
    for mapping in collection:
        count += count_for(mapping, value)
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    return sum(count_iterator(mapping, value) for mapping in collection)