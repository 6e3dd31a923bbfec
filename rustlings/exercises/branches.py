"""Branching exercises: comparisons and simple lookups."""


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or "Unknown"."""
    match animal:
        case "crab":
            return "Beach"
        case "gopher":
            return "Burrow"
        case "snake":
            return "Desert"
        case _:
            return "Unknown"