"""Function exercises: sale prices and squares."""


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num