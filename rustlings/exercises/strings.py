"""String exercises: returning, comparing, trimming, composing and replacing text."""


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")