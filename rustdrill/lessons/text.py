"""Small string exercises."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour names."""
    return attempt in _COLOR_WORDS


def trim_me(input: str) -> str:
    """Remove whitespace from both ends."""
    return input.strip()


def compose_me(input: str) -> str:
    """Append " world!"."""
    return input + " world!"


def replace_me(input: str) -> str:
    """Replace every "cars" with "balloons"."""
    return input.replace("cars", "balloons")