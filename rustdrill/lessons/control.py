"""Conditionals, small functions and optional results."""

from __future__ import annotations

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a >= b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour, or None for an hour out of range."""
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day < 22:
        return 5
    if time_of_day < 25:
        return 0
    return None