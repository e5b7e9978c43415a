"""Error handling: name tags and token purchases."""

from __future__ import annotations

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def _parse_i32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _I32_MAX:
        raise ValueError("number too large to fit in target type")
    if value < _I32_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity; raise ValueError if it is not a number."""
    quantity = _parse_i32(item_quantity)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable, report it, and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens