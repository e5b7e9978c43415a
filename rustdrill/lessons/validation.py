"""Validated positive integers and the errors raised while building them."""

from __future__ import annotations

from dataclasses import dataclass

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_DIGITS = frozenset("0123456789")


class CreationError(ValueError):
    """A value could not become a positive, nonzero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, reason: str) -> None:
        if reason not in self._MESSAGES:
            raise ValueError(f"unknown creation error reason: {reason!r}")
        super().__init__(self._MESSAGES[reason])
        self.reason = reason


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive, nonzero integer.

    ``source`` holds the underlying error and ``kind`` says which step failed.
    """

    CREATION = "creation"
    PARSE_INT = "parse_int"

    def __init__(self, source: ValueError) -> None:
        super().__init__(str(source))
        self.source = source
        self.kind = self.CREATION if isinstance(source, CreationError) else self.PARSE_INT


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero; construction raises CreationError otherwise."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


def _parse_i64(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _I64_MAX:
        raise ValueError("number too large to fit in target type")
    if value < _I64_MIN:
        raise ValueError("number too small to fit in target type")
    return value


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_i64(s)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error