"""
Fixed-width integer arithmetic that raises instead of growing past the width.

Python integers never overflow, so these helpers are the building blocks for
`IntIsomorphism` and `LongIsomorphism` operations that must stay inside a
32-bit or 64-bit two's complement range.
"""

from enum import IntEnum

from isomorphic.exceptions import IntegerOverflowError

__all__ = (
    "Width",
    "add_exact",
    "decrement_exact",
    "increment_exact",
    "negate_exact",
    "subtract_exact",
    "to_int_exact",
)


class Width(IntEnum):
    INT = 32
    LONG = 64

    @property
    def min_value(self) -> int:
        return -(1 << (self - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self - 1)) - 1

    @property
    def overflow_message(self) -> str:
        return "integer overflow" if self is Width.INT else "long overflow"

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


def increment_exact(value: int, /, width: Width = Width.INT) -> int:
    return _exact(value + 1, width)


def decrement_exact(value: int, /, width: Width = Width.INT) -> int:
    return _exact(value - 1, width)


def negate_exact(value: int, /, width: Width = Width.INT) -> int:
    return _exact(-value, width)


def add_exact(x: int, y: int, /, width: Width = Width.INT) -> int:
    return _exact(x + y, width)


def subtract_exact(x: int, y: int, /, width: Width = Width.INT) -> int:
    return _exact(x - y, width)


def to_int_exact(value: int, /) -> int:
    """
    Narrows a `long` value to an `int`, raising if it doesn't fit.
    """

    return _exact(value, Width.INT)


def _exact(result: int, width: Width) -> int:
    if not width.contains(result):
        raise IntegerOverflowError(width.overflow_message)

    return result
