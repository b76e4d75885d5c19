"""Exact integer arithmetic and calendar helpers.

Python integers never overflow, so every result that has to fit a fixed
width (the 64-bit seconds of a duration, the 32-bit year of a date) is
checked explicitly. ``normalize`` is the floor-division carry step that
all seconds-plus-nanos types share.
"""

from ._common import ArithmeticOverflow

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


def check_long(value: int, /) -> int:
    if LONG_MIN <= value <= LONG_MAX:
        return value
    raise ArithmeticOverflow(f"long overflow: {value}")


def add_exact(a: int, b: int, /) -> int:
    return check_long(a + b)


def subtract_exact(a: int, b: int, /) -> int:
    return check_long(a - b)


def multiply_exact(a: int, b: int, /) -> int:
    return check_long(a * b)


def to_int_exact(value: int, /) -> int:
    if INT_MIN <= value <= INT_MAX:
        return value
    raise ArithmeticOverflow(f"integer overflow: {value}")


def trunc_div(a: int, b: int, /) -> int:
    """Integer division rounding toward zero (unlike ``//``)"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_rem(a: int, b: int, /) -> int:
    """Remainder matching ``trunc_div``: takes the sign of the dividend"""
    return a - b * trunc_div(a, b)


def normalize(primary: int, adjustment: int, per_unit: int) -> tuple[int, int]:
    """Fold an adjustment in a finer unit into a (primary, fraction) pair.

    The fraction always ends up in ``[0, per_unit)``, also for negative
    adjustments: -1ns is ``(-1, 999_999_999)``, never ``(0, -1)``.
    """
    carry, fraction = divmod(adjustment, per_unit)
    return add_exact(primary, carry), fraction


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


# 1-indexed days per month
_MONTHDAYS = [0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def days_in_month(year: int, month: int) -> int:
    return _MONTHDAYS[month] + (month == 2 and is_leap(year))


def resolve_day_of_month(year: int, month: int, day: int) -> int:
    """Clamp a day down to the last valid day of the given month.

    The single policy used by every operation that shifts a date by
    years or months (e.g. Jan 31 + 1 month is Feb 28 or 29).
    """
    return min(day, days_in_month(year, month))
