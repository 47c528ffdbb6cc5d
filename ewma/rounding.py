# rounding.py

from enum import Enum


class Rounding(Enum):
    """Division policy of the integer filter step."""
    TRUNCATE = 'truncate'              # toward zero
    NEAREST = 'nearest'                # to nearest, exact halves away from zero
    AWAY_FROM_ZERO = 'away_from_zero'  # any remainder rounds up in magnitude


def divide(dividend: int, divisor: int, rounding: Rounding) -> int:
    """
    Integer division of dividend by a positive divisor under the given policy.
    The result is symmetric around zero: divide(-a, b) == -divide(a, b).
    """
    quotient, remainder = divmod(abs(dividend), divisor)
    if remainder:
        if rounding is Rounding.AWAY_FROM_ZERO:
            quotient += 1
        elif rounding is Rounding.NEAREST and 2 * remainder >= divisor:
            quotient += 1
    return -quotient if dividend < 0 else quotient
