"""
Rational Number Module
Exact numerator/denominator pairs over unsigned 32-bit integers, always in lowest terms.
"""

from fractions import Fraction

from .errors import InvalidRationalError

U32_MAX = 2**32 - 1


def _check_component(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRationalError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0 or value > U32_MAX:
        raise InvalidRationalError(f"{name} {value} is outside the unsigned 32-bit range")
    return value


def make_rational(numerator: int, denominator: int = 1) -> Fraction:
    """
    Build a reduced rational from two unsigned 32-bit integers.

    Args:
        numerator (int): Numerator, 0 to 2**32 - 1
        denominator (int): Denominator, 1 to 2**32 - 1

    Returns:
        Fraction: The value in lowest terms

    Raises:
        InvalidRationalError: If the denominator is zero or a component is out of range
    """
    _check_component(numerator, "numerator")
    _check_component(denominator, "denominator")
    if denominator == 0:
        raise InvalidRationalError(f"denominator cannot be zero ({numerator}/0)")
    return Fraction(numerator, denominator)


def check_rational(rational: Fraction) -> Fraction:
    """Reject a Fraction whose reduced parts do not fit the unsigned 32-bit range."""
    if not isinstance(rational, Fraction):
        raise InvalidRationalError(f"expected a Fraction, got {type(rational).__name__}")
    _check_component(rational.numerator, "numerator")
    _check_component(rational.denominator, "denominator")
    return rational
