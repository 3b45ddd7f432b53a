"""
Frame Rate Module
Named broadcast frame rates plus a custom escape for any other exact rational rate.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Dict, Tuple, Union

from .rational import check_rational, make_rational


class StandardFrameRate(Enum):
    """The ten well-known frame rates, each with its exact rational value."""

    # Integer rates
    FPS_24 = ("24", 24, 1)
    FPS_25 = ("25", 25, 1)
    FPS_30 = ("30", 30, 1)
    FPS_50 = ("50", 50, 1)
    FPS_60 = ("60", 60, 1)
    FPS_120 = ("120", 120, 1)

    # NTSC-style x/1001 rates
    FPS_23_976 = ("23.976", 24000, 1001)
    FPS_24_975 = ("24.975", 25000, 1001)
    FPS_29_97 = ("29.97", 30000, 1001)
    FPS_59_94 = ("59.94", 60000, 1001)

    def __init__(self, label: str, numerator: int, denominator: int):
        self.label = label
        self.numerator = numerator
        self.denominator = denominator

    def to_rational(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __eq__(self, other):
        return _rational_eq(self, other)

    def __hash__(self):
        return hash(self.to_rational())

    def __str__(self) -> str:
        return f"{self.label} fps"


@dataclass(frozen=True, eq=False)
class CustomFrameRate:
    """
    Any frame rate that is not one of the standard rates.

    The rational is kept in lowest terms, so ``CustomFrameRate(Fraction(6, 9))``
    equals ``CustomFrameRate(Fraction(2, 3))``. Wrapping a standard value here
    keeps the custom shape but still compares equal to the standard rate;
    use :func:`from_rational` to get the canonical value.
    """

    rational: Fraction

    def __post_init__(self):
        check_rational(self.rational)

    def to_rational(self) -> Fraction:
        return self.rational

    def __float__(self) -> float:
        return self.rational.numerator / self.rational.denominator

    def __eq__(self, other):
        return _rational_eq(self, other)

    def __hash__(self):
        return hash(self.rational)

    def __str__(self) -> str:
        return f"{self.rational.numerator}/{self.rational.denominator} fps"


FrameRate = Union[StandardFrameRate, CustomFrameRate]


def _rational_eq(frame_rate, other):
    # Equal iff the reduced rationals are equal, whichever shape holds them
    if not isinstance(other, (StandardFrameRate, CustomFrameRate)):
        return NotImplemented
    return frame_rate.to_rational() == other.to_rational()


STANDARD_FRAME_RATES: Tuple[StandardFrameRate, ...] = tuple(StandardFrameRate)

_STANDARD_BY_PAIR: Dict[Tuple[int, int], StandardFrameRate] = {
    (rate.numerator, rate.denominator): rate for rate in StandardFrameRate
}


def from_rational(rational: Fraction) -> FrameRate:
    """
    Normalize a rational into its canonical frame rate.

    Args:
        rational (Fraction): Any non-negative rational with u32 parts once reduced

    Returns:
        FrameRate: The matching standard rate, otherwise a CustomFrameRate
    """
    check_rational(rational)
    standard = _STANDARD_BY_PAIR.get((rational.numerator, rational.denominator))
    if standard is not None:
        return standard
    return CustomFrameRate(rational)


def new_frame_rate(numerator: int, denominator: int = 1) -> FrameRate:
    """Build the canonical frame rate for ``numerator/denominator``."""
    return from_rational(make_rational(numerator, denominator))


def to_rational(frame_rate: FrameRate) -> Fraction:
    """Exact rational value of a frame rate."""
    return frame_rate.to_rational()


def to_float(frame_rate: FrameRate) -> float:
    """Frames per second as a double."""
    return float(frame_rate)
