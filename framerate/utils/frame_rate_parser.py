"""
Frame Rate Parser Module
Reads frame rates from ratios ("30000/1001"), standard labels ("29.97") and
FCPXML frame durations ("1001/30000s"), and formats frame durations back out.
"""

import logging
import re
from fractions import Fraction
from typing import Dict, Optional

from ..core import (
    FrameRate,
    FrameRateParseError,
    InvalidRationalError,
    StandardFrameRate,
    from_rational,
    make_rational,
)

# Set up logging
logger = logging.getLogger(__name__)

# Labels accepted for the standard rates, including common shorthand
FRAME_RATE_LABELS: Dict[str, StandardFrameRate] = {rate.label: rate for rate in StandardFrameRate}
FRAME_RATE_LABELS.update({
    "23.98": StandardFrameRate.FPS_23_976,
    "24.97": StandardFrameRate.FPS_24_975,
})

# Plain decimals only, no exponent notation
DECIMAL_PATTERN = re.compile(r"\d+(\.\d+)?")


def _parse_ratio(text: str) -> Fraction:
    if '/' in text:
        numerator, denominator = text.split('/', 1)
        return make_rational(int(numerator), int(denominator))
    decimal = text.strip()
    if not DECIMAL_PATTERN.fullmatch(decimal):
        raise FrameRateParseError(f"not a ratio or plain decimal: {text!r}")
    return Fraction(decimal)


def parse_frame_rate(text: str) -> FrameRate:
    """
    Parse a frame rate string.

    Args:
        text (str): "29.97", "24fps", "30000/1001", "12.5" or "1001/30000s"

    Returns:
        FrameRate: Normalized frame rate

    Raises:
        FrameRateParseError: If the text does not describe a valid frame rate
    """
    if text is None:
        raise FrameRateParseError("no frame rate given")

    value = text.strip()
    if value.lower().endswith('fps'):
        value = value[:-3].strip()
    if not value:
        raise FrameRateParseError(f"empty frame rate: {text!r}")

    if value in FRAME_RATE_LABELS:
        return FRAME_RATE_LABELS[value]

    try:
        if value.endswith('s'):
            # Frame duration, the reciprocal of the rate
            return from_rational(1 / _parse_ratio(value[:-1]))
        return from_rational(_parse_ratio(value))
    except (ValueError, ZeroDivisionError) as e:
        raise FrameRateParseError(f"could not parse frame rate {text!r}: {e}") from e


def to_frame_duration(frame_rate: FrameRate) -> str:
    """
    Format the duration of one frame in FCPXML rational time.

    Args:
        frame_rate (FrameRate): Frame rate

    Returns:
        str: e.g. "1001/30000s" for 29.97, "1/25s" for 25
    """
    rational = frame_rate.to_rational()
    if rational == 0:
        raise InvalidRationalError("a zero frame rate has no frame duration")
    duration = 1 / rational
    return f"{duration.numerator}/{duration.denominator}s"


def is_standard(frame_rate: FrameRate) -> bool:
    """True if ``frame_rate`` is one of the named standard rates."""
    return isinstance(frame_rate, StandardFrameRate)


def describe(frame_rate: FrameRate) -> str:
    """Human readable name, e.g. "29.97 fps" or "12.500 fps (25/2)"."""
    if isinstance(frame_rate, StandardFrameRate):
        return f"{frame_rate.label} fps"

    rational = frame_rate.to_rational()
    if rational.denominator == 1:
        return f"{rational.numerator} fps"
    return f"{float(frame_rate):.3f} fps ({rational.numerator}/{rational.denominator})"


class FrameRateParser:
    """
    Lenient frame rate parser.

    Unparseable input is logged and replaced with ``default`` instead of raising.
    """

    def __init__(self, default: Optional[FrameRate] = None):
        self.default = default

    def parse(self, text: Optional[str]) -> Optional[FrameRate]:
        """
        Parse ``text`` into a frame rate.

        Args:
            text (str, optional): Frame rate string

        Returns:
            FrameRate: Parsed frame rate, or the parser default if ``text`` is invalid
        """
        try:
            return parse_frame_rate(text)
        except FrameRateParseError as e:
            logger.warning(f"Could not parse frame rate: {e}")
            return self.default
