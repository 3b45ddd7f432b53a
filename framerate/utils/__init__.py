"""Utility modules for parsing and logging."""

from .frame_rate_parser import (
    FRAME_RATE_LABELS,
    FrameRateParser,
    describe,
    is_standard,
    parse_frame_rate,
    to_frame_duration,
)
from .logging_config import setup_logging

__all__ = [
    "FRAME_RATE_LABELS",
    "FrameRateParser",
    "describe",
    "is_standard",
    "parse_frame_rate",
    "to_frame_duration",
    "setup_logging",
]
