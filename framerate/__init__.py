"""
Frame Rate Toolkit

Exact video frame rates: named broadcast rates, custom rationals and a stable
``{"num", "den"}`` serialized form.
"""

__version__ = "1.0.0"
__author__ = "Payette Forward"

from .core import (
    CustomFrameRate,
    FrameRate,
    FrameRateError,
    InvalidRationalError,
    MalformedRecordError,
    StandardFrameRate,
    deserialize,
    from_rational,
    new_frame_rate,
    serialize,
    to_float,
    to_rational,
)

__all__ = [
    "CustomFrameRate",
    "FrameRate",
    "FrameRateError",
    "InvalidRationalError",
    "MalformedRecordError",
    "StandardFrameRate",
    "deserialize",
    "from_rational",
    "new_frame_rate",
    "serialize",
    "to_float",
    "to_rational",
]
