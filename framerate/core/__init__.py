"""Core frame rate value type, rational primitive and serialization."""

from .errors import (
    FrameRateError,
    FrameRateParseError,
    InvalidRationalError,
    MalformedRecordError,
)
from .frame_rate import (
    STANDARD_FRAME_RATES,
    CustomFrameRate,
    FrameRate,
    StandardFrameRate,
    from_rational,
    new_frame_rate,
    to_float,
    to_rational,
)
from .rational import U32_MAX, make_rational
from .serialization import deserialize, dumps, json_schema, loads, serialize

__all__ = [
    "FrameRateError",
    "FrameRateParseError",
    "InvalidRationalError",
    "MalformedRecordError",
    "STANDARD_FRAME_RATES",
    "CustomFrameRate",
    "FrameRate",
    "StandardFrameRate",
    "from_rational",
    "new_frame_rate",
    "to_float",
    "to_rational",
    "U32_MAX",
    "make_rational",
    "deserialize",
    "dumps",
    "json_schema",
    "loads",
    "serialize",
]
