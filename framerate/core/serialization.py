"""
Frame Rate Serialization
Encodes frame rates as ``{"num": ..., "den": ...}`` records and decodes them back to canonical values.
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Optional

from .errors import InvalidRationalError, MalformedRecordError
from .frame_rate import FrameRate, from_rational
from .rational import U32_MAX, make_rational

RECORD_FIELDS = ("num", "den")


def serialize(frame_rate: FrameRate) -> Dict[str, int]:
    """
    Convert a frame rate to its serialized record.

    Args:
        frame_rate (FrameRate): Standard or custom frame rate

    Returns:
        Dict[str, int]: Reduced numerator and denominator, e.g. ``{"num": 30000, "den": 1001}``
    """
    rational = frame_rate.to_rational()
    return {"num": rational.numerator, "den": rational.denominator}


def _read_u32(record: Mapping, field: str) -> int:
    if field not in record:
        raise MalformedRecordError(f"missing field '{field}'")
    value = record[field]
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecordError(
            f"field '{field}' must be an unsigned 32-bit integer, got {type(value).__name__}"
        )
    if value < 0 or value > U32_MAX:
        raise MalformedRecordError(f"field '{field}' value {value} is outside the unsigned 32-bit range")
    return value


def deserialize(record: Any) -> FrameRate:
    """
    Decode a serialized record into its canonical frame rate.

    Non-reduced input collapses to the same value as its reduced form, so
    ``{"num": 200, "den": 4}`` gives ``StandardFrameRate.FPS_50``. Keys other
    than ``num`` and ``den`` are ignored.

    Args:
        record: Mapping with ``num`` and ``den`` unsigned 32-bit integers

    Returns:
        FrameRate: Normalized frame rate

    Raises:
        MalformedRecordError: If the record or one of its fields is malformed
        InvalidRationalError: If ``den`` is zero
    """
    if not isinstance(record, Mapping):
        raise MalformedRecordError(f"frame rate record must be a mapping, got {type(record).__name__}")

    numerator = _read_u32(record, "num")
    denominator = _read_u32(record, "den")
    if denominator == 0:
        raise InvalidRationalError(f"frame rate record has a zero denominator ({numerator}/0)")

    return from_rational(make_rational(numerator, denominator))


def dumps(frame_rate: FrameRate, indent: Optional[int] = None) -> str:
    """Serialize a frame rate to JSON text."""
    return json.dumps(serialize(frame_rate), indent=indent)


def loads(text: str) -> FrameRate:
    """Decode JSON text produced by :func:`dumps` (or any equivalent record)."""
    try:
        record = json.loads(text)
    except (TypeError, RecursionError, json.JSONDecodeError) as e:
        raise MalformedRecordError(f"invalid frame rate JSON: {e}") from e
    return deserialize(record)


def json_schema() -> Dict[str, Any]:
    """JSON schema describing the serialized record."""
    return {
        "title": "FrameRate",
        "type": "object",
        "properties": {
            "num": {"type": "integer", "minimum": 0, "maximum": U32_MAX},
            "den": {"type": "integer", "minimum": 1, "maximum": U32_MAX},
        },
        "required": list(RECORD_FIELDS),
    }
