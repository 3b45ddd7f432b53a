"""Exceptions raised by the frame rate core."""


class FrameRateError(ValueError):
    """Base class for every frame rate failure."""


class InvalidRationalError(FrameRateError):
    """A rational with a zero denominator or a component outside the u32 range."""


class MalformedRecordError(FrameRateError):
    """A serialized record that is missing or mistyping its ``num``/``den`` fields."""


class FrameRateParseError(FrameRateError):
    """Text that does not describe a frame rate."""
