"""
Configuration settings for the frame rate tools.
"""

import os
from dataclasses import dataclass
from typing import Optional

from ..core import FrameRate, FrameRateParseError
from ..utils.frame_rate_parser import parse_frame_rate


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass
class AppSettings:
    """Application-wide settings."""

    # Frame Rate Settings
    default_frame_rate: str = "29.97"

    # Output Options
    json_indent: Optional[int] = None  # None prints compact JSON

    # Debug Options
    log_file: Optional[str] = None
    verbose_logging: bool = False

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Create settings from environment variables."""
        return cls(
            default_frame_rate=os.getenv("FRAMERATE_DEFAULT", "29.97"),
            json_indent=_optional_int(os.getenv("FRAMERATE_JSON_INDENT")),
            log_file=os.getenv("FRAMERATE_LOG_FILE") or None,
            verbose_logging=os.getenv("VERBOSE_LOGGING", "false").lower() == "true",
        )

    def get_default_frame_rate(self) -> FrameRate:
        """Parse the configured default frame rate."""
        return parse_frame_rate(self.default_frame_rate)

    def validate(self) -> None:
        """Validate settings and raise errors if invalid."""
        try:
            self.get_default_frame_rate()
        except FrameRateParseError as e:
            raise ValueError(f"Invalid FRAMERATE_DEFAULT: {e}") from e

        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"Invalid JSON indent: {self.json_indent}")
