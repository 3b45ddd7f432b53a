"""Unit tests for the FrameRateParser."""

import logging
import time
from fractions import Fraction

import pytest

from framerate import CustomFrameRate, InvalidRationalError, StandardFrameRate
from framerate.core import FrameRateParseError
from framerate.utils import FrameRateParser, describe, is_standard, parse_frame_rate, to_frame_duration


class TestFrameRateParser:
    """Test frame rate parsing functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = FrameRateParser()

    @pytest.mark.parametrize("text, expected", [
        ("23.976", StandardFrameRate.FPS_23_976),
        ("23.98", StandardFrameRate.FPS_23_976),
        ("24.975", StandardFrameRate.FPS_24_975),
        ("24.97", StandardFrameRate.FPS_24_975),
        ("29.97", StandardFrameRate.FPS_29_97),
        ("59.94", StandardFrameRate.FPS_59_94),
        ("120", StandardFrameRate.FPS_120),
        ("25fps", StandardFrameRate.FPS_25),
        (" 29.97 FPS ", StandardFrameRate.FPS_29_97),
    ])
    def test_standard_labels(self, text, expected):
        assert self.parser.parse(text) is expected

    def test_ratio(self):
        assert self.parser.parse("30000/1001") is StandardFrameRate.FPS_29_97
        assert self.parser.parse("  60000 / 1001  ") is StandardFrameRate.FPS_59_94

    def test_non_reduced_ratio(self):
        assert self.parser.parse("200/4") is StandardFrameRate.FPS_50
        assert self.parser.parse("6/9") == CustomFrameRate(Fraction(2, 3))

    def test_exact_decimal(self):
        assert self.parser.parse("12.5") == CustomFrameRate(Fraction(25, 2))
        assert self.parser.parse("48") == CustomFrameRate(Fraction(48))

    def test_unlisted_decimal_is_exact(self):
        # Only the labels map to x/1001 rates
        assert self.parser.parse("29.970") == CustomFrameRate(Fraction(2997, 100))

    def test_frame_duration(self):
        assert self.parser.parse("1001/30000s") is StandardFrameRate.FPS_29_97
        assert self.parser.parse("1001/24000s") is StandardFrameRate.FPS_23_976
        assert self.parser.parse("1/25s") is StandardFrameRate.FPS_25
        assert self.parser.parse("0.04s") is StandardFrameRate.FPS_25

    @pytest.mark.parametrize("text", ["", "   ", "invalid", "N/A", "1/0", "-25", "0/1s", "1/0s", "s", "fps", None])
    def test_invalid_returns_default(self, text):
        assert self.parser.parse(text) is None

    def test_custom_default(self):
        parser = FrameRateParser(default=StandardFrameRate.FPS_25)
        assert parser.parse("garbage") is StandardFrameRate.FPS_25

    def test_invalid_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="framerate.utils.frame_rate_parser"):
            self.parser.parse("garbage")
        assert "Could not parse frame rate" in caplog.text

    def test_is_standard(self):
        assert is_standard(StandardFrameRate.FPS_30)
        assert not is_standard(CustomFrameRate(Fraction(2, 3)))
        assert not is_standard(CustomFrameRate(Fraction(30)))

    @pytest.mark.parametrize("text", ["1e50000000", "1E9", "2.5e1", "1e50000000s", "+25", "1_000", "12.", ".5"])
    def test_rejects_non_plain_decimals(self, text):
        start = time.monotonic()
        assert self.parser.parse(text) is None
        assert time.monotonic() - start < 1.0


class TestParseFrameRate:
    """Test the strict parser."""

    def test_valid(self):
        assert parse_frame_rate("29.97") is StandardFrameRate.FPS_29_97

    @pytest.mark.parametrize("text", ["", "abc", "1/0", "4294967296"])
    def test_invalid_raises(self, text):
        with pytest.raises(FrameRateParseError):
            parse_frame_rate(text)


class TestFrameDuration:
    """Test formatting of FCPXML frame durations."""

    def test_standard_rates(self):
        assert to_frame_duration(StandardFrameRate.FPS_29_97) == "1001/30000s"
        assert to_frame_duration(StandardFrameRate.FPS_23_976) == "1001/24000s"
        assert to_frame_duration(StandardFrameRate.FPS_25) == "1/25s"

    def test_custom_rate(self):
        assert to_frame_duration(CustomFrameRate(Fraction(25, 2))) == "2/25s"

    def test_zero_rate(self):
        with pytest.raises(InvalidRationalError):
            to_frame_duration(CustomFrameRate(Fraction(0)))

    def test_parse_round_trip(self):
        for frame_rate in StandardFrameRate:
            assert parse_frame_rate(to_frame_duration(frame_rate)) is frame_rate


class TestDescribe:
    """Test human readable names."""

    def test_standard(self):
        assert describe(StandardFrameRate.FPS_29_97) == "29.97 fps"

    def test_custom_integer(self):
        assert describe(CustomFrameRate(Fraction(48))) == "48 fps"

    def test_custom_fraction(self):
        assert describe(CustomFrameRate(Fraction(25, 2))) == "12.500 fps (25/2)"
