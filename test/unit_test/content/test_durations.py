"""Unit tests for duration parsing and speech length estimates."""

import pytest

from unthink.content.durations import estimate_speech_seconds, format_duration, parse_duration
from unthink.core.errors import ContentValidationError


class TestParseDuration:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1:02:03", 3723),
            ("02:30", 150),
            ("45", 45),
            (" 10:00 ", 600),
            (90, 90),
            (None, 0),
            ("", 0),
        ],
    )
    def test_accepted_formats(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["1:x", "1:2:3:4", "-5", "1.5", -1])
    def test_rejected_values(self, value):
        with pytest.raises(ContentValidationError):
            parse_duration(value)


class TestFormatDuration:
    def test_pads_seconds(self):
        assert format_duration(125) == "2:05"

    def test_minutes_are_not_wrapped(self):
        assert format_duration(3725) == "62:05"

    def test_negative_is_zero(self):
        assert format_duration(-3) == "0:00"


class TestEstimateSpeechSeconds:
    def test_one_minute_at_speaking_rate(self):
        assert estimate_speech_seconds("word " * 150) == 60

    def test_rounds_up(self):
        assert estimate_speech_seconds("hello") == 1

    def test_empty_text(self):
        assert estimate_speech_seconds("") == 0
