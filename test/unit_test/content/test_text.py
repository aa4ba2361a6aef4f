"""Unit tests for text formatting helpers."""

from datetime import date, datetime

from unthink.content.text import (
    EXCERPT_LENGTH,
    blank_to_none,
    format_file_size,
    format_long_date,
    make_excerpt,
)


class TestMakeExcerpt:
    def test_short_content_is_unchanged(self):
        content = "x" * EXCERPT_LENGTH
        assert make_excerpt(content) == content

    def test_long_content_is_cut_with_ellipsis(self):
        content = "y" * (EXCERPT_LENGTH + 1)
        assert make_excerpt(content) == "y" * EXCERPT_LENGTH + "..."


class TestBlankToNone:
    def test_whitespace_collapses(self):
        assert blank_to_none("   ") is None
        assert blank_to_none("") is None
        assert blank_to_none(None) is None

    def test_value_is_trimmed(self):
        assert blank_to_none("  hello ") == "hello"


class TestFormatFileSize:
    def test_zero(self):
        assert format_file_size(0) == "0 Bytes"

    def test_bytes(self):
        assert format_file_size(512) == "512 Bytes"

    def test_kilobytes(self):
        assert format_file_size(1536) == "1.5 KB"

    def test_megabytes(self):
        assert format_file_size(5 * 1024 * 1024) == "5 MB"


def test_format_long_date():
    assert format_long_date(date(2026, 1, 5)) == "January 5, 2026"
    assert format_long_date(datetime(2025, 12, 31, 23, 59)) == "December 31, 2025"
