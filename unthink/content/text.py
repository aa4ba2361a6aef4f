"""Small text formatting helpers shared by services and request models."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional

EXCERPT_LENGTH = 200


def make_excerpt(content: str, limit: int = EXCERPT_LENGTH) -> str:
    """First ``limit`` characters of ``content``, with an ellipsis when it was cut."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Collapse empty or whitespace-only strings to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def format_file_size(size: int) -> str:
    """Human readable size such as ``"1.5 KB"`` or ``"5 MB"``."""
    if size <= 0:
        return "0 Bytes"
    units = ("Bytes", "KB", "MB", "GB")
    exponent = min(int(math.floor(math.log(size, 1024))), len(units) - 1)
    value = round(size / 1024**exponent, 2)
    return f"{value:g} {units[exponent]}"


def format_long_date(value: date | datetime) -> str:
    """Format a date like ``January 5, 2026``."""
    return f"{value:%B} {value.day}, {value.year}"
