"""Audio duration parsing, formatting and speech length estimation."""

from __future__ import annotations

import math
from typing import Optional, Union

from unthink.core.errors import ContentValidationError

# Average speaking rate used to estimate generated speech length
WORDS_PER_MINUTE = 150


def parse_duration(value: Optional[Union[str, int]]) -> int:
    """Convert ``HH:MM:SS``, ``MM:SS`` or plain seconds to a number of seconds.

    Empty input means an unknown duration and yields 0.

    Raises:
        ContentValidationError: if the value is negative or not in one of the formats
    """
    if value is None:
        return 0
    if isinstance(value, int):
        if value < 0:
            raise ContentValidationError("Duration cannot be negative")
        return value

    text = value.strip()
    if not text:
        return 0

    parts = text.split(":")
    if len(parts) > 3 or not all(part.isdigit() for part in parts):
        raise ContentValidationError(f"Invalid duration: {value!r}. Use HH:MM:SS, MM:SS or seconds")

    seconds = 0
    for part in parts:
        seconds = seconds * 60 + int(part)
    return seconds


def format_duration(seconds: int) -> str:
    """Format seconds as ``M:SS`` (minutes are not wrapped into hours)."""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"


def estimate_speech_seconds(text: str) -> int:
    """Estimated length of ``text`` read aloud, rounded up to whole seconds."""
    words = len(text.split())
    return math.ceil(words / WORDS_PER_MINUTE * 60)
