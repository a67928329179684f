"""yt_transcriber.timestamps – conversions between caption clock text and
seconds.

Parsing is deliberately lenient: a field that is not a number counts as
zero, so one bad cue never aborts a whole transcript.
"""
from __future__ import annotations

import math

__all__ = [
    "parse_timestamp",
    "format_bracket",
    "format_subtitle",
]


def _num(field: str) -> float:
    try:
        return float(field)
    except ValueError:
        return 0.0


def parse_timestamp(text: str) -> float:
    """Return seconds for ``MM:SS.mmm`` or ``HH:MM:SS.mmm``; 0.0 otherwise."""
    parts = text.split(":")
    if len(parts) == 2:
        mins, secs = (_num(p) for p in parts)
        return mins * 60.0 + secs
    if len(parts) == 3:
        hours, mins, secs = (_num(p) for p in parts)
        return hours * 3600.0 + mins * 60.0 + secs
    return 0.0


def format_bracket(seconds: float) -> str:
    """``[MM:SS]`` with no hour rollover (minutes may exceed 59)."""
    mins = math.floor(seconds / 60.0)
    secs = math.floor(seconds % 60.0)
    return f"[{mins:02d}:{secs:02d}]"


def format_subtitle(seconds: float) -> str:
    """``HH:MM:SS,mmm`` as used by SubRip files."""
    hours = math.floor(seconds / 3600.0)
    mins = math.floor((seconds % 3600.0) / 60.0)
    secs = math.floor(seconds % 60.0)
    millis = math.floor((seconds % 1.0) * 1000.0)
    return f"{hours:02d}:{mins:02d}:{secs:02d},{millis:03d}"
