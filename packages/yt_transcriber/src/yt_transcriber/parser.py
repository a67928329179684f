"""yt_transcriber.parser – WebVTT caption markup → ordered transcript segments.

The scan is a two-state machine over lines:

* SEARCHING – skip lines until one carries a ``start --> end`` range.
* COLLECTING – gather the cue's text lines until a blank line or the next
  range line.  A range line ends the block *without* being consumed, so it
  immediately starts the next cue.

Header lines (``WEBVTT``, ``Kind:``, ``Language:``) inside a block are
dropped, inline ``<...>`` tags are stripped, and cues with no text left are
skipped without leaving a gap in the output indices.
"""
from __future__ import annotations

import enum
import logging
import re

from .constants import HEADER_PREFIXES
from .models import TranscriptSegment
from .timestamps import parse_timestamp

__all__ = [
    "TIME_RANGE_RE",
    "TAG_RE",
    "parse",
    "clean_line",
]

log = logging.getLogger(__name__)

_TS = r"\d{1,2}:\d{2}:\d{2}\.\d{3}|\d{1,2}:\d{2}\.\d{3}"
TIME_RANGE_RE = re.compile(rf"({_TS})\s*-->\s*({_TS})")
TAG_RE = re.compile(r"<[^>]+>")


class _State(enum.Enum):
    SEARCHING = "searching"
    COLLECTING = "collecting"


def clean_line(line: str) -> str | None:
    """Return the caption text of *line*, or ``None`` when nothing is left."""
    line = line.strip()
    if line.startswith(HEADER_PREFIXES):
        return None
    clean = TAG_RE.sub("", line)
    return clean or None


def parse(markup: str) -> list[TranscriptSegment]:
    """Parse caption *markup* into segments in order of appearance."""
    lines = [ln.rstrip("\r") for ln in markup.split("\n")]
    segments: list[TranscriptSegment] = []
    state = _State.SEARCHING
    start = end = 0.0
    block: list[str] = []
    i = 0

    while i < len(lines) or state is _State.COLLECTING:
        if state is _State.SEARCHING:
            m = TIME_RANGE_RE.search(lines[i].strip())
            i += 1
            if m:
                start = parse_timestamp(m.group(1))
                end = parse_timestamp(m.group(2))
                block = []
                state = _State.COLLECTING
            continue

        # COLLECTING
        if i < len(lines) and lines[i].strip() and not TIME_RANGE_RE.search(lines[i]):
            text = clean_line(lines[i])
            if text is not None:
                block.append(text)
            i += 1
            continue

        state = _State.SEARCHING
        joined = " ".join(block)
        if block and joined.strip():
            segments.append(
                TranscriptSegment(
                    index=len(segments),
                    text=joined,
                    start_seconds=start,
                    end_seconds=end,
                    duration_seconds=end - start,
                )
            )

    log.debug("Parsed %d segment(s) from %d line(s)", len(segments), len(lines))
    return segments
