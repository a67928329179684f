"""yt_transcriber.pipeline – resolve → fetch → parse → result.

Only this module knows the order of the stages; each stage is a pure or
single-effect function that can be tested on its own.
"""
from __future__ import annotations

import datetime
import logging
from typing import Callable, Sequence

from .constants import DEFAULT_LANGUAGE
from .errors import EmptyTranscript, InvalidVideoId
from .fetchers import CaptionFetcher, YtDlpFetcher
from .identifiers import resolve
from .models import TranscriptResult, TranscriptSegment, build_result
from .parser import parse

__all__ = [
    "transcribe",
    "suspect_segments",
]

log = logging.getLogger(__name__)


def suspect_segments(segments: Sequence[TranscriptSegment]) -> list[TranscriptSegment]:
    """Segments whose end precedes their start (kept, but worth a warning)."""
    return [seg for seg in segments if seg.duration_seconds < 0]


def transcribe(
    raw_input: str,
    language: str = DEFAULT_LANGUAGE,
    fetcher: CaptionFetcher | None = None,
    clock: Callable[[], datetime.datetime] | None = None,
) -> TranscriptResult:
    """Return the transcript for *raw_input* (a URL or a bare video ID).

    Raises :class:`InvalidVideoId` before anything is fetched, whatever the
    fetcher raises for unavailable videos or missing tracks, and
    :class:`EmptyTranscript` when markup arrived but held no cues.
    """
    video_id = resolve(raw_input)
    if video_id is None:
        raise InvalidVideoId(raw_input)
    log.info("Resolved %r → %s", raw_input.strip(), video_id)

    fetcher = fetcher or YtDlpFetcher()
    markup = fetcher.fetch(video_id, language)

    segments = parse(markup)
    if not segments:
        raise EmptyTranscript()
    for seg in suspect_segments(segments):
        log.warning(
            "Segment %d ends before it starts (%.3f → %.3f)",
            seg.index, seg.start_seconds, seg.end_seconds,
        )

    log.info("Extracted %d segment(s) for %s [%s]", len(segments), video_id, language)
    return build_result(video_id, language, segments, clock=clock)
