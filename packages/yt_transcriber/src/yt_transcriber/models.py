"""Immutable transcript data passed between the parser and the renderers."""

from __future__ import annotations

import datetime
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable

__all__ = [
    "TranscriptSegment",
    "TranscriptMetadata",
    "TranscriptResult",
    "build_result",
    "utc_now",
]


@dataclass(frozen=True)
class TranscriptSegment:
    """One timed cue.  ``index`` is its 0-based position in the transcript."""

    index: int
    text: str
    start_seconds: float
    end_seconds: float
    duration_seconds: float


@dataclass(frozen=True)
class TranscriptMetadata:
    total_segments: int
    extracted_at: str


@dataclass(frozen=True)
class TranscriptResult:
    video_id: str
    language: str
    segments: tuple[TranscriptSegment, ...]
    metadata: TranscriptMetadata

    def to_dict(self) -> dict[str, Any]:
        """Nested plain-data view with the same field names and order."""
        data = asdict(self)
        data["segments"] = list(data["segments"])
        return data


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def build_result(
    video_id: str,
    language: str,
    segments: Iterable[TranscriptSegment],
    clock: Callable[[], datetime.datetime] | None = None,
) -> TranscriptResult:
    """Freeze *segments* into a result stamped with one call to *clock*."""
    segs = tuple(segments)
    stamp = (clock or utc_now)()
    return TranscriptResult(
        video_id=video_id,
        language=language,
        segments=segs,
        metadata=TranscriptMetadata(
            total_segments=len(segs),
            extracted_at=stamp.isoformat(),
        ),
    )
