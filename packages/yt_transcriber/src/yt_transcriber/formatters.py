"""yt_transcriber.formatters – render a :class:`TranscriptResult` as plain
text, SubRip or JSON.

Renderers never reorder, filter or mutate segments and add no trailing
newline of their own.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

from .constants import EXT
from .models import TranscriptResult
from .timestamps import format_bracket, format_subtitle

__all__ = [
    "render_text",
    "render_srt",
    "render_json",
    "render",
    "format_for_path",
    "FMT",
    "EXT",
]

log = logging.getLogger(__name__)


def render_text(result: TranscriptResult, timestamps: bool = True) -> str:
    """One line per segment, optionally prefixed with ``[MM:SS]``."""
    if not timestamps:
        return "\n".join(seg.text for seg in result.segments)
    return "\n".join(
        f"{format_bracket(seg.start_seconds)} {seg.text}" for seg in result.segments
    )


def render_srt(result: TranscriptResult) -> str:
    """Numbered SubRip blocks; numbering is 1..N whatever ``index`` says."""
    return "\n\n".join(
        f"{n}\n{format_subtitle(seg.start_seconds)} --> "
        f"{format_subtitle(seg.end_seconds)}\n{seg.text}"
        for n, seg in enumerate(result.segments, 1)
    )


def render_json(result: TranscriptResult) -> str:
    """Pretty JSON of the whole result, or ``""`` if it cannot be serialised."""
    try:
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        log.debug("JSON serialisation failed (%s) - returning empty output", exc)
        return ""


FMT: dict[str, Callable[..., str]] = {
    "txt": render_text,
    "srt": render_srt,
    "json": render_json,
}


def render(result: TranscriptResult, fmt: str, *, timestamps: bool = True) -> str:
    """Dispatch to the renderer registered for *fmt*."""
    if fmt == "txt":
        return render_text(result, timestamps=timestamps)
    try:
        renderer = FMT[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt!r}") from None
    return renderer(result)


def format_for_path(path: str | Path) -> str | None:
    """Format key whose extension matches *path* (``out.srt`` → ``srt``)."""
    suffix = Path(path).suffix.lower().lstrip(".")
    for fmt, ext in EXT.items():
        if ext == suffix:
            return fmt
    return None
