"""yt_transcriber.identifiers – turn free-form user input into a canonical
11-character YouTube video ID.

Resolution never raises: ``None`` is the signal for "not a video".
"""
from __future__ import annotations

import re
from urllib.parse import parse_qsl, urlsplit

from .constants import HOST_PREFIXES, MAIN_HOST, PATH_KEYWORDS, SHORT_HOST, WATCH_URL

__all__ = [
    "VIDEO_ID_RE",
    "is_video_id",
    "resolve",
    "watch_url",
]

VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")


def is_video_id(text: str) -> bool:
    return VIDEO_ID_RE.fullmatch(text) is not None


def _clean_host(host: str) -> str:
    for prefix in HOST_PREFIXES:
        if host.startswith(prefix):
            return host[len(prefix):]
    return host


def _from_path(segments: list[str]) -> str | None:
    # The first keyword decides; a bad ID after it is not retried further on.
    for i, seg in enumerate(segments):
        if seg in PATH_KEYWORDS:
            if i + 1 < len(segments) and is_video_id(segments[i + 1]):
                return segments[i + 1]
            return None
    return None


def resolve(raw: str) -> str | None:
    """Return the video ID in *raw* or ``None``.

    A bare ID wins over any URL reading.  Accepted URLs::

        https://youtu.be/ID
        https://www.youtube.com/watch?v=ID
        https://m.youtube.com/shorts/ID
        https://music.youtube.com/embed/ID   (also /v/, /live/, /clip/)
    """
    text = raw.strip()
    if is_video_id(text):
        return text

    try:
        parts = urlsplit(text)
        host = parts.hostname or ""
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None

    host = _clean_host(host)
    segments = [s for s in parts.path.split("/") if s]

    if host == SHORT_HOST:
        candidate = segments[0] if segments else ""
        return candidate if is_video_id(candidate) else None

    if host == MAIN_HOST:
        for key, value in parse_qsl(parts.query, keep_blank_values=True):
            if key == "v":
                if is_video_id(value):
                    return value
                break
        return _from_path(segments)

    return None


def watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id)
