"""Top-level package for yt_transcriber."""

from __future__ import annotations

__version__ = "1.0.0"

from .identifiers import resolve, watch_url, VIDEO_ID_RE
from .timestamps import parse_timestamp, format_bracket, format_subtitle
from .parser import parse
from .models import TranscriptSegment, TranscriptMetadata, TranscriptResult, build_result
from .formatters import render, render_text, render_srt, render_json, format_for_path, FMT, EXT
from .errors import (
    TranscriberError,
    InvalidVideoId,
    DownloaderMissing,
    DownloaderError,
    DownloaderLaunchError,
    VideoUnavailable,
    NoCaptionsFound,
    EmptyTranscript,
    InvalidProxy,
    OutputWriteError,
)
from .fetchers import YtDlpFetcher, ApiFetcher, make_fetcher
from .pipeline import transcribe, suspect_segments
from .cli import main

__all__ = [
    "__version__",
    "resolve",
    "watch_url",
    "VIDEO_ID_RE",
    "parse_timestamp",
    "format_bracket",
    "format_subtitle",
    "parse",
    "TranscriptSegment",
    "TranscriptMetadata",
    "TranscriptResult",
    "build_result",
    "render",
    "render_text",
    "render_srt",
    "render_json",
    "format_for_path",
    "FMT",
    "EXT",
    "TranscriberError",
    "InvalidVideoId",
    "DownloaderMissing",
    "DownloaderError",
    "DownloaderLaunchError",
    "VideoUnavailable",
    "NoCaptionsFound",
    "EmptyTranscript",
    "InvalidProxy",
    "OutputWriteError",
    "YtDlpFetcher",
    "ApiFetcher",
    "make_fetcher",
    "transcribe",
    "suspect_segments",
    "main",
]
