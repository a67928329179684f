"""yt_transcriber.errors – domain exceptions plus compatibility wrappers
around youtube-transcript-api error classes.  New modules should import
from here instead of digging into the library's private ``_errors`` module.
"""
from __future__ import annotations

from importlib import import_module

_errors = import_module("youtube_transcript_api._errors")

CouldNotRetrieveTranscript = getattr(_errors, "CouldNotRetrieveTranscript")
NoTranscriptFound = getattr(_errors, "NoTranscriptFound")
TranscriptsDisabled = getattr(_errors, "TranscriptsDisabled")
ApiVideoUnavailable = getattr(_errors, "VideoUnavailable")


class _Placeholder(Exception):
    """Stub used when the underlying library removed a class."""


VideoUnplayable = getattr(_errors, "VideoUnplayable", _Placeholder)
AgeRestricted = getattr(_errors, "AgeRestricted", _Placeholder)


class TranscriberError(Exception):
    """Base class for all yt-transcriber errors.

    ``exit_code`` is the process status the CLI reports for the error.
    """

    exit_code = 1


class InvalidVideoId(TranscriberError):
    """Input is neither a video ID nor a recognised YouTube URL."""

    def __init__(self, raw: str = ""):
        super().__init__("Invalid YouTube URL or video ID")
        self.raw = raw


class DownloaderMissing(TranscriberError):
    """yt-dlp is not installed and could not be installed."""


class DownloaderError(TranscriberError):
    """The caption downloader ran but reported a failure."""

    exit_code = 2


class DownloaderLaunchError(TranscriberError):
    """The caption downloader could not be started at all."""

    exit_code = 3


class VideoUnavailable(TranscriberError):
    """Video is private, deleted or otherwise restricted."""

    exit_code = 2

    def __init__(self, message: str = "Video is unavailable (private/deleted/restricted)"):
        super().__init__(message)


class NoCaptionsFound(TranscriberError):
    """No caption track exists for the requested language."""

    exit_code = 2

    def __init__(self, language: str):
        super().__init__(f"No subtitles available for this video in '{language}' language")
        self.language = language


class EmptyTranscript(TranscriberError):
    """Caption markup was found but no segment could be extracted from it."""

    exit_code = 2

    def __init__(self):
        super().__init__("No transcript content found")


class InvalidProxy(TranscriberError):
    """A --proxy value could not be turned into a proxy configuration."""


class OutputWriteError(TranscriberError):
    """The rendered transcript could not be written to its destination."""

    exit_code = 4


__all__ = [
    "CouldNotRetrieveTranscript",
    "NoTranscriptFound",
    "TranscriptsDisabled",
    "ApiVideoUnavailable",
    "VideoUnplayable",
    "AgeRestricted",
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
]
