"""yt_transcriber.fetchers – obtain raw WebVTT caption markup for a video.

Two backends share one tiny interface, ``fetch(video_id, language) -> str``:

* :class:`YtDlpFetcher` shells out to ``yt-dlp`` and reads the ``.vtt`` it
  leaves in a scratch directory that is removed on every exit path.
* :class:`ApiFetcher` talks to YouTube through youtube-transcript-api and
  re-serialises the track with the library's WebVTT formatter.

Both raise :mod:`yt_transcriber.errors` exceptions for every kind of absence.
"""
from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol

import requests
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.formatters import WebVTTFormatter

from .constants import BACKENDS, DOWNLOADER, UNAVAILABLE_MARKERS
from .errors import (
    AgeRestricted,
    ApiVideoUnavailable,
    CouldNotRetrieveTranscript,
    DownloaderError,
    DownloaderLaunchError,
    NoCaptionsFound,
    NoTranscriptFound,
    OutputWriteError,
    TranscriptsDisabled,
    VideoUnavailable,
    VideoUnplayable,
)
from .identifiers import watch_url
from .installer import ensure_available
from .utils import make_proxy, make_session

__all__ = [
    "CaptionFetcher",
    "YtDlpFetcher",
    "ApiFetcher",
    "make_fetcher",
]

log = logging.getLogger(__name__)


class CaptionFetcher(Protocol):
    def fetch(self, video_id: str, language: str) -> str: ...


class YtDlpFetcher:
    """Download captions with the external ``yt-dlp`` tool."""

    def __init__(self, executable: str = DOWNLOADER, *, auto_install: bool = True):
        self.executable = executable
        self.auto_install = auto_install

    def command(self, video_id: str, language: str, out_dir: Path) -> list[str]:
        return [
            self.executable,
            "--write-sub",
            "--write-auto-sub",
            "--sub-lang",
            language,
            "--sub-format",
            "vtt",
            "--skip-download",
            "--no-warnings",
            "-o",
            str(out_dir / "%(id)s"),
            watch_url(video_id),
        ]

    def fetch(self, video_id: str, language: str) -> str:
        if self.executable == DOWNLOADER:
            ensure_available(self.auto_install)

        try:
            scratch = tempfile.TemporaryDirectory(prefix="yt_transcriber_")
        except OSError as exc:
            raise OutputWriteError(f"Failed to create temp directory - {exc}") from exc

        with scratch as tmp:
            out_dir = Path(tmp)
            cmd = self.command(video_id, language, out_dir)
            log.debug("Running: %s", " ".join(cmd))
            try:
                proc = subprocess.run(
                    cmd,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    check=False,
                )
            except OSError as exc:
                raise DownloaderLaunchError(f"Failed to run {self.executable} - {exc}") from exc

            if proc.returncode != 0:
                stderr = proc.stderr or ""
                if any(marker in stderr for marker in UNAVAILABLE_MARKERS):
                    raise VideoUnavailable()
                raise DownloaderError(f"{self.executable} failed - {stderr.strip()}")

            markup = self._read_markup(out_dir, video_id, language)

        if markup is None:
            raise NoCaptionsFound(language)
        return markup

    @staticmethod
    def _read_markup(out_dir: Path, video_id: str, language: str) -> str | None:
        preferred = [
            out_dir / f"{video_id}.{language}.vtt",
            out_dir / f"{video_id}.{language}-orig.vtt",
        ]
        for path in preferred + sorted(out_dir.glob("*.vtt")):
            if not path.is_file():
                continue
            try:
                markup = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                log.debug("Skip unreadable %s (%s)", path.name, exc)
                continue
            log.info("Using caption file %s", path.name)
            return markup
        return None


class ApiFetcher:
    """Fetch captions through youtube-transcript-api (no external tool)."""

    def __init__(self, proxy: str | None = None, user_agent: str | None = None):
        self.proxy = proxy
        self.user_agent = user_agent

    def _api(self) -> YouTubeTranscriptApi:
        proxy_cfg = make_proxy(self.proxy) if self.proxy else None
        return YouTubeTranscriptApi(
            proxy_config=proxy_cfg,
            http_client=make_session(self.user_agent),
        )

    def fetch(self, video_id: str, language: str) -> str:
        try:
            fetched = self._api().fetch(video_id, languages=[language])
        except (NoTranscriptFound, TranscriptsDisabled) as exc:
            log.debug("No captions via API: %s", exc.__class__.__name__)
            raise NoCaptionsFound(language) from exc
        except (ApiVideoUnavailable, VideoUnplayable, AgeRestricted) as exc:
            raise VideoUnavailable() from exc
        except CouldNotRetrieveTranscript as exc:
            raise DownloaderError(
                f"youtube-transcript-api failed - {exc.__class__.__name__}"
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise DownloaderError(f"Network error while fetching captions - {exc}") from exc
        return WebVTTFormatter().format_transcript(fetched)


def make_fetcher(
    backend: str,
    *,
    proxy: str | None = None,
    auto_install: bool = True,
) -> CaptionFetcher:
    """Return the fetcher registered under *backend* (``yt-dlp`` or ``api``)."""
    if backend == "yt-dlp":
        if proxy:
            log.warning("--proxy is ignored by the yt-dlp backend")
        return YtDlpFetcher(auto_install=auto_install)
    if backend == "api":
        return ApiFetcher(proxy=proxy)
    raise ValueError(f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}")
