from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from yt_transcriber.models import TranscriptSegment, build_result  # noqa: E402

VIDEO_ID = "dQw4w9WgXcQ"

SAMPLE_VTT = """WEBVTT
Kind: captions
Language: en

00:00:01.000 --> 00:00:03.000 align:start position:0%
Hello <c>world</c>

00:00:03.000 --> 00:00:05.500
<00:00:03.200><c>second</c> line
continues here

01:02:03.456 --> 01:02:04.000
Language: en
late cue
"""

FIXED_NOW = datetime.datetime(2025, 6, 17, 12, 34, 56, tzinfo=datetime.timezone.utc)


class FakeFetcher:
    """Return canned markup (or raise) and remember every call."""

    def __init__(self, markup: str = SAMPLE_VTT, exc: Exception | None = None):
        self.markup = markup
        self.exc = exc
        self.calls: list[tuple[str, str]] = []

    def fetch(self, video_id: str, language: str) -> str:
        self.calls.append((video_id, language))
        if self.exc is not None:
            raise self.exc
        return self.markup


@pytest.fixture
def sample_vtt() -> str:
    return SAMPLE_VTT


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def segments() -> list[TranscriptSegment]:
    return [
        TranscriptSegment(3, "Hello world", 1.0, 3.0, 2.0),
        TranscriptSegment(7, "second line", 65.0, 66.25, 1.25),
    ]


@pytest.fixture
def result(segments, fixed_clock):
    return build_result(VIDEO_ID, "en", segments, clock=fixed_clock)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def patch_fetcher(monkeypatch):
    """Make the CLI use a FakeFetcher; yields it for inspection."""
    fake = FakeFetcher()
    monkeypatch.setattr("yt_transcriber.cli.make_fetcher", lambda *a, **kw: fake)
    yield fake


@pytest.fixture(autouse=True)
def clean_loglevel_env(monkeypatch):
    monkeypatch.delenv("YT_TRANSCRIBER_LOGLEVEL", raising=False)
    yield
