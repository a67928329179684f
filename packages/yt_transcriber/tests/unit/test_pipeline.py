import logging

import pytest

from yt_transcriber.errors import EmptyTranscript, InvalidVideoId, NoCaptionsFound, VideoUnavailable
from yt_transcriber.pipeline import suspect_segments, transcribe

from conftest import FakeFetcher, VIDEO_ID


def test_transcribe_end_to_end(fake_fetcher, fixed_clock):
    res = transcribe(f"https://youtu.be/{VIDEO_ID}", "en", fetcher=fake_fetcher, clock=fixed_clock)
    assert fake_fetcher.calls == [(VIDEO_ID, "en")]
    assert res.video_id == VIDEO_ID
    assert res.language == "en"
    assert res.metadata.total_segments == len(res.segments) == 3
    assert res.metadata.extracted_at == "2025-06-17T12:34:56+00:00"


def test_invalid_input_never_fetches(fake_fetcher):
    with pytest.raises(InvalidVideoId):
        transcribe("not a url or id", fetcher=fake_fetcher)
    assert fake_fetcher.calls == []


def test_markup_without_cues_is_empty_transcript():
    with pytest.raises(EmptyTranscript) as exc:
        transcribe(VIDEO_ID, fetcher=FakeFetcher("WEBVTT\n\n"))
    assert exc.value.exit_code == 2


@pytest.mark.parametrize("err", [NoCaptionsFound("de"), VideoUnavailable()])
def test_fetch_errors_propagate(err):
    with pytest.raises(type(err)):
        transcribe(VIDEO_ID, "de", fetcher=FakeFetcher(exc=err))


def test_clock_called_once(fake_fetcher):
    calls = []

    def clock():
        import datetime

        calls.append(1)
        return datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)

    transcribe(VIDEO_ID, fetcher=fake_fetcher, clock=clock)
    assert len(calls) == 1


def test_negative_durations_are_warned_not_fatal(caplog):
    fetcher = FakeFetcher("00:00:05.000 --> 00:00:02.000\nbackwards\n")
    with caplog.at_level(logging.WARNING, logger="yt_transcriber"):
        res = transcribe(VIDEO_ID, fetcher=fetcher)
    assert len(suspect_segments(res.segments)) == 1
    assert "ends before it starts" in caplog.text
