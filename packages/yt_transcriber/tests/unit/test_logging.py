"""Logging configuration: verbosity mapping, env override, handlers."""

import logging

import pytest
from rich.logging import RichHandler

from yt_transcriber.logger import configure_logging, console_level

PKG = logging.getLogger("yt_transcriber")


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    for h in list(PKG.handlers):
        PKG.removeHandler(h)
        h.close()
    PKG.setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    "verbose, level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_mapping(verbose, level):
    assert console_level(verbose) == level


def test_env_overrides_verbosity(monkeypatch):
    monkeypatch.setenv("YT_TRANSCRIBER_LOGLEVEL", "error")
    assert console_level(2) == logging.ERROR


def test_configure_is_idempotent():
    configure_logging(1)
    configure_logging(1)
    rich_handlers = [h for h in PKG.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].level == logging.INFO


def test_console_goes_to_stderr(capsys):
    configure_logging(0)
    logging.getLogger("yt_transcriber.pipeline").warning("careful")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "careful" in captured.err


def test_file_handler_captures_debug(tmp_path):
    path = tmp_path / "logs" / "run.log"
    configure_logging(0, path)
    logging.getLogger("yt_transcriber.parser").debug("deep detail")
    assert "DEBUG - deep detail" in path.read_text(encoding="utf-8")
