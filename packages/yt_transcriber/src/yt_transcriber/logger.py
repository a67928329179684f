"""
Logging setup shared by the CLI and library users.

Console output goes through a :class:`rich.logging.RichHandler` on *stderr*
(stdout carries nothing but the transcript).  The level follows ``-v``
flags unless the environment says otherwise:

```bash
export YT_TRANSCRIBER_LOGLEVEL=DEBUG
```
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .constants import LOGLEVEL_ENV

LOG_FMT_FILE = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"

log = logging.getLogger("yt_transcriber")


def console_level(verbose: int) -> int:
    """0 → WARNING, 1 → INFO, 2+ → DEBUG, unless the env variable overrides."""
    env = os.getenv(LOGLEVEL_ENV)
    if env:
        return getattr(logging, env.upper(), logging.WARNING)
    return [logging.WARNING, logging.INFO, logging.DEBUG][min(max(verbose, 0), 2)]


def configure_logging(verbose: int = 0, log_file: str | Path | None = None) -> None:
    """(Re)attach the package handlers; safe to call more than once."""
    level = console_level(verbose)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_level=True,
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(level)
    log.addHandler(console_handler)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FMT_FILE, DATE_FMT))
        file_handler.setLevel(logging.DEBUG)
        log.addHandler(file_handler)
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(level)
