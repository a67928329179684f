"""yt_transcriber.installer – make sure the ``yt-dlp`` executable exists.

Installation is attempted with pip (for the running interpreter), then
pipx, then Homebrew; each only if its launcher answers ``--version``.
"""
from __future__ import annotations

import logging
import subprocess
import sys
from typing import Sequence

from .constants import DOWNLOADER
from .errors import DownloaderMissing

__all__ = [
    "is_available",
    "install",
    "ensure_available",
]

log = logging.getLogger(__name__)


def _responds(cmd: Sequence[str]) -> bool:
    """True if *cmd* can be launched at all (exit status is irrelevant)."""
    try:
        subprocess.run(list(cmd), capture_output=True, check=False)
    except OSError:
        return False
    return True


def _succeeds(cmd: Sequence[str]) -> bool:
    try:
        return subprocess.run(list(cmd), check=False).returncode == 0
    except OSError as exc:
        log.debug("%s failed to start: %s", cmd[0], exc)
        return False


def is_available() -> bool:
    return _responds([DOWNLOADER, "--version"])


def _candidates() -> list[tuple[list[str], list[str]]]:
    pip = [sys.executable, "-m", "pip"]
    return [
        (pip + ["--version"], pip + ["install", "--user", DOWNLOADER]),
        (["pipx", "--version"], ["pipx", "install", DOWNLOADER]),
        (["brew", "--version"], ["brew", "install", DOWNLOADER]),
    ]


def install() -> bool:
    """Try every known installer in turn; True at the first success."""
    log.warning("%s not found. Attempting to install...", DOWNLOADER)
    for probe, cmd in _candidates():
        if not _responds(probe):
            continue
        log.info("Running: %s", " ".join(cmd))
        if _succeeds(cmd):
            return True
    return False


def ensure_available(auto_install: bool = True) -> None:
    """Raise :class:`DownloaderMissing` unless ``yt-dlp`` can be launched."""
    if is_available():
        return
    if not auto_install:
        raise DownloaderMissing(
            f"{DOWNLOADER} is required but was not found. "
            f"Please install it manually: pip install {DOWNLOADER}"
        )
    if not install():
        raise DownloaderMissing(
            f"{DOWNLOADER} is required but could not be installed. "
            f"Please install it manually: pip install {DOWNLOADER}"
        )
    if not is_available():
        raise DownloaderMissing(
            f"{DOWNLOADER} installation succeeded but command not found in PATH. "
            "Try restarting your terminal or adding ~/.local/bin to PATH"
        )
