"""
Single place for constants that are used across the package.
"""

from typing import Final, Tuple

# ------------------------------ output ---------------------------------- #
FORMATS: Final[Tuple[str, ...]] = ("txt", "srt", "json")
DEFAULT_FORMAT: Final = "txt"
EXT: Final = {"txt": "txt", "srt": "srt", "json": "json"}

DEFAULT_LANGUAGE: Final = "en"

# --------------------------- identifier rules --------------------------- #
SHORT_HOST: Final = "youtu.be"
MAIN_HOST: Final = "youtube.com"
# checked in this order, at most one is removed
HOST_PREFIXES: Final[Tuple[str, ...]] = ("www.", "m.", "music.")
PATH_KEYWORDS: Final[Tuple[str, ...]] = ("watch", "embed", "v", "shorts", "live", "clip")
WATCH_URL: Final = "https://www.youtube.com/watch?v={}"

# ---------------------------- caption markup ---------------------------- #
HEADER_PREFIXES: Final[Tuple[str, ...]] = ("WEBVTT", "Kind:", "Language:")

# ------------------------------ fetching -------------------------------- #
DOWNLOADER: Final = "yt-dlp"
BACKENDS: Final[Tuple[str, ...]] = ("yt-dlp", "api")
DEFAULT_BACKEND: Final = "yt-dlp"
UNAVAILABLE_MARKERS: Final[Tuple[str, ...]] = ("unavailable", "private", "deleted")

LOGLEVEL_ENV: Final = "YT_TRANSCRIBER_LOGLEVEL"

# NOTE: used only when fake-useragent cannot produce a value.
FALLBACK_USER_AGENT: Final = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
