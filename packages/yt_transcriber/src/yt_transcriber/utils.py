"""yt_transcriber.utils

HTTP helpers for the youtube-transcript-api backend.  Kept free of any
parsing logic so they are easy to unit-test on their own.
"""
from __future__ import annotations

from urllib.parse import urlparse, urlunparse

import requests
from youtube_transcript_api.proxies import GenericProxyConfig, WebshareProxyConfig

from .errors import InvalidProxy
from .user_agent import pick_user_agent

__all__ = [
    "make_proxy",
    "make_session",
]


def make_proxy(url: str) -> GenericProxyConfig | WebshareProxyConfig:
    """Return a ``GenericProxyConfig`` or ``WebshareProxyConfig`` for *url*."""
    if url.lower().startswith(("ws://", "webshare://")):
        creds = url.split("://", 1)[1]
        user, sep, pwd = creds.partition(":")
        if not (user and sep and pwd):
            raise InvalidProxy("Webshare proxy must look like webshare://USER:PASSWORD")
        return WebshareProxyConfig(user, pwd)
    parsed = urlparse(url)
    if parsed.scheme in ("http", "https"):
        http_url = urlunparse(parsed._replace(scheme="http"))
        https_url = urlunparse(parsed._replace(scheme="https"))
    else:
        http_url = https_url = url
    return GenericProxyConfig(http_url=http_url, https_url=https_url)


def make_session(user_agent: str | None = None) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent or pick_user_agent()})
    return session
