from __future__ import annotations

import logging

from fake_useragent import UserAgent

from .constants import FALLBACK_USER_AGENT


def pick_user_agent(browser: str | None = None, os: str | None = None) -> str:
    """Return a plausible User-Agent string for the transcript HTTP session."""
    try:
        ua_src = UserAgent(browsers=[browser] if browser else None,
                           os=[os] if os else None)
        return ua_src.random
    except Exception as exc:  # noqa: BLE001
        logging.getLogger(__name__).warning(
            "fake-useragent failed (%s) - using fallback UA", exc
        )
        return FALLBACK_USER_AGENT
