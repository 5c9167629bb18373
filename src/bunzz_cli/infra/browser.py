from __future__ import annotations

import logging
import webbrowser

from bunzz_cli.domain.constants import Environment, get_frontend_url
from bunzz_cli.domain.errors import BrowserError

logger = logging.getLogger(__name__)


def build_frontend_url(env: Environment | str, route: str, record_id: str) -> str:
    """Join the frontend base URL, a route and a record id."""
    base = get_frontend_url(env).rstrip("/")
    return f"{base}/{route.strip('/')}/{record_id}"


def open_frontend(env: Environment | str, route: str, record_id: str) -> str:
    """
    Open the web frontend page for an uploaded record.

    Returns:
        str: The URL that was opened.

    Raises:
        BrowserError: If no browser could be launched.
    """
    url = build_frontend_url(env, route, record_id)
    logger.debug(f"Opening browser at {url}")
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error:
        opened = False
    if not opened:
        raise BrowserError(f"Failed to open browser at {url}, please open manually.")
    return url
