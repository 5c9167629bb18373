from __future__ import annotations

"""
User-facing message catalogue.

Status lines and prompts printed by the commands live in
interface/locales/<locale>.json as nested objects and are addressed with
dotted keys such as 'clone.status.done'. A lookup never raises: the CLI
must keep working with a damaged or missing catalogue.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "interface", "locales")
)


def _read_catalogue(path: str) -> Optional[Dict[str, Any]]:
    if not os.path.isfile(path):
        logger.debug(f"I18n: No catalogue at '{path}'.")
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"I18n: Unreadable catalogue {path}: {e}")
        return None
    return data if isinstance(data, dict) else None


class I18n:
    """Dotted-key access to one locale's messages."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self._messages: Dict[str, Any] = {}
        self.is_loaded = False
        self.load_locale(locale)

    def load_locale(self, locale: str) -> None:
        messages = _read_catalogue(os.path.join(LOCALES_DIR, f"{locale}.json"))
        self._messages = messages or {}
        self.is_loaded = messages is not None
        if self.is_loaded:
            self.locale = locale

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Look up a message and fill in its placeholders.

        Args:
            key: Dotted path into the catalogue.
            default: Template used when the key is absent.
            **kwargs: Placeholder values for str.format.

        Returns:
            str: The formatted message. Without a template the key itself
            is returned; with unfillable placeholders the raw template is.
        """
        node: Any = self._messages
        for part in key.split("."):
            node = node.get(part) if isinstance(node, dict) else None

        template = node if isinstance(node, str) else default
        if template is None:
            return key
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Cannot format '{key}': {e}")
            return template


i18n = I18n(DEFAULT_LOCALE)
