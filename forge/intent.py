"""
Keyword intent detection for tool requests.

Two intents exist, matching the two built-in fallback families:
1) BASE64 (anything mentioning base64 or URL-safe encoding)
2) TEXT_CLEANUP (everything else)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

BASE64_PATTERN = re.compile(r"base64|url[- ]?safe", re.IGNORECASE)


@dataclass(frozen=True)
class IntentName:
    BASE64: str = "base64"
    TEXT_CLEANUP: str = "text-cleanup"


def _mentions_base64(text: Optional[str]) -> bool:
    return bool(text) and BASE64_PATTERN.search(text) is not None


def detect_intent(*texts: Optional[str]) -> str:
    """Classify the request from its name and free-text description."""
    if any(_mentions_base64(text) for text in texts):
        return IntentName.BASE64
    return IntentName.TEXT_CLEANUP
