"""Best-effort recovery of a JSON object from free-form model output."""

from __future__ import annotations

import re
from typing import Optional

FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def extract_json(text: Optional[str]) -> str:
    """
    Return the most likely JSON object text inside `text`, or "" if none.

    Tried in order: the whole (trimmed) text when it is already brace-delimited,
    the first fenced code block, then the span from the first `{` to the last `}`.
    """
    trimmed = (text or "").strip()
    if trimmed.startswith("{") and trimmed.endswith("}"):
        return trimmed

    fenced = FENCED_BLOCK.search(trimmed)
    if fenced and fenced.group(1):
        return fenced.group(1).strip()

    start = trimmed.find("{")
    end = trimmed.rfind("}")
    if start != -1 and end > start:
        return trimmed[start : end + 1]

    return ""
