"""Escaping helpers for embedding spec text into generated JavaScript and HTML."""

from __future__ import annotations

from typing import Any


def sanitize_for_js(text: Any) -> str:
    """
    Make text safe inside a JavaScript template literal.

    Backslashes, backticks and `${` are escaped so the literal can neither be
    closed early nor interpolate an expression. The result is trimmed.
    """
    value = "" if text is None else str(text)
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${").strip()


def sanitize_for_html(text: Any) -> str:
    """Entity-escape `&`, `<` and `>` for HTML text content."""
    value = "" if text is None else str(text)
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def sanitize_for_html_attr(text: Any) -> str:
    """Like sanitize_for_html, also escaping `"` for double-quoted attribute values."""
    return sanitize_for_html(text).replace('"', "&quot;")
