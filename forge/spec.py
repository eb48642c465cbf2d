"""Tool specification types and structural validation of untrusted payloads."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:[a-z0-9-]*[a-z0-9])?$")
SLUG_MAX_LENGTH = 40


class SpecValidationError(ValueError):
    """Raised when a payload does not describe a usable ToolSpec."""


@dataclass(frozen=True, slots=True)
class Mode:
    """Selectable operation: `value` is passed to runTool, `label` is shown in the UI."""

    value: str
    label: str

    def to_dict(self) -> Dict[str, str]:
        return {"value": self.value, "label": self.label}


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Everything needed to render one micro-tool."""

    summary: str
    sample_input: str
    modes: Tuple[Mode, ...]
    logic: str

    def __post_init__(self) -> None:
        if not self.modes:
            raise SpecValidationError("A tool needs at least one mode.")

    def mode_values(self) -> List[str]:
        return [mode.value for mode in self.modes]


@dataclass(slots=True)
class RegistryEntry:
    """One row of the shared generated-tools catalog."""

    slug: str
    title: str
    summary: str
    path: str = field(default="")

    def __post_init__(self) -> None:
        if not self.path:
            self.path = registry_path_for(self.slug)

    def to_dict(self) -> Dict[str, str]:
        return {"slug": self.slug, "title": self.title, "summary": self.summary, "path": self.path}


def registry_path_for(slug: str) -> str:
    """Site-relative link to a tool directory."""
    return f"./tools/{slug}/"


def _clean(value: Any) -> str:
    """Trimmed string, or "" for anything that is not a string."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def _require_utf8(key: str, value: str) -> str:
    """Reject text that cannot be written out as UTF-8 (e.g. lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SpecValidationError(f"'{key}' is not valid UTF-8 text.") from exc
    return value


def parse_modes(raw_modes: Any) -> Tuple[Mode, ...]:
    """
    Coerce a list of {value, label} objects into Modes.

    Entries whose value or label is not a string, or is empty after trimming,
    are dropped.

    Raises
    ------
    SpecValidationError
        If `raw_modes` is not a list or nothing usable remains.
    """
    if not isinstance(raw_modes, list) or not raw_modes:
        raise SpecValidationError("'modes' must be a non-empty list.")

    modes: List[Mode] = []
    for item in raw_modes:
        if not isinstance(item, dict):
            continue
        value = _clean(item.get("value"))
        label = _clean(item.get("label"))
        if value and label:
            _require_utf8("modes", value + label)
            modes.append(Mode(value=value, label=label))

    if not modes:
        raise SpecValidationError("'modes' has no entry with both a value and a label.")
    return tuple(modes)


def parse_tool_spec(payload: Any) -> ToolSpec:
    """
    Validate a decoded JSON payload and build a ToolSpec from it.

    Missing or mistyped fields are rejected, never filled in.

    Raises
    ------
    SpecValidationError
        On any structural mismatch.
    """
    if not isinstance(payload, dict):
        raise SpecValidationError("Spec payload must be a JSON object.")

    for key in ("summary", "sample_input", "logic"):
        if not isinstance(payload.get(key), str):
            raise SpecValidationError(f"'{key}' must be a string.")
        _require_utf8(key, payload[key])

    summary = payload["summary"].strip()
    if not summary:
        raise SpecValidationError("'summary' must not be blank.")

    return ToolSpec(
        summary=summary,
        sample_input=payload["sample_input"],
        modes=parse_modes(payload.get("modes")),
        logic=payload["logic"].strip(),
    )


def validate_slug(slug: str) -> str:
    """
    Return `slug` unchanged if it is URL-safe.

    Raises
    ------
    ValueError
        If the slug could escape its tool directory or is not lowercase kebab-case.
    """
    if not isinstance(slug, str) or not SLUG_PATTERN.match(slug):
        raise ValueError(f"Invalid tool slug {slug!r}: use lowercase letters, digits and dashes.")
    return slug


def make_slug(name: str, issue_number: Optional[str] = None) -> str:
    """Derive a URL-safe slug from a display name, optionally suffixed by an issue number."""
    base = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    base = base[:SLUG_MAX_LENGTH].strip("-") or "tool"
    if issue_number:
        suffix = re.sub(r"[^0-9a-z]+", "", str(issue_number).lower())
        if suffix:
            base = f"{base}-{suffix}"
    return validate_slug(base)
