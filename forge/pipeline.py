"""Generation pipeline: acquire a spec (or fall back), emit files, update the registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from groq import Groq

from forge.acquire import acquire_spec
from forge.config import ForgePaths
from forge.emit import EmittedTool, emit
from forge.fallback import fallback_spec
from forge.intent import detect_intent
from forge.registry import update_registry
from forge.spec import ToolSpec, validate_slug

logger = logging.getLogger(__name__)

SOURCE_REMOTE = "remote"
SOURCE_FALLBACK = "fallback"


@dataclass(slots=True)
class GenerationResult:
    """Outcome of one generation request."""

    slug: str
    spec: ToolSpec
    source: str
    intent: str
    emitted: EmittedTool
    registry_added: bool


def generate_tool(
    tool_name: str,
    slug: str,
    issue_body: str = "",
    *,
    paths: ForgePaths,
    client: Optional[Groq] = None,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
) -> GenerationResult:
    """
    Produce a complete tool for one request.

    A spec always exists by the time files are written: any acquisition
    failure falls back to the built-in spec for the detected intent.

    Raises
    ------
    ValueError
        If `slug` is not URL-safe (checked before any network call).
    """
    validate_slug(slug)
    intent = detect_intent(tool_name, issue_body)

    spec = acquire_spec(tool_name, issue_body, client=client, model=model, api_key=api_key)
    source = SOURCE_REMOTE
    if spec is None:
        spec = fallback_spec(tool_name, issue_body)
        source = SOURCE_FALLBACK
    logger.info("Using %s spec for '%s' (intent=%s)", source, slug, intent)

    emitted = emit(tool_name, slug, spec, paths, intent=intent)
    added = update_registry(paths.registry_path, slug, tool_name, spec.summary)

    return GenerationResult(
        slug=slug,
        spec=spec,
        source=source,
        intent=intent,
        emitted=emitted,
        registry_added=added,
    )
