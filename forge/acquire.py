"""
Remote spec acquisition using Groq chat completions.

Design
- Dependency injection for the Groq client and model name.
- One request, no retries, bounded timeout.
- Every field of the reply is validated; any failure returns None so the
  caller falls back to a built-in spec.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

import groq
from groq import Groq

from forge.config import get_api_key, get_model, get_timeout
from forge.extract import extract_json
from forge.spec import SpecValidationError, ToolSpec, parse_tool_spec

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a senior JavaScript engineer. Always respond with valid JSON object only."

TEMPERATURE = 0.3
MAX_TOKENS = 900


def build_prompt(name: str, issue_body: str) -> str:
    """User prompt describing the JSON shape and constraints we expect back."""
    return (
        "Create practical transform logic for a developer utility.\n"
        "Return JSON only with keys: summary, sample_input, modes, logic.\n"
        "Rules:\n"
        "- modes: array of 1-3 objects {value,label}.\n"
        "- logic: JavaScript body for function runTool(input, mode).\n"
        "- logic must return a string and throw Error for invalid input.\n"
        "- no markdown fences, no comments, ASCII only.\n"
        "\n"
        f"Tool name: {name}\n"
        "Issue body:\n"
        f"{issue_body}"
    )


def _build_groq(api_key: str, timeout: float) -> Groq:
    """Return a Groq client that fails fast instead of retrying."""
    return Groq(api_key=api_key, timeout=timeout, max_retries=0)


def _completion_text(completion: Any) -> str:
    """Pull the generated text out of a chat completion, tolerating odd shapes."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


def parse_spec_text(raw: str) -> Optional[ToolSpec]:
    """
    Recover and validate a ToolSpec from model output.

    Returns
    -------
    Optional[ToolSpec]
        The spec, or None when no valid JSON object could be recovered.
    """
    json_text = extract_json(raw)
    if not json_text:
        logger.warning("Spec response contained no JSON object.")
        return None

    try:
        payload = json.loads(json_text)
    except (ValueError, RecursionError) as exc:
        logger.warning("Spec response is not valid JSON: %s", exc)
        return None

    try:
        return parse_tool_spec(payload)
    except SpecValidationError as exc:
        logger.warning("Spec response rejected: %s", exc)
    return None


def acquire_spec(
    name: str,
    issue_body: str,
    *,
    client: Optional[Groq] = None,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Optional[ToolSpec]:
    """
    Ask the model for a tool spec.

    Parameters
    ----------
    name : str
        Tool display name.
    issue_body : str
        Free-text request describing the tool.
    client : Optional[Groq]
        Injected client for testability. When omitted a client is built from
        the API key, and a missing key short-circuits to None.
    model : Optional[str]
        Model override; falls back to GROQ_MODEL or the default model.
    api_key, timeout : optional
        Overrides for the configured credential and request timeout.

    Returns
    -------
    Optional[ToolSpec]
        A validated spec, or None if the caller must fall back.
    """
    if client is None:
        resolved_key = api_key or get_api_key()
        if not resolved_key:
            logger.info("No Groq API key configured; using built-in spec for '%s'.", name)
            return None
        client = _build_groq(resolved_key, timeout or get_timeout())
    resolved_model = model or get_model()

    try:
        completion = client.chat.completions.create(
            model=resolved_model,
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(name, issue_body)},
            ],
        )
    except groq.APIError as exc:
        logger.warning("Spec request for '%s' failed: %s", name, exc)
        return None

    raw = _completion_text(completion)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Spec response for '%s' (model=%s): %s", name, resolved_model, raw)
    return parse_spec_text(raw)
