"""
Central configuration for Utility Forge.
Loads environment variables from a .env file at import time.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# --- Load .env early so everything importing config sees the vars ---
# This looks for a .env in the current working dir or parents.
load_dotenv()

#: Environment variable names
GROQ_API_KEY_ENV = "GROQ_API_KEY"
GROQ_MODEL_ENV = "GROQ_MODEL"
ISSUE_NUMBER_ENV = "ISSUE_NUMBER"
TOOL_NAME_ENV = "TOOL_NAME"
TOOL_SLUG_ENV = "TOOL_SLUG"
ISSUE_BODY_ENV = "ISSUE_BODY"
FORGE_ROOT_ENV = "FORGE_ROOT"
FORGE_TIMEOUT_ENV = "FORGE_TIMEOUT"

#: Model used when GROQ_MODEL is not set.
DEFAULT_MODEL = "llama-3.1-8b-instant"

#: Upper bound (seconds) for the single spec request.
DEFAULT_TIMEOUT_SECONDS = 30.0

#: Registry file name, relative to the site directory.
REGISTRY_FILENAME = "generated-tools.json"


def require_env(var_name: str) -> str:
    """
    Return the value of an environment variable or raise a clear error.

    Raises
    ------
    RuntimeError
        If the environment variable is missing or empty.
    """
    try:
        value = os.environ[var_name]
    except KeyError as exc:
        raise RuntimeError(f"Required environment variable '{var_name}' is not set.") from exc
    if not value:
        raise RuntimeError(f"Environment variable '{var_name}' is empty.")
    return value


def get_api_key() -> Optional[str]:
    """
    Return the Groq API key, or None when it is not configured.

    A missing key is not an error: the pipeline uses the built-in fallback spec.
    """
    value = os.environ.get(GROQ_API_KEY_ENV, "").strip()
    return value or None


def get_model() -> str:
    """Model identifier for spec requests, defaulting to DEFAULT_MODEL."""
    return os.environ.get(GROQ_MODEL_ENV, "").strip() or DEFAULT_MODEL


def get_timeout() -> float:
    """
    Request timeout in seconds.

    Raises
    ------
    RuntimeError
        If FORGE_TIMEOUT is set to something that is not a positive number.
    """
    raw = os.environ.get(FORGE_TIMEOUT_ENV, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable '{FORGE_TIMEOUT_ENV}' must be a number, got {raw!r}.") from exc
    if value <= 0:
        raise RuntimeError(f"Environment variable '{FORGE_TIMEOUT_ENV}' must be positive, got {raw!r}.")
    return value


@dataclass(frozen=True)
class ForgePaths:
    """Filesystem layout of the generated site and its tests."""

    root: Path

    @property
    def site_dir(self) -> Path:
        return self.root / "site"

    @property
    def tools_dir(self) -> Path:
        return self.site_dir / "tools"

    @property
    def test_dir(self) -> Path:
        return self.root / "test"

    @property
    def registry_path(self) -> Path:
        return self.site_dir / REGISTRY_FILENAME

    def tool_dir(self, slug: str) -> Path:
        return self.tools_dir / slug

    def test_path(self, slug: str) -> Path:
        return self.test_dir / f"generated-{slug}.test.mjs"

    @classmethod
    def from_env(cls) -> "ForgePaths":
        """Use FORGE_ROOT when set, else the current working directory."""
        root = os.environ.get(FORGE_ROOT_ENV, "").strip()
        return cls(root=Path(root) if root else Path.cwd())
