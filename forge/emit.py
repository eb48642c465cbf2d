"""
Render and write the files that make up one generated tool.

Layout (relative to the project root)
- site/tools/<slug>/logic.js    runTool plus its constants
- site/tools/<slug>/index.html  UI shell
- site/tools/<slug>/styles.css  shared look, identical for every tool
- site/tools/<slug>/app.js      binds the UI shell to logic.js
- test/generated-<slug>.test.mjs
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from forge.config import ForgePaths
from forge.intent import IntentName
from forge.sanitize import sanitize_for_html, sanitize_for_html_attr, sanitize_for_js
from forge.spec import ToolSpec, validate_slug

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

BASE64_TEST_MODES = {"encode", "decode"}


def _build_environment() -> Environment:
    env = Environment(  # nosec B701 - output is JS/CSS/HTML escaped explicitly via filters
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["js"] = sanitize_for_js
    env.filters["html"] = sanitize_for_html
    env.filters["html_attr"] = sanitize_for_html_attr
    return env


_ENV = _build_environment()


@dataclass(slots=True)
class EmittedTool:
    """Paths written for one tool."""

    tool_dir: Path
    files: List[Path]
    test_path: Path
    test_kind: str


def _render(template_name: str, **context) -> str:
    return _ENV.get_template(template_name).render(**context)


def render_logic(tool_name: str, spec: ToolSpec) -> str:
    modes_json = json.dumps([mode.to_dict() for mode in spec.modes], indent=2)
    return _render("logic.js.j2", tool_name=tool_name, spec=spec, modes_json=modes_json)


def render_html(tool_name: str, spec: ToolSpec) -> str:
    return _render("index.html.j2", tool_name=tool_name, spec=spec)


def render_css() -> str:
    return _render("styles.css.j2")


def render_app_js() -> str:
    return _render("app.js.j2")


def choose_test_kind(spec: ToolSpec, intent: Optional[str]) -> str:
    """
    "base64" when the literal round-trip assertions apply, else "generic".

    The round-trip test needs both the Base64 intent and encode/decode modes, so a
    remote spec with different modes still gets a test it can pass.
    """
    if intent == IntentName.BASE64 and BASE64_TEST_MODES.issubset(spec.mode_values()):
        return "base64"
    return "generic"


def render_test(slug: str, spec: ToolSpec, intent: Optional[str] = None) -> str:
    kind = choose_test_kind(spec, intent)
    return _render(f"{kind}.test.mjs.j2", slug=validate_slug(slug))


def render_tool_files(tool_name: str, spec: ToolSpec) -> Dict[str, str]:
    """File name -> content for everything inside the tool directory."""
    return {
        "index.html": render_html(tool_name, spec),
        "styles.css": render_css(),
        "app.js": render_app_js(),
        "logic.js": render_logic(tool_name, spec),
    }


def emit(
    tool_name: str,
    slug: str,
    spec: ToolSpec,
    paths: ForgePaths,
    *,
    intent: Optional[str] = None,
) -> EmittedTool:
    """
    Write the tool directory and its test file, overwriting previous output.

    Rendering happens before anything touches the disk, so a template error
    leaves the previous files in place.

    Raises
    ------
    ValueError
        If `slug` is not URL-safe.
    """
    validate_slug(slug)
    rendered = render_tool_files(tool_name, spec)
    test_source = render_test(slug, spec, intent)

    tool_dir = paths.tool_dir(slug)
    tool_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for filename, content in rendered.items():
        target = tool_dir / filename
        target.write_text(content, encoding="utf-8")
        written.append(target)

    test_path = paths.test_path(slug)
    test_path.parent.mkdir(parents=True, exist_ok=True)
    test_path.write_text(test_source, encoding="utf-8")

    kind = choose_test_kind(spec, intent)
    logger.info("Wrote %d files for '%s' (%s test)", len(written) + 1, slug, kind)
    return EmittedTool(tool_dir=tool_dir, files=written, test_path=test_path, test_kind=kind)
