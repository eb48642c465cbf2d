"""
Streamlit console for Utility Forge.

Responsibilities
- Collect a tool request (name, optional slug, description)
- Run the generation pipeline for it
- Show the spec that was used and where it came from
- List the tools already in the registry
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import streamlit as st

# Ensure absolute `forge.*` imports work even when Streamlit sets cwd to forge/
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from forge.config import ForgePaths
from forge.pipeline import GenerationResult, generate_tool
from forge.registry import load_registry
from forge.spec import make_slug

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def request_tool(name: str, slug: str, description: str, paths: ForgePaths) -> GenerationResult:
    """
    Run the pipeline for a console request.

    Parameters
    ----------
    name : str
        Tool display name; must not be blank.
    slug : str
        Optional slug; derived from the name when blank.
    description : str
        Free-text description, passed on as the issue body.

    Raises
    ------
    ValueError
        If the name is blank or the slug is not URL-safe.
    """
    name = name.strip()
    if not name:
        raise ValueError("Tool name is required.")
    resolved_slug = slug.strip() or make_slug(name)
    return generate_tool(name, resolved_slug, description, paths=paths)


def describe_result(result: GenerationResult) -> Dict[str, Any]:
    """Plain-dict view of a result for display."""
    return {
        "slug": result.slug,
        "source": result.source,
        "intent": result.intent,
        "summary": result.spec.summary,
        "modes": [mode.to_dict() for mode in result.spec.modes],
        "files": [str(path) for path in result.emitted.files] + [str(result.emitted.test_path)],
        "registry_added": result.registry_added,
    }


def _registry_rows(paths: ForgePaths) -> List[Dict[str, Any]]:
    return load_registry(paths.registry_path)


def main() -> None:
    """Run the Streamlit console."""
    st.title("Utility Forge")
    paths = ForgePaths.from_env()

    with st.form("tool_request"):
        name = st.text_input("Tool name")
        slug = st.text_input("Slug (optional)")
        description = st.text_area("What should the tool do?")
        submitted = st.form_submit_button("Generate")

    if submitted:
        try:
            result = request_tool(name, slug, description, paths)
        except ValueError as exc:
            st.error(str(exc))
        except Exception as exc:
            logger.exception("Error while generating tool: %s", exc)
            st.error("Sorry, something went wrong while generating the tool.")
        else:
            st.success(f"Generated tool: {result.slug}")
            st.json(describe_result(result))
            st.code(result.spec.logic, language="javascript")

    st.subheader("Registered tools")
    rows = _registry_rows(paths)
    if rows:
        st.table(rows)
    else:
        st.caption("No tools generated yet.")


if __name__ == "__main__":
    main()
