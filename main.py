"""
CI entry-point: generate one tool from the issue that requested it.

Reads ISSUE_NUMBER, TOOL_NAME, TOOL_SLUG and ISSUE_BODY from the environment
(see forge.config). TOOL_SLUG may be omitted, in which case it is derived from
the tool name and issue number.
"""
from __future__ import annotations

import logging
import os

from forge.config import (
    ISSUE_BODY_ENV,
    ISSUE_NUMBER_ENV,
    TOOL_NAME_ENV,
    TOOL_SLUG_ENV,
    ForgePaths,
    require_env,
)
from forge.pipeline import generate_tool
from forge.spec import make_slug

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    issue_number = require_env(ISSUE_NUMBER_ENV)
    tool_name = require_env(TOOL_NAME_ENV)
    slug = os.environ.get(TOOL_SLUG_ENV, "").strip() or make_slug(tool_name, issue_number)
    issue_body = os.environ.get(ISSUE_BODY_ENV, "")

    result = generate_tool(tool_name, slug, issue_body, paths=ForgePaths.from_env())
    print(f"Generated tool: {result.slug}")


if __name__ == "__main__":
    main()
