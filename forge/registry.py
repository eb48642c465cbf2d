"""
Shared catalog of generated tools (site/generated-tools.json).

Design
- Append-only: the first entry written for a slug wins (idempotent updates).
- Unreadable or non-list content is replaced rather than treated as fatal.
- Read-modify-write without locking; concurrent writers can lose an update.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from forge.spec import RegistryEntry

logger = logging.getLogger(__name__)


def load_registry(registry_path: Path) -> List[Dict[str, Any]]:
    """
    Read the catalog, returning [] when it is missing, empty or malformed.

    Returns
    -------
    List[dict]
        Entries in file order.
    """
    if not registry_path.exists():
        return []

    raw = registry_path.read_text(encoding="utf-8").strip()
    if not raw:
        return []

    try:
        registry = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Registry %s is not valid JSON (%s); starting fresh.", registry_path, exc)
        return []

    if not isinstance(registry, list):
        logger.warning("Registry %s does not hold a list; starting fresh.", registry_path)
        return []
    return registry


def save_registry(registry_path: Path, registry: List[Dict[str, Any]]) -> None:
    registry_path.parent.mkdir(parents=True, exist_ok=True)
    registry_path.write_text(json.dumps(registry, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def update_registry(registry_path: Path, slug: str, title: str, summary: str) -> bool:
    """
    Record a tool in the catalog unless its slug is already present.

    The file is rewritten either way so it always ends up pretty-printed.

    Returns
    -------
    bool
        True if a new entry was appended.
    """
    registry = load_registry(registry_path)
    exists = any(isinstance(entry, dict) and entry.get("slug") == slug for entry in registry)
    if not exists:
        registry.append(RegistryEntry(slug=slug, title=title, summary=summary).to_dict())
        logger.info("Registered '%s' in %s", slug, registry_path)
    elif logger.isEnabledFor(logging.DEBUG):
        logger.debug("Registry already lists '%s'; leaving it unchanged.", slug)

    save_registry(registry_path, registry)
    return not exists
