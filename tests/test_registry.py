import json
from pathlib import Path

import pytest

from forge.registry import load_registry, update_registry


def read(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_creates_registry(tmp_path: Path):
    registry = tmp_path / "site" / "generated-tools.json"
    assert update_registry(registry, "upper", "Upper Tool", "Uppercase text.") is True

    assert read(registry) == [
        {"slug": "upper", "title": "Upper Tool", "summary": "Uppercase text.", "path": "./tools/upper/"}
    ]
    raw = registry.read_text(encoding="utf-8")
    assert raw.endswith("]\n")
    assert '\n  {\n    "slug": "upper",' in raw


def test_idempotent_for_same_slug(tmp_path: Path):
    registry = tmp_path / "generated-tools.json"
    update_registry(registry, "upper", "Upper Tool", "Uppercase text.")
    assert update_registry(registry, "upper", "Upper Tool", "Uppercase text.") is False
    assert update_registry(registry, "upper", "Renamed", "Different summary.") is False

    entries = read(registry)
    assert len(entries) == 1
    assert entries[0]["title"] == "Upper Tool"
    assert entries[0]["summary"] == "Uppercase text."


def test_appends_in_order(tmp_path: Path):
    registry = tmp_path / "generated-tools.json"
    update_registry(registry, "b-tool", "B", "Second letter.")
    update_registry(registry, "a-tool", "A", "First letter.")
    assert [entry["slug"] for entry in read(registry)] == ["b-tool", "a-tool"]


def test_keeps_existing_entries_and_unicode(tmp_path: Path):
    registry = tmp_path / "generated-tools.json"
    registry.write_text(json.dumps([{"slug": "old", "title": "Old", "summary": "Café", "path": "./tools/old/"}]))
    update_registry(registry, "new", "New", "Naïve text.")

    assert [entry["slug"] for entry in read(registry)] == ["old", "new"]
    assert "Naïve" in registry.read_text(encoding="utf-8")


@pytest.mark.parametrize("content", ["", "   \n", '{"slug": "x"}', '"text"', "[not json", "null"])
def test_malformed_registry_starts_fresh(tmp_path: Path, content):
    registry = tmp_path / "generated-tools.json"
    registry.write_text(content)
    assert load_registry(registry) == []
    assert update_registry(registry, "upper", "Upper Tool", "Uppercase text.") is True
    assert [entry["slug"] for entry in read(registry)] == ["upper"]


def test_missing_registry_loads_empty(tmp_path: Path):
    assert load_registry(tmp_path / "absent.json") == []
