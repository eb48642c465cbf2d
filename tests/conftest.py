import shutil
import subprocess
import types
from pathlib import Path
from typing import Any, Dict, List

import pytest
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from forge.config import ForgePaths

NODE = shutil.which("node")

requires_node = pytest.mark.skipif(NODE is None, reason="node is not installed")


class DummyChoice:
    def __init__(self, content: str):
        self.message = types.SimpleNamespace(content=content)


class DummyCompletion:
    def __init__(self, content: str):
        self.choices = [DummyChoice(content)]


class DummyGroq:
    """
    Minimal mock for groq.Groq that supports:
    client.chat.completions.create(...)

    Records every call's kwargs; raises `error` instead of answering when set.
    """
    def __init__(self, content: str = "", error: Exception | None = None):
        self._content = content
        self._error = error
        self.calls: List[Dict[str, Any]] = []
        self.chat = types.SimpleNamespace(
            completions=types.SimpleNamespace(create=self._create)
        )

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return DummyCompletion(self._content)


def run_node_module(source: str, cwd: Path) -> subprocess.CompletedProcess:
    """Evaluate an ES module snippet with node."""
    return subprocess.run(
        [NODE, "--input-type=module", "-e", source],
        cwd=cwd,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


@pytest.fixture(autouse=True)
def set_env(monkeypatch):
    """
    Keep tests offline and deterministic: no API key, fixed model.
    """
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("FORGE_TIMEOUT", raising=False)
    monkeypatch.delenv("FORGE_ROOT", raising=False)
    monkeypatch.setenv("GROQ_MODEL", "dummy-model")
    yield


@pytest.fixture
def forge_paths(tmp_path: Path) -> ForgePaths:
    return ForgePaths(root=tmp_path)
