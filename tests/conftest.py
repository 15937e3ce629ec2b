"""Pytest configuration: project root on sys.path and fake storage areas.

The layer packages (config, domain, infrastructure, application) live at the
repository root, so tests import them directly.
"""

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from infrastructure.filesystem.storage import StorageAreas  # noqa: E402


class CountingTokens:
    """Deterministic hex tokens: 1, 2, 3, ..."""

    def __init__(self, start: int = 1) -> None:
        self.value = start - 1

    def next(self) -> str:
        self.value += 1
        return format(self.value, "x")


@pytest.fixture
def session_root(tmp_path: Path) -> Path:
    root = tmp_path / "z" / "temporary"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def permanent_root(tmp_path: Path) -> Path:
    root = tmp_path / "z" / "permanent"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def areas(session_root: Path, permanent_root: Path) -> StorageAreas:
    return StorageAreas(session_root, permanent_root)


@pytest.fixture
def tokens() -> CountingTokens:
    return CountingTokens()


def all_files(root: Path) -> list[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())
