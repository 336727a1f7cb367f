"""Shared test fixtures for Anvil."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from anvil.detector.storage import MemoryStorage

ROOT = Path("/p")

StorageFactory = Callable[..., MemoryStorage]


def memory_storage(
    files: Mapping[str, str | None] | None = None,
    dirs: Mapping[str, list[str]] | None = None,
) -> MemoryStorage:
    """In-memory storage rooted at ``/p``; keys are relative to the root.

    The root listing defaults to the top-level names of *files* and *dirs*.
    """
    files = dict(files or {})
    dirs = dict(dirs or {})
    if "" not in dirs:
        dirs[""] = sorted({name.split("/")[0] for name in (*files, *dirs) if name})
    return MemoryStorage(
        files={(ROOT / name).as_posix(): content for name, content in files.items()},
        dirs={(ROOT / name).as_posix(): entries for name, entries in dirs.items()},
    )


@pytest.fixture()
def root() -> Path:
    return ROOT


@pytest.fixture()
def storage() -> StorageFactory:
    return memory_storage


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal Python project on disk."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pytest.ini_options]\ntestpaths = ["tests"]\n\n[tool.ruff]\nline-length = 99\n',
        encoding="utf-8",
    )
    (tmp_path / "src").mkdir()
    (tmp_path / "tests").mkdir()
    return tmp_path
