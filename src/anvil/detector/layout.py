"""Project layout: key top-level directories and the monorepo flag."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from anvil.detector.rules import ProjectFiles

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

logger = logging.getLogger(__name__)

# Top-level names worth pointing an agent at.
_KEY_DIRECTORIES = frozenset(
    {
        "src",
        "lib",
        "app",
        "pages",
        "components",
        "tests",
        "test",
        "__tests__",
        "spec",
        "docs",
        "scripts",
        "public",
        "static",
        "assets",
        "config",
        "utils",
        "helpers",
    }
)

# Workspace tool configs, checked in order.
_MONOREPO_MARKERS = (
    "pnpm-workspace.yaml",
    "nx.json",
    "turbo.json",
    "lerna.json",
    "rush.json",
)


def detect_directories(project_root: Path, storage: Storage) -> list[str]:
    """Key directories in the project root, sorted by name."""
    files = ProjectFiles(project_root, storage)
    return sorted(entry for entry in files.listing() if entry in _KEY_DIRECTORIES)


def detect_monorepo(project_root: Path, storage: Storage) -> bool:
    """Whether the project is a monorepo.

    A workspace tool config or a ``workspaces`` key in ``package.json`` is
    enough on its own.
    """
    files = ProjectFiles(project_root, storage)
    for marker in _MONOREPO_MARKERS:
        if files.exists(marker):
            logger.debug("Monorepo marker: %s", marker)
            return True
    manifest = files.json("package.json")
    return manifest is not None and "workspaces" in manifest
