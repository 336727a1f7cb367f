"""Package manager detection from lockfiles and manifests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anvil.detector.rules import Probe, ProjectFiles, first_hit
from anvil.detector.types import PackageManager

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

# Node lockfiles, most specific first.
_NODE_LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
)

# Python lockfiles and manifests, most specific first.
_PYTHON_FILES: tuple[tuple[str, PackageManager], ...] = (
    ("uv.lock", PackageManager.UV),
    ("poetry.lock", PackageManager.POETRY),
    ("Pipfile.lock", PackageManager.PIPENV),
    ("Pipfile", PackageManager.PIPENV),
)


def detect_package_manager(project_root: Path, storage: Storage) -> PackageManager | None:
    """Return the package manager with the highest-priority evidence.

    Order: Node lockfiles, then Python lockfiles, poetry declared in
    ``pyproject.toml``, plain pip, and finally npm for a bare ``package.json``.
    """
    hit = first_hit(_evidence(ProjectFiles(project_root, storage)))
    return hit[0] if hit else None


def _evidence(files: ProjectFiles) -> list[tuple[Probe, PackageManager]]:
    def pip_manifest() -> str | None:
        for name in ("requirements.txt", "pyproject.toml"):
            if files.exists(name):
                return name
        return None

    table: list[tuple[Probe, PackageManager]] = [
        (files.file(name), manager) for name, manager in _NODE_LOCKFILES + _PYTHON_FILES
    ]
    table += [
        (files.toml_table("pyproject.toml", "tool.poetry"), PackageManager.POETRY),
        (pip_manifest, PackageManager.PIP),
        # npm is the Node.js default when no lockfile exists.
        (files.file("package.json"), PackageManager.NPM),
    ]
    return table
