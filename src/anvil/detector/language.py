"""Language detection from manifest files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from anvil.detector.rules import ProjectFiles
from anvil.detector.types import Language

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

logger = logging.getLogger(__name__)

# Any one of these marks a Python project.
_PYTHON_MARKERS = ("pyproject.toml", "setup.py", "setup.cfg", "requirements.txt")


def detect_languages(project_root: Path, storage: Storage) -> list[Language]:
    """Detect primary languages, in evidence order.

    The Node group is checked before the Python group, so a project with
    both manifests yields ``[typescript|javascript, python]``.
    """
    files = ProjectFiles(project_root, storage)
    languages: list[Language] = []

    if files.exists("package.json"):
        languages.append(_node_language(files))

    if any(files.exists(marker) for marker in _PYTHON_MARKERS):
        languages.append(Language.PYTHON)

    return languages


def _node_language(files: ProjectFiles) -> Language:
    """TypeScript when a tsconfig or a ``typescript`` dependency exists."""
    if files.exists("tsconfig.json"):
        return Language.TYPESCRIPT

    # An unreadable or malformed manifest still means JavaScript.
    manifest = files.json("package.json") or {}
    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section)
        if isinstance(deps, dict) and "typescript" in deps:
            logger.debug("TypeScript found in package.json %s", section)
            return Language.TYPESCRIPT
    return Language.JAVASCRIPT
