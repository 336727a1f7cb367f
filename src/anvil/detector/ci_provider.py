"""CI provider detection from workflow directories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anvil.detector.rules import Probe, ProjectFiles, first_hit
from anvil.detector.types import CIProvider

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

_YAML_SUFFIXES = (".yml", ".yaml")


def detect_ci_provider(project_root: Path, storage: Storage) -> CIProvider | None:
    """Return the first CI provider with workflow evidence, or ``None``."""
    files = ProjectFiles(project_root, storage)
    providers: list[tuple[Probe, CIProvider]] = [
        (_yaml_in(files, ".github/workflows"), CIProvider.GITHUB_ACTIONS),
    ]
    hit = first_hit(providers)
    return hit[0] if hit else None


def _yaml_in(files: ProjectFiles, directory: str) -> Probe:
    """Probe answering the first YAML entry of *directory*; other entries are ignored."""

    def probe() -> str | None:
        for entry in files.listing(directory):
            if entry.endswith(_YAML_SUFFIXES):
                return f"{directory}/{entry}"
        return None

    return probe
