"""Detection orchestrator: run every detector concurrently, assemble one result.

Detectors share no state and only read from storage, so they are submitted
to a thread pool together. All of them finish before the result is built in
a single step; the install command is derived afterwards from the resolved
package manager.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING, Any

from anvil.detector.build_system import detect_build_system
from anvil.detector.ci_provider import detect_ci_provider
from anvil.detector.language import detect_languages
from anvil.detector.layout import detect_directories, detect_monorepo
from anvil.detector.linter import detect_linters
from anvil.detector.package_manager import detect_package_manager
from anvil.detector.storage import LocalStorage
from anvil.detector.test_framework import detect_test_framework
from anvil.detector.types import DetectedCommand, DetectionResult, PackageManager

if TYPE_CHECKING:
    from collections.abc import Callable

    from anvil.detector.storage import Storage

logger = logging.getLogger(__name__)

# Field name -> (detector, value used when the detector fails).
_DETECTORS: dict[str, tuple[Callable[[Path, Storage], Any], Any]] = {
    "languages": (detect_languages, []),
    "package_manager": (detect_package_manager, None),
    "test_framework": (detect_test_framework, None),
    "build_system": (detect_build_system, None),
    "ci_provider": (detect_ci_provider, None),
    "linters": (detect_linters, []),
    "is_monorepo": (detect_monorepo, False),
    "directories": (detect_directories, []),
}

_INSTALL_COMMANDS: dict[PackageManager, str] = {
    PackageManager.NPM: "npm install",
    PackageManager.YARN: "yarn install",
    PackageManager.PNPM: "pnpm install",
    PackageManager.BUN: "bun install",
    PackageManager.PIP: "pip install -r requirements.txt",
    PackageManager.POETRY: "poetry install",
    PackageManager.UV: "uv sync",
    PackageManager.PIPENV: "pipenv install",
}


def detect_project(project_root: Path, storage: Storage | None = None) -> DetectionResult:
    """Run all detectors against *project_root* and return the aggregate.

    Parameters
    ----------
    project_root:
        Root of the project to inspect.
    storage:
        Storage to read through; defaults to the host filesystem.
    """
    project_root = Path(project_root)
    found = _gather(project_root, storage or LocalStorage())

    package_manager: PackageManager | None = found["package_manager"]
    result = DetectionResult(
        languages=tuple(found["languages"]),
        package_manager=package_manager,
        test_framework=found["test_framework"],
        build_system=found["build_system"],
        ci_provider=found["ci_provider"],
        linters=tuple(found["linters"]),
        is_monorepo=found["is_monorepo"],
        install_command=derive_install_command(package_manager),
        directories=tuple(found["directories"]),
    )
    _log_result(result)
    return result


def derive_install_command(package_manager: PackageManager | None) -> DetectedCommand | None:
    """Conventional install command for *package_manager*."""
    if package_manager is None:
        return None
    return DetectedCommand(
        _INSTALL_COMMANDS[package_manager],
        f"{package_manager.value} convention",
    )


def _gather(project_root: Path, storage: Storage) -> dict[str, Any]:
    """Scatter every detector to a thread pool and collect all results.

    A detector that raises is replaced by its empty value so one bad
    category never aborts the others.
    """
    found: dict[str, Any] = {}
    with ThreadPoolExecutor(max_workers=len(_DETECTORS)) as pool:
        futures = {
            field: pool.submit(detector, project_root, storage)
            for field, (detector, _empty) in _DETECTORS.items()
        }
        for field, future in futures.items():
            try:
                found[field] = future.result()
            except Exception:
                logger.warning(
                    "Detector for %s failed; treating as no evidence", field, exc_info=True
                )
                found[field] = _DETECTORS[field][1]
    return found


def _log_result(result: DetectionResult) -> None:
    logger.info(
        "Detection complete: languages=%s pm=%s tests=%s build=%s ci=%s linters=%d monorepo=%s",
        ",".join(lang.value for lang in result.languages) or "-",
        result.package_manager.value if result.package_manager else None,
        result.test_framework.name.value if result.test_framework else None,
        result.build_system.name.value if result.build_system else None,
        result.ci_provider.value if result.ci_provider else None,
        len(result.linters),
        result.is_monorepo,
    )
