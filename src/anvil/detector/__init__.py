"""Detector package: infer project tooling from files on disk.

Public API:
    detect_project(project_root, storage) -> DetectionResult
"""

from anvil.detector.orchestrator import derive_install_command, detect_project
from anvil.detector.storage import LocalStorage, MemoryStorage, Storage
from anvil.detector.types import (
    BuildSystem,
    CIProvider,
    DetectedCommand,
    DetectionResult,
    DetectionResultBuilder,
    Language,
    Linter,
    PackageManager,
    TestFramework,
    ToolResult,
)

__all__ = [
    "BuildSystem",
    "CIProvider",
    "DetectedCommand",
    "DetectionResult",
    "DetectionResultBuilder",
    "Language",
    "Linter",
    "LocalStorage",
    "MemoryStorage",
    "PackageManager",
    "Storage",
    "TestFramework",
    "ToolResult",
    "derive_install_command",
    "detect_project",
]
