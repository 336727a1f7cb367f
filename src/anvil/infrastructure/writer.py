"""Persist generated artifacts under a project root."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from anvil.generator.types import GeneratedFile

logger = logging.getLogger(__name__)


class UnsafePathError(ValueError):
    """An artifact path resolves outside the project root."""


@dataclass
class WriteResult:
    """Outcome of :func:`write_files`, as relative paths."""

    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def write_files(
    project_root: Path,
    files: Sequence[GeneratedFile],
    *,
    force: bool = False,
    skip: Iterable[str] = (),
) -> WriteResult:
    """Write *files* under *project_root*.

    Existing files are left alone unless *force* is set; paths listed in
    *skip* are never written. Every path is validated before anything is
    written.

    Raises
    ------
    UnsafePathError
        If any artifact would land outside *project_root*.
    """
    root = project_root.resolve()
    for generated in files:
        target = (root / generated.relative_path).resolve()
        if target != root and not target.is_relative_to(root):
            msg = f"{generated.relative_path} resolves outside {root}"
            raise UnsafePathError(msg)

    skipped_paths = set(skip)
    result = WriteResult()
    for generated in files:
        target = root / generated.relative_path
        if generated.relative_path in skipped_paths:
            logger.debug("Skipping %s (listed in config)", generated.relative_path)
            result.skipped.append(generated.relative_path)
            continue
        if target.exists() and not force:
            logger.debug("Skipping %s (already exists)", generated.relative_path)
            result.skipped.append(generated.relative_path)
            continue
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(generated.content, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write %s: %s", generated.relative_path, exc)
            result.errors.append(generated.relative_path)
            continue
        result.written.append(generated.relative_path)
    return result
