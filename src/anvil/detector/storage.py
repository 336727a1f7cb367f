"""Read-only storage abstraction used by every detector.

Detectors never touch the filesystem directly; they query a :class:`Storage`.
:class:`LocalStorage` wraps the host filesystem, :class:`MemoryStorage`
serves fixture data in tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Query surface over files and directories.

    Implementations must never raise: a failing query answers "absent".
    """

    def exists(self, path: Path) -> bool:
        """Whether a file or directory exists at *path*."""
        ...

    def read_text(self, path: Path) -> str | None:
        """UTF-8 contents of *path*, or ``None`` if it cannot be read."""
        ...

    def list_dir(self, path: Path) -> list[str]:
        """Entry names inside *path*, or ``[]`` if it is not a readable directory."""
        ...


class LocalStorage:
    """:class:`Storage` backed by the host filesystem."""

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            logger.debug("Could not stat %s", path)
            return False

    def read_text(self, path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.debug("Could not read %s", path)
            return None

    def list_dir(self, path: Path) -> list[str]:
        try:
            return sorted(child.name for child in path.iterdir())
        except OSError:
            logger.debug("Could not list %s", path)
            return []


class MemoryStorage:
    """:class:`Storage` over in-memory fixture data.

    *files* maps POSIX paths to contents; a ``None`` value models a file that
    exists but cannot be read. *dirs* maps directory paths to entry names.
    """

    def __init__(
        self,
        files: Mapping[str, str | None] | None = None,
        dirs: Mapping[str, list[str]] | None = None,
    ) -> None:
        self._files = dict(files or {})
        self._dirs = {key: list(entries) for key, entries in (dirs or {}).items()}

    def exists(self, path: Path) -> bool:
        key = path.as_posix()
        return key in self._files or key in self._dirs

    def read_text(self, path: Path) -> str | None:
        return self._files.get(path.as_posix())

    def list_dir(self, path: Path) -> list[str]:
        return list(self._dirs.get(path.as_posix(), []))
