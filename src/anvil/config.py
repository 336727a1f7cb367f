"""Project configuration from ``.anvil.yml``.

Every key is optional; command-line flags take precedence.

.. code-block:: yaml

    local: true                 # merge MCP servers and hooks into settings.local.json
    skip:                       # artifacts never written
      - .claude/commands/review.md
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = ".anvil.yml"


@dataclass(frozen=True)
class AnvilConfig:
    """Settings read from ``.anvil.yml``."""

    local: bool = False
    skip: tuple[str, ...] = ()


def load_config(project_root: Path) -> AnvilConfig:
    """Load ``.anvil.yml`` from *project_root*.

    Falls back to defaults for a missing file, and logs a warning for an
    unreadable or malformed one.
    """
    config_path = project_root / CONFIG_FILE
    if not config_path.is_file():
        return AnvilConfig()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using defaults", CONFIG_FILE)
        return AnvilConfig()

    if data is None:
        return AnvilConfig()
    if not isinstance(data, dict):
        logger.warning("%s must contain a mapping, using defaults", CONFIG_FILE)
        return AnvilConfig()

    local = data.get("local", False)
    if not isinstance(local, bool):
        logger.warning("%s: 'local' must be true or false, ignoring", CONFIG_FILE)
        local = False

    skip = data.get("skip", [])
    if not isinstance(skip, list):
        logger.warning("%s: 'skip' must be a list, ignoring", CONFIG_FILE)
        skip = []

    return AnvilConfig(local=local, skip=tuple(str(item) for item in skip))
