"""Tool-invocation hooks generator.

Currently a single hook: re-format a file after the agent writes or edits it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from anvil.detector.types import Linter

if TYPE_CHECKING:
    from anvil.detector.types import DetectionResult

EDIT_MATCHER = "Write|Edit"

# Format-on-write command per tool, in order of preference. Tools that only
# check (never rewrite) map to None.
_FORMATTERS: dict[Linter, str | None] = {
    Linter.BIOME: 'npx biome format --write "$CLAUDE_FILE_PATH"',
    Linter.PRETTIER: 'npx prettier --write "$CLAUDE_FILE_PATH"',
    Linter.BLACK: 'black "$CLAUDE_FILE_PATH"',
    Linter.RUFF: 'ruff format "$CLAUDE_FILE_PATH"',
    Linter.ESLINT: None,
    Linter.FLAKE8: None,
    Linter.MYPY: None,
}


def formatter_command(detection: DetectionResult) -> str | None:
    """The preferred format-on-write command among the detected tools."""
    detected = set(detection.linter_names())
    for linter, command in _FORMATTERS.items():
        if command is not None and linter in detected:
            return command
    return None


def generate_hooks_config(detection: DetectionResult) -> dict[str, Any] | None:
    """Build the ``{"hooks": {...}}`` object, or ``None`` when no hook applies."""
    hooks: dict[str, list[dict[str, str]]] = {}

    formatter = formatter_command(detection)
    if formatter is not None:
        hooks["PostToolUse"] = [
            {"matcher": EDIT_MATCHER, "type": "command", "command": formatter},
        ]

    if not hooks:
        return None
    return {"hooks": hooks}
