"""Shared types for the generation layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedFile:
    """One artifact to persist: a path relative to the project root and its content."""

    relative_path: str
    content: str


@dataclass(frozen=True)
class GenerateOptions:
    """Placement options for generated artifacts."""

    # Merge MCP servers and hooks into .claude/settings.local.json.
    local: bool = False
