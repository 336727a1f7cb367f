"""Project-guidance document (``CLAUDE.md``) generator.

Only real commands extracted from config files are listed; a section with
nothing to say is left out rather than printed empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anvil.detector.types import Language, Linter
from anvil.generator.mcp_config import select_servers

if TYPE_CHECKING:
    from anvil.detector.types import DetectionResult

_COMMAND_COLUMN = 30

_LINTER_LABELS: dict[Linter, str] = {
    Linter.ESLINT: "Lint code",
    Linter.PRETTIER: "Format check",
    Linter.BIOME: "Lint code",
    Linter.RUFF: "Lint code",
    Linter.BLACK: "Format check",
    Linter.FLAKE8: "Lint code",
    Linter.MYPY: "Type check",
}

NOTES_PLACEHOLDER = (
    "<!-- Add project-specific context here: domain knowledge, gotchas, conventions -->"
)


def generate_guidance(detection: DetectionResult) -> str:
    """Render the guidance document for *detection*."""
    sections: list[str] = [
        "# CLAUDE.md\n",
        "This file provides guidance to Claude Code (claude.ai/code) "
        "when working with code in this repository.\n",
    ]

    commands = _command_lines(detection)
    if commands:
        sections.append("## Build & Test Commands\n")
        sections.append("```bash")
        sections.extend(commands)
        sections.append("```\n")

    if detection.directories:
        sections.append("## Key Directories\n")
        sections.extend(f"- `{name}/`" for name in detection.directories)
        sections.append("")

    style = _style_notes(detection)
    if style:
        sections.append("## Code Style\n")
        sections.extend(style)
        sections.append("")

    sections.append("## MCP Servers Available\n")
    sections.append("This project is configured with the following MCP servers:\n")
    sections.extend(
        f"- **{server.name}** — {server.description}" for server in select_servers(detection)
    )
    sections.append("")

    sections.append("## Project-Specific Notes\n")
    sections.append(NOTES_PLACEHOLDER)
    sections.append("")

    return "\n".join(sections)


def _command_lines(detection: DetectionResult) -> list[str]:
    lines: list[str] = []
    if detection.install_command is not None:
        lines.append(_pad(detection.install_command.command, "Install dependencies"))
    if detection.build_system is not None:
        lines.append(_pad(detection.build_system.command.command, "Build project"))
    if detection.test_framework is not None:
        lines.append(_pad(detection.test_framework.command.command, "Run tests"))
    for linter in detection.linters:
        lines.append(_pad(linter.command.command, _LINTER_LABELS[linter.name]))
    return lines


def _pad(command: str, description: str) -> str:
    """Align the trailing comment at a fixed column (at least one space)."""
    padding = max(1, _COMMAND_COLUMN - len(command))
    return f"{command}{' ' * padding}# {description}"


def _style_notes(detection: DetectionResult) -> list[str]:
    names = set(detection.linter_names())
    notes: list[str] = []

    if Linter.ESLINT in names and Linter.PRETTIER in names:
        notes.append("- ESLint for linting, Prettier for formatting")
    elif Linter.BIOME in names:
        notes.append("- Biome for linting and formatting")
    elif Linter.ESLINT in names:
        notes.append("- ESLint for linting")
    elif Linter.PRETTIER in names:
        notes.append("- Prettier for formatting")

    if Linter.RUFF in names:
        notes.append("- Ruff for linting and formatting")
    if Linter.BLACK in names:
        notes.append("- Black for formatting")
    if Linter.MYPY in names:
        notes.append("- Mypy for type checking")
    if Linter.FLAKE8 in names and Linter.RUFF not in names:
        notes.append("- Flake8 for linting")

    if Language.TYPESCRIPT in detection.languages:
        notes.append("- TypeScript with strict mode")

    return notes
