"""Slash-command prompt files for ``.claude/commands/``.

Each command is an independent markdown file and is never merged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anvil.generator.types import GeneratedFile

if TYPE_CHECKING:
    from anvil.detector.types import DetectionResult, TestFramework, ToolResult

COMMANDS_DIR = ".claude/commands"


def generate_slash_commands(detection: DetectionResult) -> list[GeneratedFile]:
    """``review`` always; ``test`` only when a test framework was detected."""
    files = [GeneratedFile(f"{COMMANDS_DIR}/review.md", _review_prompt(detection))]
    if detection.test_framework is not None:
        files.append(
            GeneratedFile(f"{COMMANDS_DIR}/test.md", _test_prompt(detection.test_framework))
        )
    return files


def _review_prompt(detection: DetectionResult) -> str:
    lines = [
        "Review the changes in the current branch compared to main.",
        "",
        "1. Run `git diff main...HEAD` to see all changes.",
        "2. For each changed file, check for:",
        "   - Bugs or logic errors",
        "   - Missing error handling",
        "   - Security concerns",
        "   - Test coverage gaps",
    ]
    if detection.linters:
        lint_commands = " and ".join(f"`{linter.command.command}`" for linter in detection.linters)
        lines.append(f"3. Run {lint_commands} and report any issues.")
    lines += ["", "Provide a concise summary of findings with file:line references."]
    return "\n".join(lines) + "\n"


def _test_prompt(test_framework: ToolResult[TestFramework]) -> str:
    lines = [
        f"Run the test suite with `{test_framework.command.command}` and report results.",
        "",
        "If any tests fail:",
        "1. Show the failure output.",
        "2. Identify the likely cause.",
        "3. Suggest a fix.",
        "",
        "If all tests pass, report the summary (pass count, duration).",
    ]
    return "\n".join(lines) + "\n"
