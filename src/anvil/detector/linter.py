"""Linter, formatter and type-checker detection.

Two pipelines run and their results are concatenated, Node first:

* Node: Biome supersedes both a linter and a formatter, so its config
  short-circuits the pipeline. Otherwise at most one ESLint and one
  Prettier result, each from the first config file found.
* Python: Ruff, Black, Flake8 and Mypy are independent findings; each
  prefers its dedicated config file over a section of a shared file,
  except Mypy, which prefers ``pyproject.toml``.

Every check follows a hard-coded order, never a directory scan, so the
result does not depend on filesystem iteration order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anvil.detector.rules import Probe, ProjectFiles, ToolRule, first_tool
from anvil.detector.types import Linter, ToolResult

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

_BIOME_CONFIGS = ("biome.json", "biome.jsonc")

_ESLINT_CONFIGS = (
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.ts",
    ".eslintrc.js",
    ".eslintrc.json",
    ".eslintrc.yml",
    ".eslintrc.yaml",
)

_PRETTIER_CONFIGS = (
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.yml",
    ".prettierrc.yaml",
    ".prettierrc.js",
    ".prettierrc.mjs",
    "prettier.config.js",
    "prettier.config.mjs",
)


def detect_linters(project_root: Path, storage: Storage) -> list[ToolResult[Linter]]:
    """Return every detected linter, Node results before Python results."""
    files = ProjectFiles(project_root, storage)
    return _node_linters(files) + _python_linters(files)


def _node_linters(files: ProjectFiles) -> list[ToolResult[Linter]]:
    def configs(names: tuple[str, ...]) -> tuple[Probe, ...]:
        return tuple(files.file(name) for name in names)

    biome = first_tool([ToolRule(Linter.BIOME, "npx biome check .", configs(_BIOME_CONFIGS))])
    if biome is not None:
        return [biome]

    findings = [
        first_tool([ToolRule(Linter.ESLINT, "npx eslint .", configs(_ESLINT_CONFIGS))]),
        first_tool(
            [ToolRule(Linter.PRETTIER, "npx prettier --check .", configs(_PRETTIER_CONFIGS))]
        ),
    ]
    return [found for found in findings if found is not None]


def _python_linters(files: ProjectFiles) -> list[ToolResult[Linter]]:
    rules = (
        ToolRule(
            Linter.RUFF,
            "ruff check .",
            (files.file("ruff.toml"), files.toml_table("pyproject.toml", "tool.ruff")),
        ),
        ToolRule(
            Linter.BLACK,
            "black --check .",
            (files.toml_table("pyproject.toml", "tool.black"),),
        ),
        ToolRule(
            Linter.FLAKE8,
            "flake8 .",
            (files.file(".flake8"), files.ini_section("setup.cfg", "flake8")),
        ),
        ToolRule(
            Linter.MYPY,
            "mypy .",
            (files.toml_table("pyproject.toml", "tool.mypy"), files.file("mypy.ini")),
        ),
    )
    findings = [first_tool([rule]) for rule in rules]
    return [found for found in findings if found is not None]
