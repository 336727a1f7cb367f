"""Build system detection.

Node projects go through three phases: bundler config files, the ``build``
script in ``package.json``, and finally plain ``tsc`` when only a
``tsconfig.json`` is present. Python projects are read from
``pyproject.toml`` and ``setup.py``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anvil.detector.rules import (
    Probe,
    ProjectFiles,
    ToolRule,
    first_tool,
    has_table,
    script_tool,
)
from anvil.detector.types import BuildSystem, ToolResult

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

_BUNDLER_CONFIGS: tuple[tuple[BuildSystem, str, tuple[str, ...]], ...] = (
    (
        BuildSystem.VITE,
        "npx vite build",
        ("vite.config.ts", "vite.config.js", "vite.config.mts", "vite.config.mjs"),
    ),
    (
        BuildSystem.WEBPACK,
        "npx webpack",
        ("webpack.config.ts", "webpack.config.js", "webpack.config.mjs"),
    ),
    (
        BuildSystem.ROLLUP,
        "npx rollup -c",
        ("rollup.config.ts", "rollup.config.js", "rollup.config.mjs"),
    ),
)

_BUILD_SCRIPT_NEEDLES: tuple[tuple[str, BuildSystem], ...] = (
    ("vite", BuildSystem.VITE),
    ("webpack", BuildSystem.WEBPACK),
    ("esbuild", BuildSystem.ESBUILD),
    ("rollup", BuildSystem.ROLLUP),
    ("tsc", BuildSystem.TSC),
)

_PYTHON_BUILD = "python -m build"


def detect_build_system(project_root: Path, storage: Storage) -> ToolResult[BuildSystem] | None:
    """Return the build system and its command, or ``None``."""
    files = ProjectFiles(project_root, storage)
    return _node_build(files) or _python_build(files)


def _node_build(files: ProjectFiles) -> ToolResult[BuildSystem] | None:
    bundlers = [
        ToolRule(name, command, tuple(files.file(config) for config in configs))
        for name, command, configs in _BUNDLER_CONFIGS
    ]
    return (
        first_tool(bundlers)
        or script_tool(
            files.json("package.json"), "build", "npm run build", _BUILD_SCRIPT_NEEDLES
        )
        # A type config with no bundler still builds with the compiler.
        or first_tool([ToolRule(BuildSystem.TSC, "npx tsc", (files.file("tsconfig.json"),))])
    )


def _python_build(files: ProjectFiles) -> ToolResult[BuildSystem] | None:
    if files.text("pyproject.toml") is None:
        return first_tool(
            [ToolRule(BuildSystem.SETUPTOOLS, _PYTHON_BUILD, (files.file("setup.py"),))]
        )

    pyproject = files.toml("pyproject.toml")
    build_system = (pyproject or {}).get("build-system")
    backend_text = ""
    if isinstance(build_system, dict):
        requires = build_system.get("requires")
        parts = [str(item) for item in requires] if isinstance(requires, list) else []
        parts.append(str(build_system.get("build-backend", "")))
        backend_text = " ".join(parts)

    def declared(table: str, backend: str) -> Probe:
        def probe() -> str | None:
            if has_table(pyproject, f"tool.{table}") or backend in backend_text:
                return f"pyproject.toml [tool.{table}]"
            return None

        return probe

    def setuptools() -> str | None:
        if "setuptools" in backend_text or files.exists("setup.py"):
            return "pyproject.toml"
        return None

    return first_tool(
        [
            ToolRule(BuildSystem.HATCH, "hatch build", (declared("hatch", "hatchling"),)),
            ToolRule(BuildSystem.MATURIN, "maturin build", (declared("maturin", "maturin"),)),
            ToolRule(BuildSystem.SETUPTOOLS, _PYTHON_BUILD, (setuptools,)),
        ]
    )
