"""Signal catalog and detection result types.

Every closed set of recognisable values is an :class:`enum.Enum`; the
aggregate :class:`DetectionResult` is frozen once assembled.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar


class Language(enum.Enum):
    """Primary languages recognised from manifest files."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"


class PackageManager(enum.Enum):
    """Package managers recognised from lockfiles and manifests."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"
    PIP = "pip"
    POETRY = "poetry"
    UV = "uv"
    PIPENV = "pipenv"


class TestFramework(enum.Enum):
    """Test runners recognised from config files and scripts."""

    __test__ = False  # keep pytest from collecting this class

    VITEST = "vitest"
    JEST = "jest"
    MOCHA = "mocha"
    PYTEST = "pytest"


class BuildSystem(enum.Enum):
    """Build tools recognised from config files and scripts."""

    TSC = "tsc"
    VITE = "vite"
    WEBPACK = "webpack"
    ESBUILD = "esbuild"
    ROLLUP = "rollup"
    SETUPTOOLS = "setuptools"
    HATCH = "hatch"
    MATURIN = "maturin"


class CIProvider(enum.Enum):
    """CI providers recognised from workflow directories."""

    GITHUB_ACTIONS = "github-actions"


class Linter(enum.Enum):
    """Linters, formatters and type checkers."""

    ESLINT = "eslint"
    PRETTIER = "prettier"
    BIOME = "biome"
    RUFF = "ruff"
    BLACK = "black"
    FLAKE8 = "flake8"
    MYPY = "mypy"


@dataclass(frozen=True)
class DetectedCommand:
    """A recommended shell command and the file (or section) that justified it.

    ``source`` is either a plain filename (``"vitest.config.ts"``) or a
    ``"<file> [<section>]"`` locator (``"pyproject.toml [tool.ruff]"``).
    """

    command: str
    source: str

    def to_dict(self) -> dict[str, str]:
        return {"command": self.command, "source": self.source}


T = TypeVar("T", TestFramework, BuildSystem, Linter)


@dataclass(frozen=True)
class ToolResult(Generic[T]):
    """A detected tool paired with the command that runs it."""

    name: T
    command: DetectedCommand

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name.value, "command": self.command.to_dict()}


@dataclass(frozen=True)
class DetectionResult:
    """Everything the detectors found about a project.

    ``None`` and empty tuples mean "no evidence", never "unknown error".
    """

    languages: tuple[Language, ...] = ()
    package_manager: PackageManager | None = None
    test_framework: ToolResult[TestFramework] | None = None
    build_system: ToolResult[BuildSystem] | None = None
    ci_provider: CIProvider | None = None
    linters: tuple[ToolResult[Linter], ...] = ()
    is_monorepo: bool = False
    install_command: DetectedCommand | None = None
    directories: tuple[str, ...] = ()

    def linter_names(self) -> list[Linter]:
        """Names of the detected linters, in detection order."""
        return [linter.name for linter in self.linters]

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable view of the result."""
        return {
            "languages": [lang.value for lang in self.languages],
            "package_manager": self.package_manager.value if self.package_manager else None,
            "test_framework": self.test_framework.to_dict() if self.test_framework else None,
            "build_system": self.build_system.to_dict() if self.build_system else None,
            "ci_provider": self.ci_provider.value if self.ci_provider else None,
            "linters": [linter.to_dict() for linter in self.linters],
            "is_monorepo": self.is_monorepo,
            "install_command": (
                self.install_command.to_dict() if self.install_command else None
            ),
            "directories": list(self.directories),
        }


@dataclass
class DetectionResultBuilder:
    """Assemble a :class:`DetectionResult` step by step.

    Used for synthetic fixtures so tests never mutate a finished result::

        result = (
            DetectionResultBuilder()
            .languages(Language.PYTHON)
            .linter(Linter.RUFF, "ruff check .", "ruff.toml")
            .build()
        )
    """

    _result: DetectionResult = field(default_factory=DetectionResult)

    def languages(self, *languages: Language) -> DetectionResultBuilder:
        self._result = replace(self._result, languages=tuple(languages))
        return self

    def package_manager(self, manager: PackageManager | None) -> DetectionResultBuilder:
        self._result = replace(self._result, package_manager=manager)
        return self

    def test_framework(
        self, name: TestFramework, command: str, source: str
    ) -> DetectionResultBuilder:
        tool = ToolResult(name, DetectedCommand(command, source))
        self._result = replace(self._result, test_framework=tool)
        return self

    def build_system(self, name: BuildSystem, command: str, source: str) -> DetectionResultBuilder:
        tool = ToolResult(name, DetectedCommand(command, source))
        self._result = replace(self._result, build_system=tool)
        return self

    def ci_provider(self, provider: CIProvider | None) -> DetectionResultBuilder:
        self._result = replace(self._result, ci_provider=provider)
        return self

    def linter(self, name: Linter, command: str, source: str) -> DetectionResultBuilder:
        tool = ToolResult(name, DetectedCommand(command, source))
        self._result = replace(self._result, linters=(*self._result.linters, tool))
        return self

    def monorepo(self, flag: bool = True) -> DetectionResultBuilder:
        self._result = replace(self._result, is_monorepo=flag)
        return self

    def install_command(self, command: str, source: str) -> DetectionResultBuilder:
        self._result = replace(self._result, install_command=DetectedCommand(command, source))
        return self

    def directories(self, *names: str) -> DetectionResultBuilder:
        self._result = replace(self._result, directories=tuple(names))
        return self

    def build(self) -> DetectionResult:
        return self._result
