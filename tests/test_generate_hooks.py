"""Tests for anvil.generator.hooks — format-on-write hook."""

from __future__ import annotations

from anvil.detector.types import DetectionResult, DetectionResultBuilder, Linter
from anvil.generator.hooks import formatter_command, generate_hooks_config


def _ruff_only() -> DetectionResult:
    return DetectionResultBuilder().linter(Linter.RUFF, "ruff check .", "ruff.toml").build()


class TestFormatterPreference:
    def test_biome_first(self) -> None:
        detection = (
            DetectionResultBuilder()
            .linter(Linter.RUFF, "ruff check .", "ruff.toml")
            .linter(Linter.BIOME, "npx biome check .", "biome.json")
            .build()
        )
        assert formatter_command(detection) == 'npx biome format --write "$CLAUDE_FILE_PATH"'

    def test_prettier_over_black(self) -> None:
        detection = (
            DetectionResultBuilder()
            .linter(Linter.BLACK, "black --check .", "pyproject.toml [tool.black]")
            .linter(Linter.PRETTIER, "npx prettier --check .", ".prettierrc")
            .build()
        )
        assert formatter_command(detection) == 'npx prettier --write "$CLAUDE_FILE_PATH"'

    def test_black_over_ruff(self) -> None:
        detection = (
            DetectionResultBuilder()
            .linter(Linter.RUFF, "ruff check .", "ruff.toml")
            .linter(Linter.BLACK, "black --check .", "pyproject.toml [tool.black]")
            .build()
        )
        assert formatter_command(detection) == 'black "$CLAUDE_FILE_PATH"'

    def test_ruff_alone(self) -> None:
        detection = _ruff_only()
        assert formatter_command(detection) == 'ruff format "$CLAUDE_FILE_PATH"'

    def test_checkers_only(self) -> None:
        detection = (
            DetectionResultBuilder()
            .linter(Linter.ESLINT, "npx eslint .", ".eslintrc.json")
            .linter(Linter.MYPY, "mypy .", "mypy.ini")
            .build()
        )
        assert formatter_command(detection) is None


class TestGenerateHooksConfig:
    def test_shape(self) -> None:
        detection = _ruff_only()
        assert generate_hooks_config(detection) == {
            "hooks": {
                "PostToolUse": [
                    {
                        "matcher": "Write|Edit",
                        "type": "command",
                        "command": 'ruff format "$CLAUDE_FILE_PATH"',
                    }
                ]
            }
        }

    def test_no_formatter_no_hooks(self) -> None:
        assert generate_hooks_config(DetectionResult()) is None
