"""Tests for anvil.generator.orchestrator — placement and merge policy."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from anvil.detector.orchestrator import detect_project
from anvil.detector.types import (
    CIProvider,
    DetectionResult,
    DetectionResultBuilder,
    Language,
    Linter,
    TestFramework,
)
from anvil.generator import GenerateOptions, generate_all, merge_documents
from anvil.generator.orchestrator import to_json

if TYPE_CHECKING:
    from pathlib import Path

    from conftest import StorageFactory


def _detection() -> DetectionResult:
    return (
        DetectionResultBuilder()
        .languages(Language.PYTHON)
        .test_framework(TestFramework.PYTEST, "pytest", "pytest.ini")
        .ci_provider(CIProvider.GITHUB_ACTIONS)
        .linter(Linter.RUFF, "ruff check .", "ruff.toml")
        .build()
    )


def _by_path(detection: DetectionResult, *, local: bool = False) -> dict[str, str]:
    files = generate_all(detection, GenerateOptions(local=local))
    return {f.relative_path: f.content for f in files}


class TestProjectMode:
    def test_paths(self) -> None:
        files = generate_all(_detection())
        assert [f.relative_path for f in files] == [
            "CLAUDE.md",
            ".mcp.json",
            ".claude/settings.json",
            ".claude/commands/review.md",
            ".claude/commands/test.md",
        ]

    def test_default_options_are_project_mode(self) -> None:
        assert generate_all(_detection()) == generate_all(_detection(), GenerateOptions())

    def test_separate_documents(self) -> None:
        files = _by_path(_detection())
        mcp = json.loads(files[".mcp.json"])
        hooks = json.loads(files[".claude/settings.json"])
        assert list(mcp) == ["mcpServers"]
        assert list(hooks) == ["hooks"]

    def test_no_formatter_no_hooks_file(self) -> None:
        files = _by_path(DetectionResult())
        assert ".claude/settings.json" not in files
        assert ".mcp.json" in files


class TestLocalMode:
    def test_merged_settings(self) -> None:
        files = _by_path(_detection(), local=True)
        assert ".mcp.json" not in files
        assert ".claude/settings.json" not in files
        settings = json.loads(files[".claude/settings.local.json"])
        assert set(settings) == {"mcpServers", "hooks"}
        assert settings["hooks"]["PostToolUse"][0]["command"] == 'ruff format "$CLAUDE_FILE_PATH"'

    def test_merge_without_hooks(self) -> None:
        files = _by_path(DetectionResult(), local=True)
        settings = json.loads(files[".claude/settings.local.json"])
        assert list(settings) == ["mcpServers"]

    def test_guidance_independent_of_mode(self) -> None:
        local = _by_path(_detection(), local=True)
        project = _by_path(_detection())
        assert local["CLAUDE.md"] == project["CLAUDE.md"]


class TestMergeDocuments:
    def test_disjoint_keys(self) -> None:
        assert merge_documents({"a": 1}, None, {"b": 2}) == {"a": 1, "b": 2}

    def test_all_none(self) -> None:
        assert merge_documents(None, None) is None

    def test_clash_raises(self) -> None:
        with pytest.raises(ValueError, match="hooks"):
            merge_documents({"hooks": {}}, {"hooks": {"x": []}})


class TestToJson:
    def test_two_space_indent_and_newline(self) -> None:
        assert to_json({"a": {"b": 1}}) == '{\n  "a": {\n    "b": 1\n  }\n}\n'

    def test_non_ascii_kept(self) -> None:
        assert "café" in to_json({"name": "café"})


class TestModeChangesPlacementOnly:
    def test_local_documents_match_project_documents(self) -> None:
        local = _by_path(_detection(), local=True)
        project = _by_path(_detection())
        settings = json.loads(local[".claude/settings.local.json"])
        assert settings["mcpServers"] == json.loads(project[".mcp.json"])["mcpServers"]
        assert settings["hooks"] == json.loads(project[".claude/settings.json"])["hooks"]

    def test_shared_artifacts_identical(self) -> None:
        local = _by_path(_detection(), local=True)
        project = _by_path(_detection())
        shared = local.keys() & project.keys()
        assert shared == {"CLAUDE.md", ".claude/commands/review.md", ".claude/commands/test.md"}
        for path in shared:
            assert local[path] == project[path]


class TestIdempotence:
    def test_same_detection_same_artifacts(self) -> None:
        assert generate_all(_detection()) == generate_all(_detection())

    def test_full_pipeline_twice(self, root: Path, storage: StorageFactory) -> None:
        s = storage(
            {
                "package.json": '{"devDependencies": {"typescript": "5"}}',
                "yarn.lock": "",
                "jest.config.js": "",
                ".eslintrc.json": "{}",
                ".prettierrc": "{}",
                "pyproject.toml": "[tool.ruff]\n\n[tool.mypy]\n",
            },
            dirs={".github/workflows": ["ci.yml"], "": ["src", "tests"]},
        )
        for local in (False, True):
            options = GenerateOptions(local=local)
            first = generate_all(detect_project(root, s), options)
            second = generate_all(detect_project(root, s), options)
            assert [(f.relative_path, f.content) for f in first] == [
                (f.relative_path, f.content) for f in second
            ]
