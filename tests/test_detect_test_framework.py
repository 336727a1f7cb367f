"""Tests for anvil.detector.test_framework."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from anvil.detector.test_framework import detect_test_framework
from anvil.detector.types import DetectedCommand, TestFramework

if TYPE_CHECKING:
    from pathlib import Path

    from conftest import StorageFactory


class TestNodeConfigs:
    @pytest.mark.parametrize(
        ("config", "expected", "command"),
        [
            ("vitest.config.ts", TestFramework.VITEST, "npx vitest run"),
            ("vitest.config.mjs", TestFramework.VITEST, "npx vitest run"),
            ("jest.config.js", TestFramework.JEST, "npx jest"),
            (".mocharc.yml", TestFramework.MOCHA, "npx mocha"),
        ],
    )
    def test_config_file(
        self,
        root: Path,
        storage: StorageFactory,
        config: str,
        expected: TestFramework,
        command: str,
    ) -> None:
        found = detect_test_framework(root, storage({"package.json": "{}", config: ""}))
        assert found is not None
        assert found.name is expected
        assert found.command == DetectedCommand(command, config)

    def test_vitest_wins_over_jest(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"jest.config.js": "", "vitest.config.ts": ""})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.name is TestFramework.VITEST

    def test_config_wins_over_script(self, root: Path, storage: StorageFactory) -> None:
        s = storage(
            {
                "package.json": '{"scripts": {"test": "jest"}}',
                ".mocharc.json": "{}",
            }
        )
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.name is TestFramework.MOCHA


class TestTestScript:
    def test_jest_in_script(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"package.json": '{"scripts": {"test": "jest --coverage"}}'})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.name is TestFramework.JEST
        assert found.command == DetectedCommand("npm test", "package.json scripts.test")

    def test_vitest_in_script(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"package.json": '{"scripts": {"test": "vitest"}}'})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.name is TestFramework.VITEST

    def test_unknown_runner(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"package.json": '{"scripts": {"test": "node test.js"}}'})
        assert detect_test_framework(root, s) is None

    def test_non_string_script_ignored(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"package.json": '{"scripts": {"test": ["jest"]}}'})
        assert detect_test_framework(root, s) is None


class TestPytest:
    def test_pytest_ini(self, root: Path, storage: StorageFactory) -> None:
        found = detect_test_framework(root, storage({"pytest.ini": "[pytest]\n"}))
        assert found is not None
        assert found.command == DetectedCommand("pytest", "pytest.ini")

    def test_conftest(self, root: Path, storage: StorageFactory) -> None:
        found = detect_test_framework(root, storage({"conftest.py": ""}))
        assert found is not None
        assert found.command.source == "conftest.py"

    def test_pyproject_section(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"pyproject.toml": '[tool.pytest.ini_options]\ntestpaths = ["tests"]\n'})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.name is TestFramework.PYTEST
        assert found.command.source == "pyproject.toml [tool.pytest]"

    def test_setup_cfg_section(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"setup.cfg": "[tool:pytest]\naddopts = -q\n"})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.command.source == "setup.cfg [tool:pytest]"

    def test_pytest_ini_wins_over_pyproject(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"pyproject.toml": "[tool.pytest.ini_options]\n", "pytest.ini": ""})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.command.source == "pytest.ini"

    def test_mention_outside_a_section_is_ignored(
        self, root: Path, storage: StorageFactory
    ) -> None:
        s = storage({"pyproject.toml": '[project]\ndescription = "uses [tool.pytest]"\n'})
        assert detect_test_framework(root, s) is None

    def test_malformed_setup_cfg(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"setup.cfg": "no section header\n"})
        assert detect_test_framework(root, s) is None


class TestPrecedence:
    def test_node_wins_over_python(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"jest.config.js": "", "pytest.ini": ""})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.name is TestFramework.JEST

    def test_nothing(self, root: Path, storage: StorageFactory) -> None:
        assert detect_test_framework(root, storage({"package.json": "{}"})) is None


class TestLenientSetupCfg:
    def test_repeated_option(self, root: Path, storage: StorageFactory) -> None:
        s = storage({"setup.cfg": "[tool:pytest]\naddopts = -q\naddopts = -x\n"})
        found = detect_test_framework(root, s)
        assert found is not None
        assert found.command.source == "setup.cfg [tool:pytest]"
