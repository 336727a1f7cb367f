"""Doctor: validate the agent configuration already present in a project."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from anvil.detector.storage import LocalStorage
from anvil.generator.orchestrator import GUIDANCE_PATH, HOOKS_PATH, LOCAL_SETTINGS_PATH, MCP_PATH
from anvil.generator.slash_commands import COMMANDS_DIR

if TYPE_CHECKING:
    from anvil.detector.storage import Storage

logger = logging.getLogger(__name__)


class Severity(enum.Enum):
    """Severity level for a check result."""

    OK = "ok"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Check:
    """Result of a single validation check."""

    name: str
    severity: Severity
    description: str


class _InvalidJson(Exception):
    pass


def _read_json(storage: Storage, path: Path) -> dict[str, Any] | None:
    """Parse *path* as a JSON object; ``None`` when absent or unreadable."""
    content = storage.read_text(path)
    if content is None:
        return None
    try:
        data = json.loads(content)
    except (ValueError, RecursionError) as exc:
        raise _InvalidJson(str(exc)) from exc
    if not isinstance(data, dict):
        msg = "top-level value is not an object"
        raise _InvalidJson(msg)
    return data


def _check_guidance(root: Path, storage: Storage) -> Check:
    if storage.exists(root / GUIDANCE_PATH):
        return Check("guidance", Severity.OK, f"{GUIDANCE_PATH} found.")
    return Check(
        "guidance", Severity.ERROR, f"{GUIDANCE_PATH} not found. Run `anvil init` to create it."
    )


def _check_mcp(root: Path, storage: Storage) -> Check:
    try:
        manifest = _read_json(storage, root / MCP_PATH)
    except _InvalidJson as exc:
        return Check("mcp", Severity.ERROR, f"{MCP_PATH} is not valid JSON: {exc}")
    if manifest is not None:
        servers = manifest.get("mcpServers")
        if not isinstance(servers, dict):
            return Check("mcp", Severity.ERROR, f"{MCP_PATH} has no 'mcpServers' object.")
        return Check(
            "mcp", Severity.OK, f"{MCP_PATH} configures {len(servers)} MCP server(s)."
        )

    try:
        local = _read_json(storage, root / LOCAL_SETTINGS_PATH)
    except _InvalidJson as exc:
        return Check("mcp", Severity.ERROR, f"{LOCAL_SETTINGS_PATH} is not valid JSON: {exc}")
    if local is not None and isinstance(local.get("mcpServers"), dict):
        return Check(
            "mcp",
            Severity.OK,
            f"{LOCAL_SETTINGS_PATH} configures {len(local['mcpServers'])} MCP server(s).",
        )
    return Check("mcp", Severity.WARNING, "No MCP server configuration found.")


def _check_hooks(root: Path, storage: Storage) -> Check:
    for relative in (HOOKS_PATH, LOCAL_SETTINGS_PATH):
        try:
            settings = _read_json(storage, root / relative)
        except _InvalidJson as exc:
            return Check("hooks", Severity.ERROR, f"{relative} is not valid JSON: {exc}")
        if settings is not None and "hooks" in settings:
            return Check("hooks", Severity.OK, f"Hooks configured in {relative}.")
    return Check("hooks", Severity.WARNING, "No hooks configured.")


def _check_slash_commands(root: Path, storage: Storage) -> Check:
    names = [
        entry.removesuffix(".md")
        for entry in storage.list_dir(root / COMMANDS_DIR)
        if entry.endswith(".md")
    ]
    if not names:
        return Check("slash_commands", Severity.WARNING, "No slash commands found.")
    listed = ", ".join(f"/{name}" for name in names)
    return Check("slash_commands", Severity.OK, f"{len(names)} slash command(s): {listed}.")


def run_checks(project_root: Path, storage: Storage | None = None) -> list[Check]:
    """Run all validation checks and return results."""
    root = Path(project_root)
    storage = storage or LocalStorage()
    results = [
        _check_guidance(root, storage),
        _check_mcp(root, storage),
        _check_hooks(root, storage),
        _check_slash_commands(root, storage),
    ]
    logger.debug(
        "Doctor finished: %s",
        ", ".join(f"{check.name}={check.severity.value}" for check in results),
    )
    return results
