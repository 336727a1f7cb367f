"""MCP server manifest generator.

Returns the manifest as a plain ``dict`` so the generation orchestrator can
decide whether it lands in its own file or merged with other settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from anvil.detector.types import CIProvider, Language

if TYPE_CHECKING:
    from anvil.detector.types import DetectionResult


@dataclass(frozen=True)
class McpServer:
    """A server entry in the manifest plus the line describing it to humans."""

    name: str
    description: str
    command: str
    args: tuple[str, ...]
    env: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {"command": self.command, "args": list(self.args)}
        if self.env:
            entry["env"] = dict(self.env)
        return entry


MEMORY = McpServer(
    "memory",
    "Cross-session context via mcp-memory-service (semantic search)",
    "python",
    ("-m", "mcp_memory_service"),
)
LSP = McpServer(
    "lsp",
    "Code intelligence via lsmcp (go-to-definition, find references, rename)",
    "npx",
    ("-y", "@mizchi/lsmcp", "-p", "tsgo"),
)
TREE_SITTER = McpServer(
    "tree-sitter",
    "Code intelligence via mcp-server-tree-sitter (AST analysis, symbols)",
    "python",
    ("-m", "mcp_server_tree_sitter"),
)
GITHUB = McpServer(
    "github",
    "GitHub integration via github-mcp-server (PRs, issues, Actions)",
    "npx",
    ("-y", "@anthropic/github-mcp-server"),
    {"GITHUB_TOKEN": "${GITHUB_TOKEN}"},
)
COVERAGE = McpServer(
    "coverage",
    "Test coverage tracking via test-coverage-mcp",
    "npx",
    ("-y", "test-coverage-mcp"),
)

# Code intelligence server per language; the first detected language decides.
_CODE_INTELLIGENCE: dict[Language, McpServer] = {
    Language.TYPESCRIPT: LSP,
    Language.JAVASCRIPT: LSP,
    Language.PYTHON: TREE_SITTER,
}

_CI_SERVERS: dict[CIProvider, McpServer] = {
    CIProvider.GITHUB_ACTIONS: GITHUB,
}


def select_servers(detection: DetectionResult) -> list[McpServer]:
    """Servers relevant to *detection*, in manifest order."""
    servers = [MEMORY]
    if detection.languages:
        servers.append(_CODE_INTELLIGENCE[detection.languages[0]])
    if detection.ci_provider is not None:
        servers.append(_CI_SERVERS[detection.ci_provider])
    if detection.test_framework is not None:
        servers.append(COVERAGE)
    return servers


def generate_mcp_config(detection: DetectionResult) -> dict[str, Any] | None:
    """Build the ``{"mcpServers": {...}}`` manifest, or ``None`` if no server applies."""
    servers = select_servers(detection)
    if not servers:
        return None
    return {"mcpServers": {server.name: server.to_dict() for server in servers}}
