"""Generation layer: turn a detection result into configuration artifacts."""

from anvil.generator.guidance import generate_guidance
from anvil.generator.hooks import generate_hooks_config
from anvil.generator.mcp_config import generate_mcp_config
from anvil.generator.orchestrator import (
    GUIDANCE_PATH,
    HOOKS_PATH,
    LOCAL_SETTINGS_PATH,
    MCP_PATH,
    generate_all,
    merge_documents,
)
from anvil.generator.slash_commands import generate_slash_commands
from anvil.generator.types import GeneratedFile, GenerateOptions

__all__ = [
    "GUIDANCE_PATH",
    "HOOKS_PATH",
    "LOCAL_SETTINGS_PATH",
    "MCP_PATH",
    "GenerateOptions",
    "GeneratedFile",
    "generate_all",
    "generate_guidance",
    "generate_hooks_config",
    "generate_mcp_config",
    "generate_slash_commands",
    "merge_documents",
]
