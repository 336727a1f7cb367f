"""Generation orchestrator: decide where each generator's output lands.

Generators return structured objects. In local mode the MCP manifest and the
hooks object are merged under their distinct top-level keys into the
personal settings file; otherwise each is written to its own canonical path.
A generator with nothing to contribute produces no artifact at all.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from anvil.generator.guidance import generate_guidance
from anvil.generator.hooks import generate_hooks_config
from anvil.generator.mcp_config import generate_mcp_config
from anvil.generator.slash_commands import generate_slash_commands
from anvil.generator.types import GeneratedFile, GenerateOptions

if TYPE_CHECKING:
    from anvil.detector.types import DetectionResult

logger = logging.getLogger(__name__)

GUIDANCE_PATH = "CLAUDE.md"
MCP_PATH = ".mcp.json"
HOOKS_PATH = ".claude/settings.json"
LOCAL_SETTINGS_PATH = ".claude/settings.local.json"


def generate_all(
    detection: DetectionResult,
    options: GenerateOptions | None = None,
) -> list[GeneratedFile]:
    """Generate every artifact for *detection*.

    The caller decides whether to write them (dry runs print them instead).
    """
    options = options or GenerateOptions()
    files = [GeneratedFile(GUIDANCE_PATH, generate_guidance(detection))]

    mcp = generate_mcp_config(detection)
    hooks = generate_hooks_config(detection)
    if options.local:
        merged = merge_documents(mcp, hooks)
        if merged is not None:
            files.append(GeneratedFile(LOCAL_SETTINGS_PATH, to_json(merged)))
    else:
        if mcp is not None:
            files.append(GeneratedFile(MCP_PATH, to_json(mcp)))
        if hooks is not None:
            files.append(GeneratedFile(HOOKS_PATH, to_json(hooks)))

    files.extend(generate_slash_commands(detection))
    logger.debug(
        "Generated %d artifact(s): %s",
        len(files),
        ", ".join(f.relative_path for f in files),
    )
    return files


def merge_documents(*documents: dict[str, Any] | None) -> dict[str, Any] | None:
    """Combine JSON objects that own disjoint top-level keys.

    ``None`` documents are skipped; if all are ``None`` so is the result.

    Raises
    ------
    ValueError
        If two documents claim the same top-level key.
    """
    merged: dict[str, Any] = {}
    for document in documents:
        if document is None:
            continue
        clash = merged.keys() & document.keys()
        if clash:
            msg = f"Cannot merge documents sharing top-level keys: {', '.join(sorted(clash))}"
            raise ValueError(msg)
        merged.update(document)
    return merged or None


def to_json(document: dict[str, Any]) -> str:
    """Serialise with two-space indent and a trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
