"""Table-driven precedence helpers shared by the detectors.

A detector describes its evidence as an ordered table of probes. A probe is a
zero-argument callable returning the provenance string when its signal is
present and ``None`` otherwise. The first probe that answers wins and nothing
after it is evaluated.
"""

from __future__ import annotations

import configparser
import json
import logging
import tomllib
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from anvil.detector.types import DetectedCommand, T, ToolResult

if TYPE_CHECKING:
    from pathlib import Path

    from anvil.detector.storage import Storage

logger = logging.getLogger(__name__)

V = TypeVar("V")

Probe = Callable[[], str | None]


@dataclass(frozen=True)
class ToolRule(Generic[T]):
    """One row of a tool table: a tool, its command, and its evidence in priority order."""

    name: T
    command: str
    probes: tuple[Probe, ...]


def first_hit(table: Iterable[tuple[Probe, V]]) -> tuple[V, str] | None:
    """Return ``(value, source)`` for the first probe in *table* that answers."""
    for probe, value in table:
        source = probe()
        if source is not None:
            logger.debug("Evidence matched: %s", source)
            return value, source
    return None


def first_tool(rules: Iterable[ToolRule[T]]) -> ToolResult[T] | None:
    """Resolve a tool table to the first matching :class:`ToolResult`."""
    hit = first_hit((probe, rule) for rule in rules for probe in rule.probes)
    if hit is None:
        return None
    rule, source = hit
    return ToolResult(rule.name, DetectedCommand(rule.command, source))


def script_tool(
    manifest: dict[str, Any] | None,
    script: str,
    command: str,
    needles: Iterable[tuple[str, T]],
) -> ToolResult[T] | None:
    """Mine ``scripts.<script>`` of a package manifest for known tool names.

    The first needle contained in the script string wins; the command becomes
    the generic *command* and the source ``package.json scripts.<script>``.
    """
    if manifest is None:
        return None
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        return None
    body = scripts.get(script)
    if not isinstance(body, str):
        return None
    for needle, name in needles:
        if needle in body:
            return ToolResult(name, DetectedCommand(command, f"package.json scripts.{script}"))
    return None


class ProjectFiles:
    """Evidence reader for one project root.

    Wraps a :class:`Storage` with tolerant parsers. A document that exists but
    cannot be parsed reads as ``None``; nothing here raises. Parsed documents
    are kept only for the lifetime of the instance, so each detector builds
    its own.
    """

    def __init__(self, root: Path, storage: Storage) -> None:
        self.root = root
        self.storage = storage
        self._texts: dict[str, str | None] = {}

    def exists(self, name: str) -> bool:
        return self.storage.exists(self.root / name)

    def text(self, name: str) -> str | None:
        if name not in self._texts:
            self._texts[name] = self.storage.read_text(self.root / name)
        return self._texts[name]

    def listing(self, name: str = "") -> list[str]:
        path = self.root / name if name else self.root
        return self.storage.list_dir(path)

    def json(self, name: str) -> dict[str, Any] | None:
        """Parse *name* as a JSON object."""
        content = self.text(name)
        if content is None:
            return None
        try:
            data = json.loads(content)
        except (ValueError, RecursionError):
            logger.debug("Ignoring malformed JSON in %s", name)
            return None
        return data if isinstance(data, dict) else None

    def toml(self, name: str) -> dict[str, Any] | None:
        """Parse *name* as TOML."""
        content = self.text(name)
        if content is None:
            return None
        try:
            return tomllib.loads(content)
        except (tomllib.TOMLDecodeError, RecursionError):
            logger.debug("Ignoring malformed TOML in %s", name)
            return None

    def ini(self, name: str) -> configparser.ConfigParser | None:
        """Parse *name* as an INI document (``setup.cfg``, ``tox.ini``)."""
        content = self.text(name)
        if content is None:
            return None
        # Repeated options or sections are tolerated; the last one wins.
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        try:
            parser.read_string(content, source=name)
        except configparser.Error:
            logger.debug("Ignoring malformed INI in %s", name)
            return None
        return parser

    # -- probe constructors ------------------------------------------------

    def file(self, name: str) -> Probe:
        """Probe answering *name* when the file exists."""
        return lambda: name if self.exists(name) else None

    def toml_table(self, name: str, dotted: str) -> Probe:
        """Probe answering ``"<name> [<dotted>]"`` when the TOML table exists."""

        def probe() -> str | None:
            return f"{name} [{dotted}]" if has_table(self.toml(name), dotted) else None

        return probe

    def ini_section(self, name: str, section: str) -> Probe:
        """Probe answering ``"<name> [<section>]"`` when the INI section exists."""

        def probe() -> str | None:
            parser = self.ini(name)
            if parser is not None and parser.has_section(section):
                return f"{name} [{section}]"
            return None

        return probe


def has_table(document: dict[str, Any] | None, dotted: str) -> bool:
    """Whether ``document`` contains the nested table named by *dotted*."""
    node: Any = document
    for key in dotted.split("."):
        if not isinstance(node, dict) or key not in node:
            return False
        node = node[key]
    return isinstance(node, dict)
