"""Anvil CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from anvil import __version__

if TYPE_CHECKING:
    from anvil.detector.types import DetectionResult, ToolResult
    from anvil.generator.types import GeneratedFile


@click.group()
@click.version_option(version=__version__, prog_name="anvil")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """Anvil - detect project tooling and scaffold agent configuration."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_summary(detection: DetectionResult) -> None:
    """Render the detection result as a two-column table."""
    from rich.console import Console
    from rich.table import Table

    def _tool(tool: ToolResult[Any] | None) -> str:
        if tool is None:
            return "-"
        return f"{tool.name.value} ({tool.command.source})"

    table = Table(title="Detected", show_header=False, box=None, padding=(0, 1))
    table.add_column("Signal", style="bold")
    table.add_column("Value")
    table.add_row(
        "Languages", ", ".join(lang.value for lang in detection.languages) or "-"
    )
    table.add_row(
        "Package manager",
        detection.package_manager.value if detection.package_manager else "-",
    )
    table.add_row("Tests", _tool(detection.test_framework))
    table.add_row("Build", _tool(detection.build_system))
    table.add_row("CI", detection.ci_provider.value if detection.ci_provider else "-")
    table.add_row("Linters", ", ".join(_tool(linter) for linter in detection.linters) or "-")
    table.add_row("Monorepo", "yes" if detection.is_monorepo else "no")
    table.add_row("Directories", ", ".join(detection.directories) or "-")
    Console().print(table)


def _print_artifacts(files: list[GeneratedFile]) -> None:
    for generated in files:
        click.echo(f"--- {generated.relative_path} ---")
        click.echo(generated.content, nl=not generated.content.endswith("\n"))


@main.command()
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
@click.option(
    "--local",
    is_flag=True,
    help="Merge MCP servers and hooks into .claude/settings.local.json.",
)
@click.option("--dry-run", is_flag=True, help="Print generated files instead of writing them.")
@click.option("--force", is_flag=True, help="Overwrite existing files.")
@click.pass_context
def init(
    ctx: click.Context,
    *,
    project: Path | None,
    local: bool,
    dry_run: bool,
    force: bool,
) -> None:
    """Detect project tooling and generate agent configuration files."""
    from anvil.config import load_config
    from anvil.detector import detect_project
    from anvil.generator import GenerateOptions, generate_all
    from anvil.infrastructure.writer import UnsafePathError, write_files

    project_root = project or Path.cwd()
    config = load_config(project_root)
    options = GenerateOptions(local=local or config.local)

    detection = detect_project(project_root)
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if not quiet:
        _print_summary(detection)

    files = generate_all(detection, options)

    if dry_run:
        _print_artifacts(files)
        return

    try:
        result = write_files(project_root, files, force=force, skip=config.skip)
    except UnsafePathError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not quiet:
        for path in result.written:
            click.echo(f"  created  {path}")
        for path in result.skipped:
            click.echo(f"  skipped  {path}")
    for path in result.errors:
        click.echo(f"  failed   {path}", err=True)

    if result.skipped and not force and not quiet:
        click.echo("Existing files were kept; use --force to overwrite them.")
    if result.errors:
        sys.exit(1)


@main.command()
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
def doctor(*, project: Path | None) -> None:
    """Check the agent configuration already present in the project."""
    from anvil.infrastructure.doctor import Severity, run_checks

    project_root = project or Path.cwd()
    checks = run_checks(project_root)

    icons = {
        Severity.OK: "[ok]",
        Severity.INFO: "[info]",
        Severity.WARNING: "[warn]",
        Severity.ERROR: "[ERR]",
    }

    for check in checks:
        icon = icons.get(check.severity, "[?]")
        click.echo(f"  {icon} {check.description}")

    if any(check.severity is Severity.ERROR for check in checks):
        sys.exit(1)
