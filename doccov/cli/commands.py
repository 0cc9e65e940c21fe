"""CLI commands for the documentation coverage tool.

Provides the Click-based command group 'doccov' with the 'report'
subcommand, which computes coverage for a documentation snapshot,
writes it in the requested format and enforces minimum coverage.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from doccov import __version__
from doccov.analysis.limits import check_limits
from doccov.model.loader import load_snapshot
from doccov.output.console import render_console
from doccov.output.html import HtmlWriter
from doccov.output.markdown import MarkdownWriter
from doccov.stats.base import SnapshotError
from doccov.stats.project import ProjectStats, compute_coverage
from doccov.utils.config import AppConfig, ConfigError, CoverageLimits, load_config
from doccov.utils.logging import setup_logging

logger = logging.getLogger(__name__)

FORMATS = ("console", "md", "html", "json")


def _write_json(project: ProjectStats, output_dir: str, name: str) -> Path:
    """Write the coverage tree as JSON.

    Args:
        project: The coverage tree.
        output_dir: Directory for the report.
        name: Report file name without extension.

    Returns:
        Path to the written JSON file.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    json_path = out_dir / f"{name}.json"
    json_path.write_text(json.dumps(project.to_dict(), indent=2), encoding="utf-8")
    logger.info("Wrote JSON coverage report: %s", json_path)
    return json_path


@click.group()
@click.version_option(version=__version__, prog_name="doccov")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML configuration file.",
)
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.pass_context
def doccov(
    ctx: click.Context, config_path: Optional[str], log_level: Optional[str]
) -> None:
    """Documentation coverage: measure how much of a codebase is documented."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    setup_logging(
        level=log_level or config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@doccov.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--public-only",
    is_flag=True,
    help="Count only public types and members.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Report format (default from configuration).",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory.",
)
@click.option("--output-name", default=None, help="Report file name without extension.")
@click.option(
    "--min-coverage",
    nargs=4,
    type=float,
    default=None,
    metavar="PACKAGE INTERFACE CLASS METHOD",
    help="Minimum coverage percentages; exits with status 1 when not met.",
)
@click.pass_obj
def report(
    config: AppConfig,
    snapshot: str,
    public_only: bool,
    output_format: Optional[str],
    output_dir: Optional[str],
    output_name: Optional[str],
    min_coverage: Optional[tuple[float, float, float, float]],
) -> None:
    """Compute documentation coverage for a snapshot file.

    SNAPSHOT is a YAML or JSON description of the packages, types and
    members of a codebase together with their documentation comments.
    """
    coverage_config = config.coverage
    if public_only:
        coverage_config = replace(coverage_config, public_only=True)
    if min_coverage:
        try:
            coverage_config = replace(
                coverage_config, limits=CoverageLimits.from_values(min_coverage)
            )
        except ConfigError as e:
            raise click.BadParameter(str(e), param_hint="--min-coverage") from e

    try:
        model = load_snapshot(snapshot)
    except (FileNotFoundError, SnapshotError) as e:
        raise click.ClickException(str(e)) from e

    project = compute_coverage(model, coverage_config, name=Path(snapshot).stem)

    fmt = output_format or config.output.default_format
    out_dir = output_dir or config.output.output_dir
    name = output_name or config.output.output_name

    if fmt == "md":
        path = MarkdownWriter(output_dir=out_dir).write_report(project, name)
        click.echo(f"Markdown coverage report written to {path}")
    elif fmt == "html":
        path = HtmlWriter(output_dir=out_dir).write_report(project, name)
        click.echo(f"HTML coverage report written to {path}")
    elif fmt == "json":
        path = _write_json(project, out_dir, name)
        click.echo(f"JSON coverage report written to {path}")
    else:
        click.echo(render_console(project), nl=False)

    if fmt != "console":
        click.echo(f"Project Documentation Coverage: {project.percent:.2f}%")

    violations = check_limits(project, coverage_config.limits)
    if violations:
        click.echo(f"{len(violations)} elements below minimum coverage:", err=True)
        for violation in violations:
            click.echo(f"  {violation.describe()}", err=True)
        click.get_current_context().exit(1)
