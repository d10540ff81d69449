"""bumpcheck compare command - diff two source trees."""

import json
from pathlib import Path

import click

from bumpcheck.analysis.report import Report
from bumpcheck.analysis.versioning import next_version
from bumpcheck.config.loader import load_config
from bumpcheck.core.errors import BumpCheckError
from bumpcheck.core.logging import configure_logging, get_log_file_path


def _report_lines(report: Report) -> list[str]:
    lines: list[str] = []
    for domain, operations in report.by_domain().items():
        lines.append(f"[{domain}]")
        for op in operations:
            lines.append(f"  {op.severity.name:<5} {op.code} {op.location} {op.detail}")
    return lines


@click.command()
@click.argument("before", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("after", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: AFTER/.bumpcheck.yaml if present)",
)
@click.option("--current-version", default=None, help="Current version (X.Y.Z) to bump")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def compare_command(
    ctx: click.Context,
    before: Path,
    after: Path,
    config_file: Path | None,
    current_version: str | None,
    as_json: bool,
) -> None:
    """Compare BEFORE and AFTER source trees and report versioning-relevant changes."""
    from bumpcheck.ops import compare_trees

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    try:
        overrides = {"logging": {"level": "DEBUG"}} if verbose else {}
        config = load_config(after.resolve(), config_file=config_file, **overrides)
        configure_logging(config=config.logging)
        report = compare_trees(before.resolve(), after.resolve(), config)
        version = next_version(current_version, report) if current_version else None
    except BumpCheckError as e:
        message = str(e)
        log_file = get_log_file_path()
        if log_file is not None:
            message += f"\nSee log file: {log_file}"
        raise click.ClickException(message) from e

    level = report.level()
    if as_json:
        data = report.to_dict()
        if version is not None:
            data["next_version"] = version
        click.echo(json.dumps(data, indent=2))
        return

    if not len(report):
        click.echo("No versioning-relevant changes detected.")
    else:
        for line in _report_lines(report):
            click.echo(line)
        click.echo(f"Overall level: {level.name if level is not None else 'NONE'}")
    if version is not None:
        click.echo(f"Next version: {version}")
