"""compstatus CLI - framework compliance status from a snapshot."""

from __future__ import annotations

import sys
from pathlib import Path

import click


@click.group()
def cli() -> None:
    """compstatus - derive framework compliance status for a dashboard."""


@cli.command()
@click.option("--project", "-p", type=click.Path(exists=True, file_okay=False), required=True, help="Project path")
@click.option(
    "--snapshot", "-s", type=click.Path(dir_okay=False, resolve_path=True),
    help="Snapshot file (YAML or JSON), relative to the working directory",
)
@click.option("--org", "-o", "organization_id", type=str, help="Organization id")
@click.option("--output-format", "-f", type=click.Choice(["markdown", "json"]))
@click.option("--score", "scores", multiple=True, metavar="KEY=VALUE", help="Compliance score per framework")
@click.option(
    "--output", type=click.Path(dir_okay=False, resolve_path=True),
    help="Report output path, relative to the working directory",
)
def status(
    project: str,
    snapshot: str | None,
    organization_id: str | None,
    output_format: str | None,
    scores: tuple[str, ...],
    output: str | None,
) -> None:
    """Derive per-framework status and write a report."""
    from ..core.runner import run_status

    exit_code = run_status(
        project_path=Path(project),
        snapshot=snapshot,
        organization_id=organization_id,
        output_format=output_format,
        scores=list(scores),
        output=output,
    )
    sys.exit(exit_code)


@cli.command()
@click.argument("score", type=click.FloatRange(0, 100))
def badge(score: float) -> None:
    """Show the badge and tone for a compliance score.

    Example: compstatus badge 87
    """
    from ..core.classifier import get_score_tone, get_status_badge

    result = get_status_badge(score)
    click.echo(f"{result.label} ({result.severity.value}), tone: {get_score_tone(score).value}")


@cli.command()
@click.option("--project", "-p", type=click.Path(exists=True, file_okay=False), required=True)
def init(project: str) -> None:
    """Initialize compstatus in a project."""
    from ..core.runner import initialize_project

    initialize_project(Path(project))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
