"""ptm discover command - normalize a discovery report."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from pytestmap.config.models import PytestMapConfig
from pytestmap.core.errors import DiscoveryError
from pytestmap.core.logging import clear_run_id, set_run_id
from pytestmap.discovery.models import DiscoveryResult
from pytestmap.discovery.normalizer import normalize_discovery
from pytestmap.discovery.reader import load_discovery_report


def run_discovery(report: Path, config: PytestMapConfig) -> DiscoveryResult | None:
    """Read a report and normalize it under a fresh run id."""
    try:
        batches = load_discovery_report(report)
    except DiscoveryError as e:
        raise click.ClickException(str(e)) from e

    set_run_id()
    try:
        return normalize_discovery(batches, settings=config.discovery)
    finally:
        clear_run_id()


@click.command()
@click.argument("report", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--workspace/--project",
    "is_workspace",
    default=None,
    help="Tag test cases as discovered in an open folder or a project",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def discover_command(
    obj: dict[str, PytestMapConfig], report: Path, is_workspace: bool | None, as_json: bool
) -> None:
    """Normalize the pytest discovery REPORT into test cases."""
    config = obj["config"]
    if is_workspace is not None:
        config = config.model_copy(
            update={"discovery": config.discovery.model_copy(update={"is_workspace": is_workspace})}
        )

    result = run_discovery(report, config)

    if result is None:
        if as_json:
            click.echo(json.dumps({"status": "no_input"}))
        else:
            click.echo("No discovery results in report.")
        return

    if as_json:
        click.echo(
            json.dumps(
                {
                    "status": "ok",
                    "test_cases": [tc.to_dict() for tc in result.test_cases],
                    "failures": [f.to_dict() for f in result.failures],
                },
                indent=2,
            )
        )
        return

    if result.test_cases:
        Console().print(_make_test_case_table(result))
    click.echo(_summary(result))
    for failure in result.failures:
        click.echo(f"  skipped {failure.runner_id or '<no id>'}: {failure.reason}", err=True)


def _make_test_case_table(result: DiscoveryResult) -> Table:
    table = Table(show_header=True, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("Test", style="cyan")
    table.add_column("Class")
    table.add_column("Line", justify="right")
    table.add_column("Source", style="dim")
    for tc in result.test_cases:
        table.add_row(tc.display_name, tc.xml_class_name, str(tc.line_number), tc.source_path)
    return table


def _summary(result: DiscoveryResult) -> str:
    count = len(result.test_cases)
    noun = "test" if count == 1 else "tests"
    summary = f"{count} {noun} discovered"
    if result.failures:
        summary += f", {len(result.failures)} skipped"
    return summary
