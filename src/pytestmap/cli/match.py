"""ptm match command - correlate JUnit results with discovered tests."""

import json
from pathlib import Path

import click

from pytestmap.cli.discover import run_discovery
from pytestmap.config.models import PytestMapConfig
from pytestmap.core.errors import DiscoveryError
from pytestmap.discovery.results import match_results, parse_junit_testcases


@click.command()
@click.argument("report", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("junit_xml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def match_command(
    obj: dict[str, PytestMapConfig], report: Path, junit_xml: Path, as_json: bool
) -> None:
    """Match JUNIT_XML results to the tests in the discovery REPORT."""
    result = run_discovery(report, obj["config"])
    if result is None:
        raise click.ClickException("No discovery results in report.")

    try:
        content = junit_xml.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(
            str(DiscoveryError.junit_parse_error(str(junit_xml), str(e)))
        ) from e
    try:
        junit_cases = parse_junit_testcases(content, source=str(junit_xml))
    except DiscoveryError as e:
        raise click.ClickException(str(e)) from e

    correlation = match_results(result.test_cases, junit_cases)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "matches": [
                        {
                            "classname": m.result.classname,
                            "name": m.result.name,
                            "status": m.result.status,
                            "fully_qualified_name": (
                                m.test_case.fully_qualified_name if m.test_case else None
                            ),
                        }
                        for m in correlation.matches
                    ],
                    "not_run": [tc.fully_qualified_name for tc in correlation.not_run],
                },
                indent=2,
            )
        )
        return

    for m in correlation.matches:
        target = m.test_case.fully_qualified_name if m.test_case else "(no discovered test)"
        click.echo(f"{m.result.status:<8} {m.result.classname}::{m.result.name} -> {target}")
    click.echo(
        f"{len(correlation.matches) - len(correlation.unmatched)} matched, "
        f"{len(correlation.unmatched)} unmatched, {len(correlation.not_run)} not run"
    )
