"""Console destinations, mostly for local runs and workflow logs."""

import click
from .base import ReportDestination


class NativeConsoleDestination(ReportDestination[str]):
    """Prints the report to stdout."""

    def upload_report(self, report: str) -> None:
        click.echo(report)


class GitHubConsoleDestination(ReportDestination[str]):
    """Prints the report inside a collapsible GitHub Actions log group."""

    def __init__(self, group_name: str = "artifactGroup"):
        self.group_name = group_name

    def upload_report(self, report: str) -> None:
        # Group markers and body go out in one write so concurrent output cannot split the group
        click.echo(f"::group::{self.group_name}\n{report}\n::endgroup::")
