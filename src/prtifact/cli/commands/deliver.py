"""Deliver command - send a report to the console and/or a GitHub comment."""

import click
from ...config.settings import load_settings
from ...delivery import run_delivery
from ...destinations.web_comment import COMMENT_MODES
from ...github.client import parse_repository
from ...utils.errors import ConfigError, PrtifactError, ReportDeliveryError
from ...utils.logging import get_logger
from ..utils import format_error, format_delivery_error

logger = get_logger("cli.deliver")


@click.command()
@click.option('--body', '-b', required=True, help='Report text, or path to a file containing it')
@click.option('--repo', help='GitHub repository (owner/repo); defaults to GITHUB_REPOSITORY')
@click.option('--issue', type=int, help='Issue or pull request number')
@click.option('--mode', 'comment_mode', help=f"Comment mode: {', '.join(COMMENT_MODES)}")
@click.option('--hidden-key', help='Marker used to find the comment on later runs')
@click.option('--separator', help='Text inserted between old and new content in append modes')
@click.option('--run-id', 'workflow_run_id', type=int, help='Workflow run whose artifacts are listed')
@click.option('--token', envvar='GITHUB_TOKEN', help='GitHub token (or use GITHUB_TOKEN env var)')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='Path to YAML config file')
@click.option('--console/--no-console', default=None, help='Also print the report to the console')
def deliver(body, repo, issue, comment_mode, hidden_key, separator, workflow_run_id, token, config_path, console):
    """Deliver a report to every configured destination."""
    ctx = click.get_current_context()
    try:
        overrides = {
            "issue": issue,
            "comment_mode": comment_mode,
            "hidden_key": hidden_key,
            "separator": separator,
            "workflow_run_id": workflow_run_id,
            "token": token,
            "console": console,
        }
        if repo:
            overrides["owner"], overrides["repo"] = parse_repository(repo)

        settings = load_settings(config_path, overrides)
        if (repo or issue) and settings.missing_comment_target:
            raise ConfigError(f"Incomplete comment target, missing {', '.join(settings.missing_comment_target)}")
        run_delivery(settings, body)

        if settings.has_comment_target:
            click.echo(f"Delivered report to {settings.owner}/{settings.repo}#{settings.issue}", err=True)

    except ReportDeliveryError as e:
        click.echo(format_delivery_error(e), err=True)
        ctx.exit(1)
    except PrtifactError as e:
        click.echo(format_error(str(e)), err=True)
        ctx.exit(1)
