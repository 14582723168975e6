"""Modes command - list supported comment modes."""

import click
from ...destinations.web_comment import COMMENT_MODES


@click.command()
def modes():
    """List the comment modes accepted by --mode."""
    for mode in COMMENT_MODES:
        click.echo(mode)
