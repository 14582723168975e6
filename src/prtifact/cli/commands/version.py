"""Version command - show prtifact version."""

import click
from ... import __version__


@click.command()
def version():
    """Show prtifact version."""
    click.echo(f"prtifact version {__version__}")
