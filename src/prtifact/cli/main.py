"""Main CLI entry point for prtifact."""

import click
from .. import __version__
from .commands.deliver import deliver
from .commands.modes import modes
from .commands.version import version


@click.group()
@click.version_option(version=__version__, prog_name="prtifact", message="%(prog)s version %(version)s")
def cli():
    """prtifact - deliver artifact reports to GitHub comments."""
    pass


cli.add_command(deliver)
cli.add_command(modes)
cli.add_command(version)
