"""Command line entry points."""

from __future__ import annotations

import click

from framewar import __version__
from framewar.cli import play, serve, simulate


@click.group()
@click.version_option(__version__, prog_name="framewar")
def cli():
    """Play War in the terminal, simulate games, or serve the frame API."""


cli.add_command(play.main, name="play")
cli.add_command(simulate.main, name="simulate")
cli.add_command(serve.main, name="serve")
