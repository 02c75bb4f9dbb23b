"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from reviewshelf.cli.commands import build_cmd, list_cmd, show_cmd
from reviewshelf.log import setup_logging


app = typer.Typer(name="reviewshelf", no_args_is_help=True, help="Personal review archive renderer")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    setup_logging(verbose)


app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="build")(build_cmd)
