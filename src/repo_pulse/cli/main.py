"""Root callback: global ``--version`` flag."""

import typer

from . import app
from ._common import console


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        is_eager=True,
    ),
):
    """
    Contributor and commit activity statistics for git repositories.

    [bold cyan]Examples:[/bold cyan]

      repo-pulse stats

      repo-pulse stats ../other-repo --since 2024-01-01 --author "Alice"

      repo-pulse activity --json

      repo-pulse export --kind contributors -o contributors.csv
    """
    if version:
        from .. import __version__

        console.print(f"[bold cyan]repo-pulse[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)
