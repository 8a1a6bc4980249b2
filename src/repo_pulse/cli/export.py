"""Export CLI command -- write contributor or activity tables as CSV."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import RepoPulseError
from ..export import CSV_EXPORTERS, to_csv
from . import app
from ._common import console, load_stats, start_command


@app.command()
def export(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the git repository",
        file_okay=False,
        dir_okay=True,
    ),
    kind: str = typer.Option(
        "contributors",
        "--kind",
        "-k",
        help="Table to export: contributors or activity",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="CSV file to write (default: stdout)",
        dir_okay=False,
    ),
    since: Optional[str] = typer.Option(
        None, "--since", "-s", help="Include commits on or after this date (YYYY-MM-DD)"
    ),
    until: Optional[str] = typer.Option(
        None, "--until", "-u", help="Include commits up to the start of this date (YYYY-MM-DD)"
    ),
    author: Optional[str] = typer.Option(
        None, "--author", "-a", help="Only count commits by this exact author name"
    ),
    max_commits: Optional[int] = typer.Option(
        None, "--max-commits", "-n", help="Read at most this many commits (0 = all)", min=0
    ),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
):
    """
    Export contributor totals or the daily activity series as CSV.

    [bold cyan]Examples:[/bold cyan]

      repo-pulse export > contributors.csv

      repo-pulse export --kind activity -o activity.csv --since 2024-01-01
    """
    if kind not in CSV_EXPORTERS:
        console.print(
            f"[red]Error:[/red] unknown kind '{kind}' "
            f"(choose from {', '.join(sorted(CSV_EXPORTERS))})"
        )
        raise typer.Exit(2)

    settings, logger = start_command(config, max_commits, verbose=verbose, quiet=quiet)

    try:
        result = load_stats(path, since, until, author, settings)
    except RepoPulseError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    text = to_csv(result, kind)
    if output is None:
        print(text, end="")
        return

    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.debug("Writing %s failed", output, exc_info=True)
        console.print(f"[red]Error:[/red] cannot write {output}: {e.strerror or e}")
        raise typer.Exit(1)
    console.print(f"CSV saved to: [bold green]{output}[/bold green]")
