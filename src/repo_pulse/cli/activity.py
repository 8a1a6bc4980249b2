"""Activity CLI command -- daily commit series and frequency distribution."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import RepoPulseError
from ..history import frequency_distribution
from . import app
from ._common import console, load_stats, sparkline, start_command


@app.command()
def activity(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the git repository",
        file_okay=False,
        dir_okay=True,
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
    show_days: bool = typer.Option(
        False, "--days", help="List every day of the series, not just the summary"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output the daily series as JSON"
    ),
    max_commits: Optional[int] = typer.Option(
        None, "--max-commits", "-n", help="Read at most this many commits (0 = all)", min=0
    ),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
):
    """
    Show commits per day, with zero-activity days filled in.

    [bold cyan]Examples:[/bold cyan]

      repo-pulse activity

      repo-pulse activity --since 2024-01-01 --days

      repo-pulse activity --author "Alice" --json
    """
    settings, logger = start_command(config, max_commits, verbose=verbose, quiet=quiet)

    try:
        result = load_stats(path, since, until, author, settings)
    except RepoPulseError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    series = result.commit_activity

    # ── JSON output ───────────────────────────────────────────────────
    if json_output:
        print(json.dumps([{"date": a.date, "count": a.count} for a in series], indent=2))
        return

    # ── Rich output ───────────────────────────────────────────────────
    if not series:
        console.print("[yellow]No commit activity for the selected period or filters.[/yellow]")
        raise typer.Exit(0)

    console.print()
    console.print(
        f"[bold cyan]Commit activity:[/bold cyan] {series[0].date} .. {series[-1].date} "
        f"({result.total_commits} commits over {len(series)} days)"
    )
    console.print(f"  {sparkline([a.count for a in series])}")
    console.print()

    freq = Table(title="Commit Frequency Distribution", show_header=True, pad_edge=True)
    freq.add_column("Commits per day")
    freq.add_column("Days", justify="right")
    for label, days in frequency_distribution(series).as_rows():
        freq.add_row(label, str(days))
    console.print(freq)

    if show_days:
        table = Table(show_header=True, show_lines=False, pad_edge=True)
        table.add_column("Date")
        table.add_column("Commits", justify="right")
        for a in series:
            style = "dim" if a.count == 0 else ""
            table.add_row(a.date, str(a.count), style=style)
        console.print()
        console.print(table)
    console.print()
