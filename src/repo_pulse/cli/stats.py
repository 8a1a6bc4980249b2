"""Stats CLI command -- contributor table and activity overview."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import RepoPulseError
from ..export import stats_to_dict
from ..history import RepoStats, summarize_activity
from . import app
from ._common import console, load_stats, start_command, signed


@app.command()
def stats(
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
    json_output: bool = typer.Option(
        False, "--json", help="Output in machine-readable JSON format"
    ),
    max_commits: Optional[int] = typer.Option(
        None, "--max-commits", "-n", help="Read at most this many commits (0 = all)", min=0
    ),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
):
    """
    Show per-contributor totals and a summary of daily commit activity.

    [bold cyan]Examples:[/bold cyan]

      repo-pulse stats

      repo-pulse stats ~/src/project --since 2024-01-01 --until 2024-07-01

      repo-pulse stats --author "Alice" --json
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

    if json_output:
        print(json.dumps(stats_to_dict(result), indent=2))
        return

    _output_rich(result)


def _output_rich(result: RepoStats) -> None:
    """Human-readable Rich output."""
    console.print()
    console.print(
        f"[bold cyan]Commits:[/bold cyan] {result.total_commits}    "
        f"[bold cyan]Contributors:[/bold cyan] {len(result.contributors)}"
        f" of {len(result.all_contributors)}"
    )

    if not result.contributors:
        console.print(
            "[yellow]No contributor data available for the selected period or filters.[/yellow]"
        )
        console.print()
        return

    table = Table(title="Contributor Statistics", show_lines=False, pad_edge=True)
    table.add_column("Contributor", style="bold")
    table.add_column("Commits", justify="right")
    table.add_column("Lines Added", justify="right", style="green")
    table.add_column("Lines Deleted", justify="right", style="red")
    table.add_column("Net", justify="right")
    table.add_column("Files Changed", justify="right")

    for name in sorted(result.contributors):
        c = result.contributors[name]
        net_color = "green" if c.net_contribution >= 0 else "red"
        table.add_row(
            name,
            str(c.commits),
            f"+{c.lines_added}",
            f"-{c.lines_deleted}",
            f"[{net_color}]{signed(c.net_contribution)}[/{net_color}]",
            str(c.files_changed),
        )

    console.print()
    console.print(table)

    summary = summarize_activity(result.commit_activity)
    console.print()
    console.print(
        f"[bold]Activity[/bold] {result.commit_activity[0].date} .. "
        f"{result.commit_activity[-1].date}: "
        f"{summary.active_days}/{summary.days} active days, "
        f"{summary.mean_per_day:.2f} commits/day, "
        f"peak {summary.max_per_day} on {summary.busiest_day}, "
        f"longest streak {summary.longest_streak} days"
    )
    console.print()
