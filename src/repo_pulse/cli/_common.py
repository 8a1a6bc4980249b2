"""Shared CLI helpers."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..api import collect_stats
from ..config import PulseConfig, load_config
from ..exceptions import RepoPulseError
from ..history import RepoStats, StatsFilter
from ..logging_config import setup_logging

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    max_commits: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> PulseConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if max_commits is not None:
        overrides["git_max_commits"] = max_commits
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def start_command(
    config: Optional[Path] = None,
    max_commits: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> tuple[PulseConfig, logging.Logger]:
    """Resolve settings, then configure logging at their effective verbosity.

    ``-v``/``-q`` win over ``verbosity`` from config files and the environment.
    Exits with status 1 if the configuration cannot be loaded.
    """
    try:
        settings = resolve_config(config, max_commits, verbose=verbose, quiet=quiet)
    except RepoPulseError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    return settings, setup_logging(settings.verbosity)


def load_stats(
    path: Path,
    since: Optional[str],
    until: Optional[str],
    author: Optional[str],
    settings: PulseConfig,
) -> RepoStats:
    """Read *path*'s history and aggregate it under the CLI filter flags."""
    filters = StatsFilter(start_date=since, end_date=until, author=author)
    with console.status(f"[cyan]Reading git history of {path}..."):
        return collect_stats(path, filters, settings)


def sparkline(values: list) -> str:
    """Generate a block-character sparkline from a list of numeric values."""
    if not values:
        return ""
    blocks = " ▁▂▃▄▅▆▇█"
    mn, mx = min(values), max(values)
    if mx == mn:
        return blocks[4] * len(values)
    return "".join(blocks[min(8, int((v - mn) / (mx - mn) * 8))] for v in values)


def signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)
