"""Public API for repo-pulse.

Example:
    >>> from repo_pulse import collect_stats
    >>> from repo_pulse.history import StatsFilter
    >>>
    >>> stats = collect_stats("/path/to/repo")
    >>> stats = collect_stats("/path/to/repo", StatsFilter(author="Alice"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import PulseConfig, load_config
from .history import GitLogExtractor, RepoStats, StatsFilter, aggregate
from .logging_config import get_logger

logger = get_logger(__name__)


def collect_stats(
    path: str | Path = ".",
    filters: Optional[StatsFilter] = None,
    config: Optional[PulseConfig] = None,
) -> RepoStats:
    """Read the repository's git history and aggregate it under *filters*.

    Raises:
        InvalidPathError: If *path* is missing or not a directory
        NotAGitRepositoryError: If *path* is not inside a git work tree
        GitCommandError: If ``git log`` fails or times out
    """
    if config is None:
        config = load_config()

    extractor = GitLogExtractor(
        path,
        max_commits=config.git_max_commits,
        timeout_seconds=config.git_timeout_seconds,
        include_merges=config.include_merges,
        all_refs=config.all_refs,
    )
    commits = extractor.extract()
    stats = aggregate(commits, filters)
    logger.info(
        "%d commits by %d contributors after filtering",
        stats.total_commits,
        len(stats.contributors),
    )
    return stats
