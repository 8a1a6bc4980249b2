"""
Logging configuration for repo-pulse.

Library modules log through ``get_logger``; the CLI installs a Rich handler on
stderr once the effective verbosity is known, so tables and JSON written to
stdout stay clean.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "repo_pulse"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def level_for(verbosity: str) -> int:
    """Map a ``PulseConfig.verbosity`` value to a logging level."""
    try:
        return _LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"unknown verbosity {verbosity!r}") from None


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route repo-pulse logging to stderr (and optionally a file).

    Args:
        verbosity: quiet (errors only), normal (warnings) or verbose (debug,
            with source paths and local variables in tracebacks)
        log_file: Optional file path to append plain-text records to

    Returns:
        The ``repo_pulse`` logger, set to the chosen level
    """
    level = level_for(verbosity)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    # Replaces handlers from an earlier call in the same process
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``repo_pulse`` or a child logger such as ``repo_pulse.history.aggregator``."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
