"""HTTP endpoint for repo-pulse statistics.

Requires optional ``[serve]`` dependencies::

    pip install repo-pulse[serve]
"""

from __future__ import annotations

from importlib.util import find_spec

SERVE_DEPENDENCIES = ("starlette", "uvicorn")


def _check_deps() -> None:
    """Raise ImportError naming any [serve] dependency that is not installed."""
    missing = [name for name in SERVE_DEPENDENCIES if find_spec(name) is None]
    if missing:
        raise ImportError(
            f"Missing serve dependencies: {', '.join(missing)}. "
            "Install with: pip install repo-pulse[serve]"
        )
