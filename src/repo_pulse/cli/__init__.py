"""CLI entry point - registers all subcommands."""

import typer

app = typer.Typer(
    name="repo-pulse",
    help="repo-pulse - Contributor and commit activity statistics for git repositories",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .stats import stats as _stats  # noqa: F401, E402
from .activity import activity as _activity  # noqa: F401, E402
from .export import export as _export  # noqa: F401, E402
from .serve import serve as _serve  # noqa: F401, E402
