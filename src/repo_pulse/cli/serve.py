"""``repo-pulse serve`` - HTTP endpoint for statistics and CSV export."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console, start_command


@app.command()
def serve(
    port: Optional[int] = typer.Option(None, help="Port to listen on (default from config)"),
    host: Optional[str] = typer.Option(None, help="Host to bind to (default from config)"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="Config file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
) -> None:
    """Serve POST /api/stats and POST /api/export/csv over HTTP."""
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..server.app import create_app

    settings, _ = start_command(config, verbose=verbose, quiet=quiet)

    bind_host = host or settings.server_host
    bind_port = port or settings.server_port
    url = f"http://{bind_host}:{bind_port}"
    console.print(f"[bold]Serving[/bold] → [link={url}]{url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    if settings.verbose:
        uvicorn_level = "info"
    elif settings.quiet:
        uvicorn_level = "error"
    else:
        uvicorn_level = "warning"

    try:
        uvicorn.run(create_app(settings), host=bind_host, port=bind_port, log_level=uvicorn_level)
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Stopped.[/dim]")
