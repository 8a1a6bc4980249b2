"""Starlette ASGI application serving repository statistics as JSON and CSV."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from ..api import collect_stats
from ..config import PulseConfig, load_config
from ..exceptions import (
    ConfigurationError,
    HistoryError,
    NotAGitRepositoryError,
    RepositoryError,
)
from ..export import CSV_EXPORTERS, stats_to_dict, to_csv
from ..history import RepoStats, StatsFilter

logger = logging.getLogger(__name__)


class BadRequest(Exception):
    """Request payload could not be turned into a stats query."""


def _parse_payload(payload: Any) -> tuple[str, StatsFilter]:
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object")
    repo_path = payload.get("repoPath")
    if not repo_path or not isinstance(repo_path, str):
        raise BadRequest("Invalid repository path provided")

    filters = payload.get("filters") or {}
    if not isinstance(filters, dict):
        raise BadRequest("filters must be a JSON object")

    def _field(name: str) -> Optional[str]:
        value = filters.get(name)
        if value in (None, ""):
            return None
        if not isinstance(value, str):
            raise BadRequest(f"filters.{name} must be a string")
        return value

    try:
        stats_filter = StatsFilter(
            start_date=_field("startDate"),
            end_date=_field("endDate"),
            author=_field("contributor"),
        )
    except HistoryError as e:
        raise BadRequest(str(e))
    return repo_path, stats_filter


def create_app(config: Optional[PulseConfig] = None) -> Starlette:
    """Build the Starlette application.

    Args:
        config: Settings for git extraction; loaded from the usual sources if None
    """
    settings = config if config is not None else load_config()

    async def _stats_for(request: Request) -> RepoStats | JSONResponse:
        try:
            payload = await request.json()
        except ValueError:
            # JSONDecodeError, or UnicodeDecodeError for a non-UTF-8 body
            return JSONResponse({"error": "Request body is not valid JSON"}, status_code=400)

        try:
            repo_path, stats_filter = _parse_payload(payload)
        except BadRequest as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        try:
            return await run_in_threadpool(collect_stats, repo_path, stats_filter, settings)
        except ConfigurationError:
            return JSONResponse(
                {"error": "Path does not exist or is not a directory"}, status_code=400
            )
        except NotAGitRepositoryError:
            return JSONResponse({"error": "Not a valid Git repository"}, status_code=400)
        except (RepositoryError, HistoryError) as e:
            logger.warning("Error fetching Git statistics: %s", e)
            return JSONResponse(
                {"error": "Failed to fetch Git statistics", **e.to_dict()}, status_code=500
            )

    async def api_stats(request: Request) -> Response:
        result = await _stats_for(request)
        if isinstance(result, Response):
            return result
        return JSONResponse(stats_to_dict(result))

    async def api_export_csv(request: Request) -> Response:
        """Download the contributor or activity table as CSV."""
        kind = request.query_params.get("kind", "contributors")
        if kind not in CSV_EXPORTERS:
            return JSONResponse(
                {"error": f"Unknown export kind '{kind}'", "allowed": sorted(CSV_EXPORTERS)},
                status_code=400,
            )
        result = await _stats_for(request)
        if isinstance(result, Response):
            return result
        ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        return Response(
            content=to_csv(result, kind),
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="repo-pulse-{kind}-{ts}.csv"',
            },
        )

    routes = [
        Route("/api/stats", api_stats, methods=["POST"]),
        Route("/api/export/csv", api_export_csv, methods=["POST"]),
    ]

    return Starlette(routes=routes)
