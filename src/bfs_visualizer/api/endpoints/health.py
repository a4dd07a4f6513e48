"""Health check endpoints.

Readiness reports whether the graph session is loaded.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bfs_visualizer import __version__
from bfs_visualizer.api.session import current_session
from bfs_visualizer.config import get_settings
from bfs_visualizer.selection.state_machine import SelectionPhase

router = APIRouter(tags=["Health"])


class HealthStatus(BaseModel):
    """Service health and the state of the loaded graph."""

    status: str
    version: str
    environment: str
    timestamp: str
    graph_loaded: bool
    node_count: int = 0
    edge_count: int = 0
    phase: SelectionPhase | None = None


@router.get("/health", response_model=HealthStatus, summary="Service health")
async def health_check() -> JSONResponse:
    """Report health; 503 until the graph session is built."""
    session = current_session()
    health = HealthStatus(
        status="healthy" if session else "starting",
        version=__version__,
        environment=get_settings().app.env,
        timestamp=datetime.now(timezone.utc).isoformat(),
        graph_loaded=session is not None,
    )
    if session is not None:
        health.node_count = session.graph.node_count
        health.edge_count = session.graph.edge_count
        health.phase = session.machine.phase

    return JSONResponse(
        status_code=200 if session else 503,
        content=health.model_dump(mode="json"),
    )


@router.get("/health/live", summary="Liveness check")
async def liveness_check() -> dict[str, str]:
    """Check the process is up."""
    return {"status": "alive"}
