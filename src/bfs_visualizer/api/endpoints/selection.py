"""Selection API endpoints.

Feeds clicks into the selection state machine and returns the
resulting frame.
"""

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, Field

from bfs_visualizer.api.session import VisualizerSession, get_session
from bfs_visualizer.graph.models import Point
from bfs_visualizer.rendering.scene import Scene, build_scene
from bfs_visualizer.utils.logging import get_logger, log_context

logger = get_logger(__name__)

router = APIRouter()


class ClickRequest(BaseModel):
    """A pointer click in graph coordinates."""

    x: float = Field(..., description="Horizontal click position")
    y: float = Field(..., description="Vertical click position")


class ClickResponse(BaseModel):
    """Outcome of a click."""

    hit: str | None = None
    scene: Scene


@router.post("/click", response_model=ClickResponse)
async def click(
    request: ClickRequest,
    session: VisualizerSession = Depends(get_session),
) -> ClickResponse:
    """Resolve a click to a node and apply it.

    Clicks on empty space leave the selection unchanged.
    """
    with log_context(click_x=request.x, click_y=request.y):
        node = session.machine.click(Point(request.x, request.y))
        logger.debug("Click handled", hit=node.id if node else None)

    return ClickResponse(
        hit=node.id if node else None,
        scene=build_scene(session.machine),
    )


@router.post("/nodes/{node_id}", response_model=ClickResponse)
async def select_node(
    node_id: str = Path(..., description="Node ID"),
    session: VisualizerSession = Depends(get_session),
) -> ClickResponse:
    """Apply a hit on a node given by ID."""
    node = session.graph.require_node(node_id)
    session.machine.select(node)
    return ClickResponse(hit=node.id, scene=build_scene(session.machine))


@router.post("/reset", response_model=Scene)
async def reset(
    session: VisualizerSession = Depends(get_session),
) -> Scene:
    """Clear the selection and all highlights."""
    session.machine.reset()
    logger.info("Selection reset")
    return build_scene(session.machine)
