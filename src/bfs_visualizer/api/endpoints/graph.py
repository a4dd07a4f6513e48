"""Graph API endpoints.

Read-only views of the graph: the current frame, statistics,
adjacency and ad-hoc shortest path queries.
"""

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel

from bfs_visualizer.api.session import VisualizerSession, get_session
from bfs_visualizer.graph.algorithms import shortest_path
from bfs_visualizer.rendering.scene import Scene, build_scene

router = APIRouter()


class GraphStatsResponse(BaseModel):
    """Graph statistics."""

    node_count: int
    edge_count: int
    connected_components: int
    density: float


class NeighborsResponse(BaseModel):
    """Adjacency list of one node."""

    node_id: str
    neighbors: list[str]


class PathResponse(BaseModel):
    """Shortest path between two nodes."""

    start: str
    end: str
    path: list[str]
    found: bool
    length: int | None = None
    explored: int


@router.get("", response_model=Scene)
async def get_scene(
    session: VisualizerSession = Depends(get_session),
) -> Scene:
    """Get the current frame: nodes, edges, annotations and instruction."""
    return build_scene(session.machine)


@router.get("/stats", response_model=GraphStatsResponse)
async def get_stats(
    session: VisualizerSession = Depends(get_session),
) -> GraphStatsResponse:
    """Get graph statistics."""
    stats = session.graph.stats()
    return GraphStatsResponse(**stats.to_dict())


@router.get("/nodes/{node_id}/neighbors", response_model=NeighborsResponse)
async def get_neighbors(
    node_id: str = Path(..., description="Node ID"),
    session: VisualizerSession = Depends(get_session),
) -> NeighborsResponse:
    """Get a node's neighbors in adjacency order."""
    node = session.graph.require_node(node_id)
    return NeighborsResponse(
        node_id=node.id,
        neighbors=[n.id for n in session.graph.neighbors_of(node)],
    )


@router.get("/path", response_model=PathResponse)
async def get_path(
    start: str = Query(..., description="Start node ID"),
    end: str = Query(..., description="End node ID"),
    session: VisualizerSession = Depends(get_session),
) -> PathResponse:
    """Compute a shortest path without touching the selection or annotations."""
    graph = session.graph
    result = shortest_path(graph, graph.require_node(start), graph.require_node(end))
    return PathResponse(**result.to_dict())
