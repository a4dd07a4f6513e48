"""Breadth-first search and path reconstruction.

Shortest paths here are fewest-edge paths: every edge counts as one hop.
"""

from collections import deque

from bfs_visualizer.core.exceptions import UnknownNodeError
from bfs_visualizer.graph.engine import Graph
from bfs_visualizer.graph.models import Edge, Node, PathResult
from bfs_visualizer.utils.logging import get_logger

logger = get_logger(__name__)

# Predecessor sentinels, stored in place of a node index
ROOT = -1
UNDISCOVERED = -2


def shortest_path(graph: Graph, start: Node, end: Node) -> PathResult:
    """Find the fewest-edge path from ``start`` to ``end``.

    Neighbors are expanded in adjacency order and the search stops
    when ``end`` is dequeued. The graph is not modified.

    Args:
        graph: The graph to search.
        start: Node to start from.
        end: Node to reach.

    Returns:
        PathResult whose nodes run from start to end, or are empty
        when ``end`` cannot be reached.

    Raises:
        UnknownNodeError: If ``start`` or ``end`` is not in the graph.
    """
    for node in (start, end):
        if node not in graph:
            raise UnknownNodeError(node.id)

    if start is end:
        return PathResult(start=start, end=end, nodes=[start])

    nodes = graph.nodes
    start_index = graph.index_of(start)
    end_index = graph.index_of(end)

    predecessors = [UNDISCOVERED] * len(nodes)
    predecessors[start_index] = ROOT
    queue = deque([start_index])
    explored = 0

    while queue:
        current = queue.popleft()
        explored += 1
        if current == end_index:
            break

        for neighbor in graph.neighbors_of(nodes[current]):
            neighbor_index = graph.index_of(neighbor)
            if predecessors[neighbor_index] == UNDISCOVERED:
                predecessors[neighbor_index] = current
                queue.append(neighbor_index)

    path = _reconstruct(nodes, predecessors, end_index)
    result = PathResult(start=start, end=end, nodes=path, explored=explored)

    if result.found:
        logger.debug(
            "Shortest path found",
            start=start.id,
            end=end.id,
            path=result.node_ids,
            explored=explored,
        )
    else:
        logger.debug("No path found", start=start.id, end=end.id, explored=explored)
    return result


def _reconstruct(nodes: list[Node], predecessors: list[int], end_index: int) -> list[Node]:
    """Walk predecessor links back from ``end_index`` to the root."""
    if predecessors[end_index] == UNDISCOVERED:
        return []

    path: deque[Node] = deque()
    index = end_index
    while index != ROOT:
        path.appendleft(nodes[index])
        index = predecessors[index]
    return list(path)


def path_edges(graph: Graph, path: list[Node]) -> list[Edge]:
    """Map consecutive path nodes to the edges joining them.

    For parallel edges the earliest added one is chosen.
    """
    edges = []
    for current, following in zip(path, path[1:]):
        edge = graph.find_edge(current, following)
        if edge is not None:
            edges.append(edge)
    return edges
