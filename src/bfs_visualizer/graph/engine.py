"""Graph engine for the BFS visualizer.

Provides the core undirected graph data structure: nodes, edges,
ordered adjacency lists and annotation resets.
"""

from typing import Any

import rustworkx as rx

from bfs_visualizer.core.exceptions import DuplicateNodeError, UnknownNodeError
from bfs_visualizer.graph.models import (
    Edge,
    EdgeAnnotation,
    GraphStats,
    Node,
    NodeAnnotation,
    Point,
)
from bfs_visualizer.utils.logging import get_logger

logger = get_logger(__name__)


class Graph:
    """An undirected graph with insertion-ordered nodes and adjacency.

    Parallel edges are kept: adding the same connection twice creates
    a second edge and a second adjacency entry in both directions.
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._node_id_to_index: dict[str, int] = {}
        self._adjacency: dict[str, list[Node]] = {}

    @property
    def node_count(self) -> int:
        """Get the number of nodes in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return len(self._edges)

    @property
    def nodes(self) -> list[Node]:
        """All nodes in insertion order."""
        return list(self._nodes)

    @property
    def edges(self) -> list[Edge]:
        """All edges in insertion order."""
        return list(self._edges)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self.get_node(node.id) is node

    def add_node(self, node: Node) -> int:
        """Register a node with an empty adjacency list.

        Args:
            node: The node to add.

        Returns:
            The index of the added node.

        Raises:
            DuplicateNodeError: If a node with the same ID already exists.
        """
        if node.id in self._node_id_to_index:
            raise DuplicateNodeError(node.id)

        index = len(self._nodes)
        self._nodes.append(node)
        self._node_id_to_index[node.id] = index
        self._adjacency[node.id] = []

        logger.debug("Added node", node_id=node.id, index=index)
        return index

    def add_edge(self, a: Node, b: Node) -> Edge:
        """Add an undirected edge between two registered nodes.

        Both adjacency lists are updated together.

        Args:
            a: First endpoint.
            b: Second endpoint.

        Returns:
            The created edge.

        Raises:
            UnknownNodeError: If either endpoint is not registered.
        """
        for endpoint in (a, b):
            if endpoint not in self:
                raise UnknownNodeError(endpoint.id)

        edge = Edge(source=a, target=b)
        self._edges.append(edge)
        self._adjacency[a.id].append(b)
        self._adjacency[b.id].append(a)

        logger.debug("Added edge", source_id=a.id, target_id=b.id)
        return edge

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by its ID.

        Args:
            node_id: The node's unique identifier.

        Returns:
            The node, or None if not found.
        """
        index = self._node_id_to_index.get(node_id)
        if index is None:
            return None
        return self._nodes[index]

    def require_node(self, node_id: str) -> Node:
        """Get a node by its ID, raising if it is missing.

        Raises:
            UnknownNodeError: If no node has this ID.
        """
        node = self.get_node(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        return node

    def index_of(self, node: Node) -> int:
        """Get the insertion index of a registered node.

        Raises:
            UnknownNodeError: If the node is not registered.
        """
        if node not in self:
            raise UnknownNodeError(node.id)
        return self._node_id_to_index[node.id]

    def neighbors_of(self, node: Node) -> list[Node]:
        """Get the neighbors of a node in the order their edges were added.

        Args:
            node: A registered node.

        Returns:
            A copy of the node's adjacency list.

        Raises:
            UnknownNodeError: If the node is not registered.
        """
        if node not in self:
            raise UnknownNodeError(node.id)
        return list(self._adjacency[node.id])

    def find_edge(self, a: Node, b: Node) -> Edge | None:
        """Get the first edge joining two nodes, in either orientation.

        Args:
            a: One endpoint.
            b: The other endpoint.

        Returns:
            The earliest added matching edge, or None.
        """
        for edge in self._edges:
            if edge.joins(a, b):
                return edge
        return None

    def node_at(self, point: Point | tuple[float, float]) -> Node | None:
        """Find the node whose hit region contains a point.

        Nodes are tested in insertion order and the first match wins,
        so overlapping nodes resolve to the one added earliest.

        Args:
            point: The point to test.

        Returns:
            The hit node, or None if the point is on empty space.
        """
        for node in self._nodes:
            if node.contains(Point(*point)):
                return node
        return None

    def reset_annotations(self) -> None:
        """Set every node and edge annotation back to default."""
        for node in self._nodes:
            node.annotation = NodeAnnotation.DEFAULT
        for edge in self._edges:
            edge.annotation = EdgeAnnotation.DEFAULT

    def to_rustworkx(self) -> rx.PyGraph:
        """Build an undirected rustworkx multigraph mirroring this graph.

        Node indices match insertion indices and node payloads are node IDs.
        """
        graph = rx.PyGraph(multigraph=True)
        graph.add_nodes_from([node.id for node in self._nodes])
        graph.add_edges_from(
            [
                (
                    self._node_id_to_index[edge.source.id],
                    self._node_id_to_index[edge.target.id],
                    None,
                )
                for edge in self._edges
            ]
        )
        return graph

    def stats(self) -> GraphStats:
        """Compute graph statistics.

        Returns:
            GraphStats with counts, component count and density.
        """
        node_count = self.node_count
        edge_count = self.edge_count

        components = 0
        if node_count:
            components = rx.number_connected_components(self.to_rustworkx())

        possible_edges = node_count * (node_count - 1) / 2
        density = edge_count / possible_edges if possible_edges else 0.0

        return GraphStats(
            node_count=node_count,
            edge_count=edge_count,
            connected_components=components,
            density=round(density, 4),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the graph structure to a dictionary."""
        return {
            "nodes": [node.to_dict() for node in self._nodes],
            "edges": [edge.to_dict() for edge in self._edges],
        }
