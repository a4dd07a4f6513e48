"""Graph models for the BFS visualizer.

Defines nodes, edges and their visual annotations, along with
path query results and graph statistics.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

# Half of the default 50px node diameter
DEFAULT_NODE_RADIUS = 25.0


class NodeAnnotation(str, Enum):
    """Visual state of a node, mapped to styling by the renderer."""

    DEFAULT = "default"
    SELECTED_START = "selected_start"
    ON_PATH = "on_path"


class EdgeAnnotation(str, Enum):
    """Visual state of an edge, mapped to styling by the renderer."""

    DEFAULT = "default"
    ON_PATH = "on_path"


class Point(NamedTuple):
    """A 2D point in screen coordinates."""

    x: float
    y: float


@dataclass(eq=False)
class Node:
    """A labeled, positioned vertex.

    Nodes compare by identity: the graph and the selection state
    hold references to the same objects.

    Attributes:
        id: Unique label of the node.
        x: Horizontal position of the node center.
        y: Vertical position of the node center.
        radius: Hit radius for point containment tests.
        annotation: Current visual state.
    """

    id: str
    x: float
    y: float
    radius: float = DEFAULT_NODE_RADIUS
    annotation: NodeAnnotation = NodeAnnotation.DEFAULT

    @property
    def position(self) -> Point:
        """Center of the node."""
        return Point(self.x, self.y)

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside the node's circle (boundary included)."""
        dx = point[0] - self.x
        dy = point[1] - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "radius": self.radius,
            "annotation": self.annotation.value,
        }

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, x={self.x}, y={self.y})"


@dataclass(eq=False)
class Edge:
    """An undirected connection between two nodes.

    Attributes:
        source: Endpoint the edge was declared from.
        target: Endpoint the edge was declared to.
        annotation: Current visual state.
    """

    source: Node
    target: Node
    annotation: EdgeAnnotation = EdgeAnnotation.DEFAULT

    def joins(self, a: Node, b: Node) -> bool:
        """Check whether this edge connects ``a`` and ``b`` in either orientation."""
        return (self.source is a and self.target is b) or (
            self.source is b and self.target is a
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "source": self.source.id,
            "target": self.target.id,
            "annotation": self.annotation.value,
        }

    def __repr__(self) -> str:
        return f"Edge({self.source.id!r} -- {self.target.id!r})"


@dataclass
class PathResult:
    """Result of a shortest path query.

    Attributes:
        start: Node the search started from.
        end: Node the search was looking for.
        nodes: Path from start to end, empty when no path exists.
        explored: Number of nodes dequeued during the search.
    """

    start: Node
    end: Node
    nodes: list[Node] = field(default_factory=list)
    explored: int = 0

    @property
    def found(self) -> bool:
        """Whether ``end`` was reached from ``start``."""
        return bool(self.nodes)

    @property
    def length(self) -> int | None:
        """Number of edges on the path, or None if no path exists."""
        if not self.nodes:
            return None
        return len(self.nodes) - 1

    @property
    def node_ids(self) -> list[str]:
        """IDs of the nodes on the path, in order."""
        return [node.id for node in self.nodes]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "start": self.start.id,
            "end": self.end.id,
            "path": self.node_ids,
            "found": self.found,
            "length": self.length,
            "explored": self.explored,
        }


@dataclass
class GraphStats:
    """Statistics about the graph.

    Attributes:
        node_count: Total number of nodes.
        edge_count: Total number of edges (parallel edges counted separately).
        connected_components: Number of connected components.
        density: Graph density (edges / possible edges).
    """

    node_count: int
    edge_count: int
    connected_components: int = 0
    density: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "connected_components": self.connected_components,
            "density": self.density,
        }
