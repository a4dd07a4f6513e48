"""Graph builder for constructing the visualizer graph.

Builds a Graph from a declarative definition: node labels with optional
positions and a list of undirected connections. Nodes without explicit
positions are placed on a circle.
"""

import json
import math
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from bfs_visualizer.config import GraphSettings
from bfs_visualizer.core.exceptions import GraphDefinitionError
from bfs_visualizer.graph.engine import Graph
from bfs_visualizer.graph.models import DEFAULT_NODE_RADIUS, Node, Point
from bfs_visualizer.utils.logging import get_logger

logger = get_logger(__name__)


class NodeDefinition(BaseModel):
    """A node label with an optional fixed position."""

    id: str = Field(min_length=1)
    x: float | None = None
    y: float | None = None


class GraphDefinition(BaseModel):
    """Declarative description of a graph.

    Attributes:
        nodes: Node labels in insertion order.
        connections: Undirected connections as pairs of node labels.
    """

    nodes: list[NodeDefinition]
    connections: list[tuple[str, str]] = Field(default_factory=list)


DEFAULT_DEFINITION = GraphDefinition(
    nodes=[NodeDefinition(id=label) for label in "ABCDEFGHIJKLM"],
    connections=[
        ("A", "B"),
        ("B", "C"),
        ("C", "D"),
        ("D", "E"),
        ("E", "A"),
        ("E", "B"),
        ("B", "D"),
        ("B", "F"),
        ("F", "G"),
        ("G", "A"),
        ("G", "H"),
        ("H", "D"),
        ("H", "B"),
        ("M", "A"),
        ("M", "B"),
        ("M", "C"),
    ],
)


def circular_layout(count: int, center: Point, radius: float) -> list[Point]:
    """Place ``count`` points evenly on a circle.

    Point ``i`` sits at angle ``2*pi*i/count``; coordinates are truncated
    to whole pixels.
    """
    points = []
    for i in range(count):
        angle = 2 * math.pi * i / count
        points.append(
            Point(
                center.x + int(radius * math.cos(angle)),
                center.y + int(radius * math.sin(angle)),
            )
        )
    return points


class GraphBuilder:
    """Builds a Graph from a GraphDefinition."""

    def __init__(
        self,
        center: Point = Point(500, 400),
        radius: float = 250,
        node_radius: float = DEFAULT_NODE_RADIUS,
    ) -> None:
        """Initialize the builder.

        Args:
            center: Center of the circular layout.
            radius: Radius of the circular layout.
            node_radius: Hit radius given to every node.
        """
        self.center = center
        self.radius = radius
        self.node_radius = node_radius

    def build(self, definition: GraphDefinition = DEFAULT_DEFINITION) -> Graph:
        """Build a graph, adding all nodes before any connection.

        Raises:
            DuplicateNodeError: If two nodes share a label.
            UnknownNodeError: If a connection names an undefined label.
        """
        graph = Graph()
        layout = circular_layout(len(definition.nodes), self.center, self.radius)

        for node_def, slot in zip(definition.nodes, layout):
            x = node_def.x if node_def.x is not None else slot.x
            y = node_def.y if node_def.y is not None else slot.y
            graph.add_node(Node(id=node_def.id, x=x, y=y, radius=self.node_radius))

        for a, b in definition.connections:
            graph.add_edge(graph.require_node(a), graph.require_node(b))

        logger.info(
            "Built graph from definition",
            node_count=graph.node_count,
            edge_count=graph.edge_count,
        )
        return graph


def load_definition(file_path: Path | str) -> GraphDefinition:
    """Load a graph definition from a JSON file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        The parsed definition.

    Raises:
        GraphDefinitionError: If the file is missing, not JSON, or invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise GraphDefinitionError(str(file_path), "file not found")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise GraphDefinitionError(str(file_path), "unreadable JSON", cause=e) from e

    try:
        definition = GraphDefinition.model_validate(data)
    except ValidationError as e:
        raise GraphDefinitionError(str(file_path), "schema mismatch", cause=e) from e

    logger.info(
        "Loaded graph definition",
        file_path=str(file_path),
        node_count=len(definition.nodes),
        connection_count=len(definition.connections),
    )
    return definition


def build_graph_from_settings(settings: GraphSettings) -> Graph:
    """Build the graph described by the graph settings.

    Args:
        settings: Graph settings with layout and optional definition file.

    Returns:
        The built graph.
    """
    definition = DEFAULT_DEFINITION
    if settings.definition_path is not None:
        definition = load_definition(settings.definition_path)

    builder = GraphBuilder(
        center=Point(settings.center_x, settings.center_y),
        radius=settings.layout_radius,
        node_radius=settings.node_radius,
    )
    return builder.build(definition)
