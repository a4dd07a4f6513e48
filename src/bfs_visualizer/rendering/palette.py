"""Visual styling for node and edge annotations.

The domain only knows annotation tags; this is the one place where
they turn into colors and stroke widths.
"""

from dataclasses import dataclass

from bfs_visualizer.graph.models import EdgeAnnotation, NodeAnnotation


@dataclass(frozen=True)
class NodeStyle:
    """How a node is drawn."""

    fill: str
    border: str = "#000000"
    label: str = "#ffffff"


@dataclass(frozen=True)
class EdgeStyle:
    """How an edge is drawn."""

    stroke: str
    width: float


NODE_STYLES: dict[NodeAnnotation, NodeStyle] = {
    NodeAnnotation.DEFAULT: NodeStyle(fill="#0000ff"),
    NodeAnnotation.SELECTED_START: NodeStyle(fill="#ffff00"),
    NodeAnnotation.ON_PATH: NodeStyle(fill="#00ff00"),
}

EDGE_STYLES: dict[EdgeAnnotation, EdgeStyle] = {
    EdgeAnnotation.DEFAULT: EdgeStyle(stroke="#000000", width=2),
    EdgeAnnotation.ON_PATH: EdgeStyle(stroke="#00ff00", width=3),
}

BACKGROUND = "#f0f8ff"
FOOTER_TEXT = "Breadth-First Search Visualization • Path shown in green"


def node_style(annotation: NodeAnnotation) -> NodeStyle:
    """Style for a node annotation."""
    return NODE_STYLES[annotation]


def edge_style(annotation: EdgeAnnotation) -> EdgeStyle:
    """Style for an edge annotation."""
    return EDGE_STYLES[annotation]
