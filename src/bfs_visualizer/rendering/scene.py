"""Frame snapshots for renderers.

A Scene is everything a renderer needs to draw one frame: nodes and
edges in insertion order with their styles, plus the instruction text.
Building a scene never mutates the graph or the selection.
"""

from pydantic import BaseModel

from bfs_visualizer.rendering.palette import (
    BACKGROUND,
    FOOTER_TEXT,
    edge_style,
    node_style,
)
from bfs_visualizer.selection.state_machine import SelectionStateMachine


class SceneNode(BaseModel):
    """A node as drawn in one frame."""

    id: str
    x: float
    y: float
    radius: float
    annotation: str
    fill: str
    border: str
    label_color: str


class SceneEdge(BaseModel):
    """An edge as drawn in one frame."""

    source: str
    target: str
    x1: float
    y1: float
    x2: float
    y2: float
    annotation: str
    stroke: str
    width: float


class Scene(BaseModel):
    """Snapshot of the visualizer for one frame."""

    nodes: list[SceneNode]
    edges: list[SceneEdge]
    phase: str
    instruction: str
    start: str | None = None
    end: str | None = None
    path: list[str] = []
    path_found: bool | None = None
    background: str = BACKGROUND
    footer: str = FOOTER_TEXT


def build_scene(machine: SelectionStateMachine) -> Scene:
    """Build a frame snapshot from the selection state and its graph.

    Args:
        machine: The selection state machine to draw.

    Returns:
        Scene for the current state.
    """
    graph = machine.graph

    nodes = []
    for node in graph.nodes:
        style = node_style(node.annotation)
        nodes.append(
            SceneNode(
                id=node.id,
                x=node.x,
                y=node.y,
                radius=node.radius,
                annotation=node.annotation.value,
                fill=style.fill,
                border=style.border,
                label_color=style.label,
            )
        )

    edges = []
    for edge in graph.edges:
        style = edge_style(edge.annotation)
        edges.append(
            SceneEdge(
                source=edge.source.id,
                target=edge.target.id,
                x1=edge.source.x,
                y1=edge.source.y,
                x2=edge.target.x,
                y2=edge.target.y,
                annotation=edge.annotation.value,
                stroke=style.stroke,
                width=style.width,
            )
        )

    result = machine.last_result
    return Scene(
        nodes=nodes,
        edges=edges,
        phase=machine.phase.value,
        instruction=machine.instruction,
        start=machine.start.id if machine.start else None,
        end=machine.end.id if machine.end else None,
        path=[node.id for node in machine.current_path],
        path_found=result.found if result is not None else None,
    )
