"""Click-driven selection of start and end nodes.

The state machine owns no nodes: it holds references into the graph
and writes annotations back onto them.
"""

from enum import Enum

from bfs_visualizer.graph.algorithms import path_edges, shortest_path
from bfs_visualizer.graph.engine import Graph
from bfs_visualizer.graph.models import (
    EdgeAnnotation,
    Node,
    NodeAnnotation,
    PathResult,
    Point,
)
from bfs_visualizer.utils.logging import get_logger, log_context

logger = get_logger(__name__)


class SelectionPhase(str, Enum):
    """Phases of a start/end selection."""

    EMPTY = "empty"
    START_CHOSEN = "start_chosen"
    PATH_SHOWN = "path_shown"

    @property
    def instruction(self) -> str:
        """Prompt shown to the user in this phase."""
        return _INSTRUCTIONS[self]


_INSTRUCTIONS = {
    SelectionPhase.EMPTY: "Click start node",
    SelectionPhase.START_CHOSEN: "Click end node",
    SelectionPhase.PATH_SHOWN: "Click any node to reset",
}


class SelectionStateMachine:
    """Drives start/end selection and path highlighting.

    Transitions on a node hit:
    - EMPTY: the node becomes the start.
    - START_CHOSEN: a different node becomes the end and the path is shown.
      Hitting the start again resets and selects it anew.
    - PATH_SHOWN: everything resets and the node becomes the new start.
    """

    def __init__(self, graph: Graph) -> None:
        """Initialize with the graph whose nodes are selected.

        Args:
            graph: The graph to select nodes from.
        """
        self.graph = graph
        self.start: Node | None = None
        self.end: Node | None = None
        self.current_path: list[Node] = []
        self.last_result: PathResult | None = None

    @property
    def phase(self) -> SelectionPhase:
        """Current phase, derived from the selected nodes."""
        if self.start is None:
            return SelectionPhase.EMPTY
        if self.end is None:
            return SelectionPhase.START_CHOSEN
        return SelectionPhase.PATH_SHOWN

    @property
    def instruction(self) -> str:
        """Prompt for the next click."""
        return self.phase.instruction

    def click(self, point: Point | tuple[float, float]) -> Node | None:
        """Handle a click at a point.

        A click on empty space changes nothing.

        Args:
            point: Click position in graph coordinates.

        Returns:
            The node that was hit, or None.
        """
        node = self.graph.node_at(point)
        if node is None:
            logger.debug("Click missed all nodes", x=point[0], y=point[1])
            return None

        self.select(node)
        return node

    def select(self, node: Node) -> SelectionPhase:
        """Apply a hit on ``node`` and return the resulting phase."""
        phase = self.phase

        with log_context(node_id=node.id, previous_phase=phase):
            if phase is SelectionPhase.EMPTY:
                self._choose_start(node)
            elif phase is SelectionPhase.START_CHOSEN and node is not self.start:
                self._choose_end(self.start, node)
            else:
                self.reset()
                self._choose_start(node)

            logger.info("Selection updated", phase=self.phase)
        return self.phase

    def reset(self) -> None:
        """Clear annotations and the current selection."""
        self.graph.reset_annotations()
        self.start = None
        self.end = None
        self.current_path = []
        self.last_result = None

    def _choose_start(self, node: Node) -> None:
        self.start = node
        node.annotation = NodeAnnotation.SELECTED_START

    def _choose_end(self, start: Node, node: Node) -> None:
        self.end = node

        # Stale highlights from an earlier query never survive a new one
        self.graph.reset_annotations()
        start.annotation = NodeAnnotation.SELECTED_START

        result = shortest_path(self.graph, start, node)
        self.last_result = result
        self.current_path = list(result.nodes)

        if not result.found:
            logger.info("No path between nodes", start=start.id, end=node.id)
            return

        for path_node in result.nodes:
            path_node.annotation = NodeAnnotation.ON_PATH
        for edge in path_edges(self.graph, result.nodes):
            edge.annotation = EdgeAnnotation.ON_PATH

        logger.info(
            "Path highlighted",
            start=start.id,
            end=node.id,
            path=result.node_ids,
            length=result.length,
        )
