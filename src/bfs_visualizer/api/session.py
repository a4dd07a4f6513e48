"""Visualizer session shared by the API endpoints.

All request handlers touching the session are ``async def`` and never
await, so each one runs to completion on the event loop before the next
starts. Mutation is serialized through that single path.
"""

from dataclasses import dataclass

from fastapi import HTTPException

from bfs_visualizer.config import GraphSettings
from bfs_visualizer.graph.builder import build_graph_from_settings
from bfs_visualizer.graph.engine import Graph
from bfs_visualizer.selection.state_machine import SelectionStateMachine


@dataclass
class VisualizerSession:
    """A graph and the selection state machine driving it."""

    graph: Graph
    machine: SelectionStateMachine

    @classmethod
    def from_graph(cls, graph: Graph) -> "VisualizerSession":
        """Create a session with a fresh selection over ``graph``."""
        return cls(graph=graph, machine=SelectionStateMachine(graph))

    @classmethod
    def from_settings(cls, settings: GraphSettings) -> "VisualizerSession":
        """Create a session for the graph described by the settings."""
        return cls.from_graph(build_graph_from_settings(settings))


_session: VisualizerSession | None = None


def current_session() -> VisualizerSession | None:
    """Get the active session, or None before startup."""
    return _session


def get_session() -> VisualizerSession:
    """Get the active session."""
    if _session is None:
        raise HTTPException(status_code=503, detail="Visualizer session not initialized")
    return _session


def set_session(session: VisualizerSession | None) -> None:
    """Set the active session."""
    global _session
    _session = session
