"""BFS Visualizer API.

Provides the REST API that renderers and input sources talk to.
"""

from bfs_visualizer.api.router import api_router
from bfs_visualizer.api.session import VisualizerSession, get_session, set_session

__all__ = [
    "api_router",
    "VisualizerSession",
    "get_session",
    "set_session",
]
