"""API endpoints module.

Contains all REST API endpoint routers.
"""

from bfs_visualizer.api.endpoints import graph, health, selection

__all__ = [
    "graph",
    "health",
    "selection",
]
