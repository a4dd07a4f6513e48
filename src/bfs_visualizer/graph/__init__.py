"""Graph module for the BFS visualizer.

Provides the undirected graph model and breadth-first search.
"""

from bfs_visualizer.graph.algorithms import path_edges, shortest_path
from bfs_visualizer.graph.builder import (
    DEFAULT_DEFINITION,
    GraphBuilder,
    GraphDefinition,
    NodeDefinition,
    build_graph_from_settings,
    circular_layout,
    load_definition,
)
from bfs_visualizer.graph.engine import Graph
from bfs_visualizer.graph.models import (
    Edge,
    EdgeAnnotation,
    GraphStats,
    Node,
    NodeAnnotation,
    PathResult,
    Point,
)

__all__ = [
    # Engine
    "Graph",
    # Models
    "Node",
    "Edge",
    "Point",
    "NodeAnnotation",
    "EdgeAnnotation",
    "PathResult",
    "GraphStats",
    # Builder
    "GraphBuilder",
    "GraphDefinition",
    "NodeDefinition",
    "DEFAULT_DEFINITION",
    "circular_layout",
    "load_definition",
    "build_graph_from_settings",
    # Algorithms
    "shortest_path",
    "path_edges",
]
