"""BFS Visualizer - Interactive Breadth-First Search teaching tool.

A small service for exploring shortest paths on a fixed graph:
- Graph Model (nodes, edges, adjacency)
- BFS Engine (traversal and path reconstruction)
- Selection State Machine (click-driven start/end selection)
"""

__version__ = "0.1.0"
__author__ = "BFS Visualizer Team"
