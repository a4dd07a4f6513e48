"""Rendering read model.

Maps annotations to styles and builds per-frame scene snapshots.
"""

from bfs_visualizer.rendering.palette import (
    EDGE_STYLES,
    NODE_STYLES,
    EdgeStyle,
    NodeStyle,
    edge_style,
    node_style,
)
from bfs_visualizer.rendering.scene import Scene, SceneEdge, SceneNode, build_scene

__all__ = [
    "NodeStyle",
    "EdgeStyle",
    "NODE_STYLES",
    "EDGE_STYLES",
    "node_style",
    "edge_style",
    "Scene",
    "SceneNode",
    "SceneEdge",
    "build_scene",
]
