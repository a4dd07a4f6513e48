"""Selection module.

Turns clicks into start/end selections and highlighted paths.
"""

from bfs_visualizer.selection.state_machine import SelectionPhase, SelectionStateMachine

__all__ = [
    "SelectionPhase",
    "SelectionStateMachine",
]
