"""Custom exceptions for the BFS Visualizer.

This module defines a hierarchy of exceptions used throughout the application
for consistent error handling and reporting.
"""

from typing import Any


class BFSVisualizerError(Exception):
    """Base exception for all BFS Visualizer errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(BFSVisualizerError):
    """Error in application configuration."""

    pass


class GraphDefinitionError(ConfigurationError):
    """Graph definition could not be read or is invalid."""

    def __init__(self, source: str, reason: str, cause: Exception | None = None) -> None:
        super().__init__(
            message=f"Invalid graph definition {source}: {reason}",
            details={"source": source, "reason": reason},
            cause=cause,
        )


# =============================================================================
# Graph Errors
# =============================================================================


class GraphError(BFSVisualizerError):
    """Base class for graph-related errors."""

    pass


class DuplicateNodeError(GraphError):
    """A node with the same ID is already registered."""

    def __init__(self, node_id: str) -> None:
        super().__init__(
            message=f"Node with ID '{node_id}' already exists",
            details={"node_id": node_id},
        )


class UnknownNodeError(GraphError):
    """Node is not registered in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(
            message=f"Node not found: {node_id}",
            details={"node_id": node_id},
        )
