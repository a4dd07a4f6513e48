"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test modules.
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["APP_ENV"] = "development"
os.environ["APP_DEBUG"] = "true"
os.environ.pop("GRAPH_DEFINITION_PATH", None)

from bfs_visualizer.graph.builder import GraphBuilder  # noqa: E402
from bfs_visualizer.graph.engine import Graph  # noqa: E402
from bfs_visualizer.graph.models import Node  # noqa: E402


@pytest.fixture
def mock_settings(tmp_path: Path) -> Generator[Any, None, None]:
    """Provide fresh settings for testing.

    Yields:
        Settings instance built from a patched environment.
    """
    with patch.dict(
        os.environ,
        {
            "APP_ENV": "development",
            "APP_DEBUG": "true",
        },
    ):
        from bfs_visualizer.config import get_settings

        get_settings.cache_clear()
        yield get_settings()
        get_settings.cache_clear()


@pytest.fixture
def app(mock_settings: Any) -> Any:
    """Create a test application instance.

    Returns:
        FastAPI application instance.
    """
    from bfs_visualizer.main import create_app

    return create_app()


@pytest.fixture
def client(app: Any) -> Generator[TestClient, None, None]:
    """Create a test client that runs the application lifespan.

    Yields:
        TestClient instance with the default graph session loaded.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def default_graph() -> Graph:
    """The built-in 13-node graph with the default circular layout."""
    return GraphBuilder().build()


@pytest.fixture
def make_graph() -> Callable[[str, list[tuple[str, str]]], Graph]:
    """Factory for small graphs with nodes laid out on a line, 100px apart."""

    def _make(node_ids: str, connections: list[tuple[str, str]]) -> Graph:
        graph = Graph()
        for i, node_id in enumerate(node_ids):
            graph.add_node(Node(id=node_id, x=100 * i, y=0))
        for a, b in connections:
            graph.add_edge(graph.require_node(a), graph.require_node(b))
        return graph

    return _make


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
