"""Tests for graph models."""

import pytest

from bfs_visualizer.graph.models import (
    DEFAULT_NODE_RADIUS,
    Edge,
    EdgeAnnotation,
    GraphStats,
    Node,
    NodeAnnotation,
    PathResult,
    Point,
)


class TestAnnotations:
    """Tests for annotation enums."""

    def test_node_annotation_values(self) -> None:
        """Test node annotation values."""
        assert NodeAnnotation.DEFAULT.value == "default"
        assert NodeAnnotation.SELECTED_START.value == "selected_start"
        assert NodeAnnotation.ON_PATH.value == "on_path"

    def test_edge_annotation_values(self) -> None:
        """Test edge annotation values."""
        assert EdgeAnnotation.DEFAULT.value == "default"
        assert EdgeAnnotation.ON_PATH.value == "on_path"

    def test_annotations_are_strings(self) -> None:
        """Test annotations compare equal to their string values."""
        assert NodeAnnotation.ON_PATH == "on_path"


class TestNode:
    """Tests for Node."""

    def test_defaults(self) -> None:
        """Test default radius and annotation."""
        node = Node(id="A", x=10, y=20)
        assert node.radius == DEFAULT_NODE_RADIUS
        assert node.annotation == NodeAnnotation.DEFAULT
        assert node.position == Point(10, 20)

    def test_contains_center(self) -> None:
        """Test the center is inside the node."""
        node = Node(id="A", x=100, y=100)
        assert node.contains(Point(100, 100))

    def test_contains_boundary(self) -> None:
        """Test points exactly on the circle count as hits."""
        node = Node(id="A", x=100, y=100, radius=25)
        assert node.contains(Point(125, 100))
        assert node.contains(Point(100, 75))

    def test_contains_outside(self) -> None:
        """Test points outside the circle miss."""
        node = Node(id="A", x=100, y=100, radius=25)
        assert not node.contains(Point(126, 100))
        # Inside the bounding box but outside the circle
        assert not node.contains(Point(120, 120))

    def test_contains_accepts_tuple(self) -> None:
        """Test plain tuples work as points."""
        node = Node(id="A", x=0, y=0)
        assert node.contains((3, 4))

    def test_identity_equality(self) -> None:
        """Test nodes with equal fields are still distinct."""
        a1 = Node(id="A", x=0, y=0)
        a2 = Node(id="A", x=0, y=0)
        assert a1 == a1
        assert a1 != a2
        assert len({a1, a2}) == 2

    def test_equality_ignores_annotation_changes(self) -> None:
        """Test a node stays hashable and equal to itself after annotation."""
        node = Node(id="A", x=0, y=0)
        seen = {node}
        node.annotation = NodeAnnotation.ON_PATH
        assert node in seen

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        node = Node(id="A", x=1, y=2, annotation=NodeAnnotation.SELECTED_START)
        assert node.to_dict() == {
            "id": "A",
            "x": 1,
            "y": 2,
            "radius": DEFAULT_NODE_RADIUS,
            "annotation": "selected_start",
        }


class TestEdge:
    """Tests for Edge."""

    def test_joins_both_orientations(self) -> None:
        """Test an edge joins its endpoints in either order."""
        a = Node(id="A", x=0, y=0)
        b = Node(id="B", x=1, y=0)
        c = Node(id="C", x=2, y=0)
        edge = Edge(source=a, target=b)

        assert edge.joins(a, b)
        assert edge.joins(b, a)
        assert not edge.joins(a, c)

    def test_joins_uses_identity(self) -> None:
        """Test a look-alike node does not match."""
        a = Node(id="A", x=0, y=0)
        b = Node(id="B", x=1, y=0)
        edge = Edge(source=a, target=b)
        assert not edge.joins(Node(id="A", x=0, y=0), b)

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        edge = Edge(source=Node(id="A", x=0, y=0), target=Node(id="B", x=1, y=0))
        assert edge.to_dict() == {"source": "A", "target": "B", "annotation": "default"}


class TestPathResult:
    """Tests for PathResult."""

    @pytest.fixture
    def nodes(self) -> list[Node]:
        """Three nodes."""
        return [Node(id=label, x=0, y=0) for label in "ABC"]

    def test_found_path(self, nodes: list[Node]) -> None:
        """Test a found path."""
        result = PathResult(start=nodes[0], end=nodes[2], nodes=nodes, explored=3)
        assert result.found is True
        assert result.length == 2
        assert result.node_ids == ["A", "B", "C"]

    def test_single_node_path(self, nodes: list[Node]) -> None:
        """Test a start == end path has length zero."""
        result = PathResult(start=nodes[0], end=nodes[0], nodes=[nodes[0]])
        assert result.found is True
        assert result.length == 0

    def test_no_path(self, nodes: list[Node]) -> None:
        """Test an empty path means not found."""
        result = PathResult(start=nodes[0], end=nodes[2])
        assert result.found is False
        assert result.length is None
        assert result.node_ids == []

    def test_to_dict(self, nodes: list[Node]) -> None:
        """Test conversion to dictionary."""
        result = PathResult(start=nodes[0], end=nodes[2], nodes=nodes, explored=4)
        assert result.to_dict() == {
            "start": "A",
            "end": "C",
            "path": ["A", "B", "C"],
            "found": True,
            "length": 2,
            "explored": 4,
        }


class TestGraphStats:
    """Tests for GraphStats."""

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        stats = GraphStats(node_count=3, edge_count=2, connected_components=1, density=0.6667)
        assert stats.to_dict() == {
            "node_count": 3,
            "edge_count": 2,
            "connected_components": 1,
            "density": 0.6667,
        }
