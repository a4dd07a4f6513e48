"""Tests for selection API endpoints."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def positions(client: TestClient) -> dict[str, tuple[float, float]]:
    """Node centers of the served graph."""
    nodes = client.get("/api/v1/graph").json()["nodes"]
    return {n["id"]: (n["x"], n["y"]) for n in nodes}


def _click(client: TestClient, point: tuple[float, float]) -> dict:
    response = client.post("/api/v1/selection/click", json={"x": point[0], "y": point[1]})
    assert response.status_code == 200
    return response.json()


class TestClickEndpoint:
    """Tests for POST /selection/click."""

    def test_first_click(self, client: TestClient, positions) -> None:
        """Test clicking a node selects the start."""
        data = _click(client, positions["A"])

        assert data["hit"] == "A"
        assert data["scene"]["phase"] == "start_chosen"
        assert data["scene"]["instruction"] == "Click end node"
        assert data["scene"]["start"] == "A"

    def test_click_near_edge_of_node(self, client: TestClient, positions) -> None:
        """Test clicks inside the hit radius resolve to the node."""
        x, y = positions["C"]
        data = _click(client, (x + 20, y))
        assert data["hit"] == "C"

    def test_a_then_c(self, client: TestClient, positions) -> None:
        """Test the A, C sequence shows A-B-C."""
        _click(client, positions["A"])
        data = _click(client, positions["C"])
        scene = data["scene"]

        assert scene["phase"] == "path_shown"
        assert scene["instruction"] == "Click any node to reset"
        assert scene["path"] == ["A", "B", "C"]
        assert scene["path_found"] is True
        on_path = [e for e in scene["edges"] if e["annotation"] == "on_path"]
        assert [(e["source"], e["target"]) for e in on_path] == [("A", "B"), ("B", "C")]

    def test_a_c_g(self, client: TestClient, positions) -> None:
        """Test a third click starts a new selection at G."""
        _click(client, positions["A"])
        _click(client, positions["C"])
        scene = _click(client, positions["G"])["scene"]

        assert scene["phase"] == "start_chosen"
        assert scene["start"] == "G"
        assert scene["end"] is None
        assert scene["path"] == []
        highlighted = [n["id"] for n in scene["nodes"] if n["annotation"] != "default"]
        assert highlighted == ["G"]
        assert all(e["annotation"] == "default" for e in scene["edges"])

    def test_empty_space_is_noop(self, client: TestClient, positions) -> None:
        """Test a miss returns the unchanged frame."""
        _click(client, positions["A"])
        _click(client, positions["C"])
        before = client.get("/api/v1/graph").json()

        data = _click(client, (500, 400))

        assert data["hit"] is None
        assert data["scene"] == before

    def test_invalid_body(self, client: TestClient) -> None:
        """Test coordinates are required."""
        response = client.post("/api/v1/selection/click", json={"x": 1})
        assert response.status_code == 422


class TestSelectNodeEndpoint:
    """Tests for POST /selection/nodes/{id}."""

    def test_select_by_id(self, client: TestClient) -> None:
        """Test selecting nodes by ID."""
        client.post("/api/v1/selection/nodes/A")
        response = client.post("/api/v1/selection/nodes/C")
        assert response.status_code == 200
        data = response.json()

        assert data["hit"] == "C"
        assert data["scene"]["path"] == ["A", "B", "C"]

    def test_select_unreachable(self, client: TestClient) -> None:
        """Test an unreachable end yields an empty path."""
        client.post("/api/v1/selection/nodes/A")
        scene = client.post("/api/v1/selection/nodes/I").json()["scene"]

        assert scene["phase"] == "path_shown"
        assert scene["path"] == []
        assert scene["path_found"] is False

    def test_select_unknown(self, client: TestClient) -> None:
        """Test unknown IDs return 404 and change nothing."""
        client.post("/api/v1/selection/nodes/A")
        response = client.post("/api/v1/selection/nodes/Z")

        assert response.status_code == 404
        assert response.json()["details"] == {"node_id": "Z"}
        assert client.get("/api/v1/graph").json()["start"] == "A"


class TestResetEndpoint:
    """Tests for POST /selection/reset."""

    def test_reset(self, client: TestClient) -> None:
        """Test reset clears selection and highlights."""
        client.post("/api/v1/selection/nodes/A")
        client.post("/api/v1/selection/nodes/C")

        response = client.post("/api/v1/selection/reset")
        assert response.status_code == 200
        scene = response.json()

        assert scene["phase"] == "empty"
        assert scene["instruction"] == "Click start node"
        assert all(n["annotation"] == "default" for n in scene["nodes"])
        assert all(e["annotation"] == "default" for e in scene["edges"])
