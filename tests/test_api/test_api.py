"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from cubicpath.main import app
from tests.conftest import GROUPED_SVG, QUADRATIC_SVG, SQUARE_SVG, STRAIGHT_RUN_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["commands_registered"] == 6


def test_parse_square():
    response = client.post("/api/parse", json={"svg": SQUARE_SVG})
    assert response.status_code == 200
    data = response.json()
    assert len(data["paths"]) == 1
    path = data["paths"][0]
    assert path["id"] == "square"
    assert path["d"] == "M 0 0 L 10 0 L 10 10 L 0 0"
    assert path["data"][1] == {
        "start": {"x": 10.0, "y": 0.0},
        "end": {"x": 10.0, "y": 10.0},
        "control": [{"x": 10.0, "y": 5.0}, {"x": 10.0, "y": 5.0}],
    }
    assert data["errors"] == {}


def test_parse_with_tolerance():
    response = client.post("/api/parse", json={"svg": STRAIGHT_RUN_SVG, "slope_tolerance": 0.001})
    data = response.json()
    assert data["slope_tolerance"] == 0.001
    assert data["paths"][0]["d"] == "M 0 0 L 20 0 L 20 10"


def test_negative_tolerance_is_clamped():
    response = client.post("/api/parse", json={"svg": STRAIGHT_RUN_SVG, "slope_tolerance": -3})
    data = response.json()
    assert data["slope_tolerance"] == 0.0
    assert len(data["paths"][0]["data"]) == 3


def test_parse_grouped_order():
    response = client.post("/api/parse", json={"svg": GROUPED_SVG})
    assert [p["id"] for p in response.json()["paths"]] == ["first", "second", "third", ""]


def test_parse_rejects_unsupported_command():
    response = client.post("/api/parse", json={"svg": QUADRATIC_SVG})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "unsupported_command"
    assert detail["command"] == "Q"


def test_parse_isolated_errors():
    response = client.post("/api/parse", json={"svg": QUADRATIC_SVG, "isolate_errors": True})
    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["paths"]] == ["ok"]
    assert data["errors"]["quad"]["command"] == "Q"
    assert data["errors"]["bad-x"] == {
        "kind": "invalid_x",
        "command": "L",
        "data": "x",
        "message": "L does not contain a valid x: x",
    }


def test_parse_malformed_xml():
    response = client.post("/api/parse", json={"svg": "<svg><path></svg>"})
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "xml"


def test_parse_single_path():
    response = client.post("/api/parse/path", json={"d": "m 10,10 5,5", "id": "p1"})
    assert response.status_code == 200
    path = response.json()["path"]
    assert path["id"] == "p1"
    assert path["d"] == "M 10 10 L 15 15"


def test_parse_single_path_error():
    response = client.post("/api/parse/path", json={"d": "M 0 0 C 1 2 3"})
    assert response.status_code == 422
    assert response.json()["detail"] == {
        "kind": "invalid_coordinate",
        "command": "C",
        "data": "1 2 3",
        "message": "C does not contain a valid coordinate or set of coordinates: 1 2 3",
    }


def test_parse_single_path_rejects_overflowing_coordinate():
    response = client.post("/api/parse/path", json={"d": "M 0 0 L 1e400 0"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "invalid_x"
    assert detail["data"] == "1e400"
