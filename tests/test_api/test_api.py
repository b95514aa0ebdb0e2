"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from geosections.main import app
from tests.conftest import HOLE_1, SQUARE_RING


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["kinds_registered"] == 5


def test_kinds():
    response = client.get("/api/kinds")
    assert response.status_code == 200
    kinds = {k["kind"] for k in response.json()}
    assert kinds == {"box", "linestring", "ring", "polygon", "multi"}


def test_sectionalize_polygon():
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "Polygon", "coordinates": [SQUARE_RING, HOLE_1]},
    })
    assert response.status_code == 200
    data = response.json()
    assert data["section_count"] == 8
    assert data["dimension_count"] == 2
    assert [s["id"] for s in data["sections"]] == list(range(8))
    first = data["sections"][0]
    assert first["directions"] == [0, 1]
    assert first["bounding_box"] == [0.0, 0.0, 0.0, 10.0]
    assert first["ring_index"] == -1
    assert data["sections"][4]["ring_index"] == 0


def test_sectionalize_box():
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "Box", "bbox": [0, 0, 2, 3]},
    })
    assert response.status_code == 200
    data = response.json()
    assert data["section_count"] == 4
    assert all(s["count"] == 1 for s in data["sections"])


def test_sectionalize_max_segments():
    line = [[i, i] for i in range(31)]
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "LineString", "coordinates": line},
        "max_segments_per_section": 4,
    })
    assert response.status_code == 200
    counts = [s["count"] for s in response.json()["sections"]]
    assert counts == [5] * 6
    assert sum(counts) == 30


def test_sectionalize_unsupported_geometry():
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "Point", "coordinates": [0, 0]},
    })
    assert response.status_code == 422
    assert "Point" in response.json()["detail"]


def test_sectionalize_too_many_tracked_dimensions():
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
        "tracked_dimension_count": 3,
    })
    assert response.status_code == 422


def test_sectionalize_invalid_max_segments():
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
        "max_segments_per_section": 0,
    })
    assert response.status_code == 422


def test_sectionalize_malformed_box():
    for bbox in ([0, 0, 1, "a"], "abcd", 5):
        response = client.post("/api/sectionalize", json={
            "geometry": {"type": "Box", "bbox": bbox},
        })
        assert response.status_code == 422


def test_sectionalize_reversed_box():
    response = client.post("/api/sectionalize", json={
        "geometry": {"type": "Box", "bbox": [10, 10, 0, 0]},
    })
    assert response.status_code == 422
    assert "max_corner" in response.json()["detail"]
