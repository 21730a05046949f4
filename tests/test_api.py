"""Tests for the HTTP API."""

import pytest
import tempfile
from pathlib import Path
from fastapi.testclient import TestClient
from metrolog.api import app
from metrolog.database import Database, get_db


@pytest.fixture
def client():
    """API client backed by a temporary seeded database."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db = Database(Path(tmpdir) / "test.db")
        db.seed_if_needed()
        app.dependency_overrides[get_db] = lambda: db
        yield TestClient(app)
        app.dependency_overrides.clear()
        db.engine.dispose()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_lines(client):
    """Test every line is listed with counts."""
    data = client.get("/lines").json()
    lines = {line["line"]: line for line in data["lines"]}

    assert data["count"] == 26
    assert lines["A"]["branches"] == ["Far Rockaway"]
    assert lines["SIR"]["total_count"] == 21
    assert lines["SIR"]["visited_count"] == 0


def test_line_tree(client):
    """Test the A train tree is served with position tags."""
    response = client.get("/lines/A")
    assert response.status_code == 200
    data = response.json()

    entries = [e for section in data["sections"] for e in section["entries"]]
    assert data["name"] == "A Train - Eighth Avenue"
    assert data["total_count"] == 40
    assert entries[0]["position"] == "first"
    assert entries[-1]["position"] == "last"
    assert entries[-1]["is_branch"]

    rockaway_blvd = next(e for e in entries if e["station"]["name"] == "Rockaway Blvd")
    assert rockaway_blvd["position"] == "branch_point"

    columbus = next(e for e in entries if e["station"]["name"] == "59 St-Columbus Circle")
    assert columbus["other_lines"] == ["1", "C", "B", "D"]


def test_unknown_line_tree(client):
    """Test unknown lines return an empty tree rather than an error."""
    response = client.get("/lines/ZZ")
    assert response.status_code == 200
    assert response.json()["sections"] == []


def test_list_stations(client):
    data = client.get("/stations", params={"line": "SIR"}).json()
    assert data["count"] == 21


def test_toggle_station(client):
    """Test toggling a station updates the line progress."""
    response = client.post("/stations/tottenville_sir/toggle")
    assert response.status_code == 200
    assert response.json()["is_visited"]

    tree = client.get("/lines/SIR").json()
    assert tree["visited_count"] == 1


def test_toggle_unknown_station(client):
    response = client.post("/stations/nonexistent/toggle")
    assert response.status_code == 404
