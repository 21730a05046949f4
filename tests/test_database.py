"""Tests for database functionality."""

import pytest
import tempfile
from pathlib import Path
from metrolog.database import Database
from metrolog.stations import STATIONS


@pytest.fixture
def test_db():
    """Create a temporary seeded test database."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        db = Database(db_path)
        db.seed_if_needed()
        yield db
        db.engine.dispose()


def test_seed_once(test_db):
    """Test seeding only runs on an empty database."""
    assert len(test_db.get_stations()) == len(STATIONS)
    assert test_db.seed_if_needed() == 0
    assert len(test_db.get_stations()) == len(STATIONS)


def test_stations_keep_seed_order(test_db):
    """Test snapshots come back in insertion order."""
    assert [s.id for s in test_db.get_stations()] == list(STATIONS)


def test_get_stations_for_line(test_db):
    """Test filtering stations by line."""
    stations = test_db.get_stations("a")
    assert len(stations) == 40
    assert all("A" in s.lines for s in stations)


def test_get_station(test_db):
    """Test loading one station with its complex."""
    station = test_db.get_station("fulton_st_ac")
    assert station.name == "Fulton St"
    assert station.lines == ("A", "C")
    assert station.complex_name == "Fulton St"
    assert test_db.get_station("nonexistent") is None


def test_toggle_visited(test_db):
    """Test toggling sets and clears the visited date."""
    station = test_db.toggle_visited("rockaway_blvd_a")
    assert station.is_visited
    assert station.visited_date is not None

    station = test_db.toggle_visited("rockaway_blvd_a")
    assert not station.is_visited
    assert station.visited_date is None


def test_toggle_visited_uses_one_session(test_db):
    """Test the read and the flip happen in a single session."""
    opened = []
    session_factory = test_db.Session

    def counting_session():
        session = session_factory()
        opened.append(session)
        return session

    test_db.Session = counting_session
    station = test_db.toggle_visited("tottenville_sir")

    assert len(opened) == 1
    assert station.is_visited
    assert test_db.get_station("tottenville_sir").is_visited


def test_set_visited(test_db):
    """Test marking a station visited persists."""
    test_db.set_visited("tottenville_sir", True)
    assert test_db.get_station("tottenville_sir").is_visited
    visited = [s for s in test_db.get_stations("SIR") if s.is_visited]
    assert [s.id for s in visited] == ["tottenville_sir"]


def test_visit_unknown_station(test_db):
    assert test_db.toggle_visited("nonexistent") is None
    assert test_db.set_visited("nonexistent", True) is None


def test_get_complexes(test_db):
    """Test complexes load with their stations."""
    test_db.set_visited("fulton_st_jz", True)
    complexes = test_db.get_complexes()
    fulton = complexes["Fulton St"]

    assert len(fulton.stations) == 4
    assert fulton.is_partially_visited
    assert not fulton.is_fully_visited
