"""Tests for station records and complexes."""

import pytest
from metrolog.stations import (
    STATIONS,
    Borough,
    Station,
    StationComplex,
    build_complexes,
    build_stations,
    station_id,
)


def test_station_id():
    """Test seed ids combine the name and lines."""
    assert station_id("Canal St", ["A", "C", "E"]) == "canal_st_ace"
    assert station_id("Prince's Bay", ["SIR"]) == "prince_s_bay_sir"


def test_station_ids_unique():
    """Test every seed station gets a distinct id."""
    stations = build_stations()
    assert len(STATIONS) == len(stations)


def test_stations_have_required_fields():
    """Test all stations have required fields."""
    for station in STATIONS.values():
        assert station.id
        assert station.name
        assert len(station.lines) > 0
        assert isinstance(station.borough, Borough)
        assert 40.4 < station.latitude < 41.0
        assert -74.3 < station.longitude < -73.7
        assert not station.is_visited


def test_duplicate_names_exist():
    """Test transfer complexes produce several records with one name."""
    canal = [s for s in STATIONS.values() if s.name == "Canal St"]
    assert len(canal) > 1
    assert len({s.id for s in canal}) == len(canal)


def test_station_serves():
    """Test line membership accepts lowercase codes."""
    stations = [s for s in build_stations() if s.serves("sir")]
    assert len(stations) == 21
    for station in stations:
        assert station.serves("SIR")
        assert station.borough == Borough.STATEN_ISLAND


def test_borough_parse_fallback():
    assert Borough.parse("Queens") == Borough.QUEENS
    assert Borough.parse("Atlantis") == Borough.MANHATTAN


def test_build_complexes():
    """Test complexes group their member stations."""
    complexes = build_complexes(build_stations())
    fulton = complexes["Fulton St"]

    assert len(fulton.stations) == 4
    assert all(s.complex_name == "Fulton St" for s in fulton.stations)
    assert fulton.all_lines == ["2", "3", "4", "5", "A", "C", "J", "Z"]
    assert fulton.lines_description == "2 3 4 5 A C J Z"


def test_complex_visit_status():
    """Test complex visit status follows its stations."""
    visited = Station(id="v", name="V", lines=("1",), latitude=0, longitude=0, borough=Borough.BRONX, is_visited=True)
    unvisited = Station(id="u", name="U", lines=("2",), latitude=0, longitude=0, borough=Borough.BRONX)

    partial = StationComplex(name="Hub", borough=Borough.BRONX, stations=[visited, unvisited])
    assert partial.is_partially_visited
    assert not partial.is_fully_visited
    assert partial.visited_station_count == 1

    full = StationComplex(name="Hub", borough=Borough.BRONX, stations=[visited])
    assert full.is_fully_visited

    empty = StationComplex(name="Empty", borough=Borough.BRONX)
    assert not empty.is_fully_visited
    assert not empty.is_partially_visited
