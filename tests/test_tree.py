"""Tests for the branch-aware route tree."""

import logging

import pytest
from metrolog.resolver import resolve_route
from metrolog.routes import Branch, BranchPosition, RouteDefinition
from metrolog.stations import Borough, Station, build_complexes, build_stations
from metrolog.tree import (
    BottomBranch,
    NoBranch,
    StationPosition,
    TopBranch,
    build_line_tree,
    build_tree,
    classify,
    position_for,
    tree_entries,
)

M = Borough.MANHATTAN
BK = Borough.BROOKLYN
Q = Borough.QUEENS

FIRST = StationPosition.FIRST
MIDDLE = StationPosition.MIDDLE
LAST = StationPosition.LAST
BRANCH_POINT = StationPosition.BRANCH_POINT
SINGLE = StationPosition.SINGLE


def make_station(name, borough=M):
    return Station(id=name.lower(), name=name, lines=("X",), latitude=0.0, longitude=0.0, borough=borough)


def spur(position=BranchPosition.BOTTOM, branch_point="P", name="Spur"):
    return Branch(name=name, stations=("S1", "S2"), position=position, branch_point=branch_point)


@pytest.fixture(scope="module")
def seed_stations():
    return build_stations()


def test_position_for():
    """Test tags depend only on index, length and branch point."""
    assert position_for(0, 1) == SINGLE
    assert position_for(0, 3) == FIRST
    assert position_for(1, 3) == MIDDLE
    assert position_for(2, 3) == LAST
    assert position_for(2, 3, is_branch_point=True) == BRANCH_POINT
    assert position_for(0, 1, is_branch_point=True) == BRANCH_POINT


def test_classify():
    """Test branch classification prefers bottom branches."""
    top = spur(BranchPosition.TOP, name="North")
    bottom = spur(BranchPosition.BOTTOM, name="South")

    assert classify(RouteDefinition(main_line=("A",))) == NoBranch()
    assert classify(RouteDefinition(branches=(top,))) == TopBranch(top)
    assert classify(RouteDefinition(branches=(top, bottom))) == BottomBranch(bottom)


def test_classify_warns_on_several_branches(caplog):
    """Test lines with more than one branch log a warning."""
    branches = (spur(name="One"), spur(name="Two"))
    with caplog.at_level(logging.WARNING, logger="metrolog.tree"):
        kind = classify(RouteDefinition(main_line=("P",), branches=branches))

    assert kind == BottomBranch(branches[0])
    assert "2 branches" in caplog.text


def test_no_branch_tags_and_sections():
    """Test a plain line is one segment split into borough runs."""
    main = [make_station("A"), make_station("B"), make_station("C", BK), make_station("D")]

    sections = build_tree(main, {}, RouteDefinition(main_line=("A", "B", "C", "D")))

    assert [s.borough for s in sections] == [M, BK, M]
    assert [[e.station.name for e in s.entries] for s in sections] == [["A", "B"], ["C"], ["D"]]
    assert [e.position for e in tree_entries(sections)] == [FIRST, MIDDLE, MIDDLE, LAST]
    assert not any(e.is_branch for e in tree_entries(sections))
    assert all(s.label is None for s in sections)


def test_single_station_line():
    sections = build_tree([make_station("Only")], {}, RouteDefinition(main_line=("Only",)))
    assert [e.position for e in tree_entries(sections)] == [SINGLE]


def test_empty_line():
    assert build_tree([], {}, RouteDefinition()) == []


def test_bottom_branch():
    """Test the trunk ends at the branch point, then continuation, then branch."""
    main = [make_station(n) for n in ("M1", "M2", "P", "M4", "M5")]
    branch_stations = [make_station("S1", Q), make_station("S2", Q)]
    definition = RouteDefinition(main_line=("M1", "M2", "P", "M4", "M5"), branches=(spur(),))

    sections = build_tree(main, {"Spur": branch_stations}, definition)
    entries = tree_entries(sections)

    assert [(e.station.name, e.position) for e in entries] == [
        ("M1", FIRST), ("M2", MIDDLE), ("P", BRANCH_POINT),
        ("M4", FIRST), ("M5", LAST),
        ("S1", FIRST), ("S2", LAST),
    ]
    assert [e.alongside_trunk for e in entries] == [False, False, False, True, True, False, False]
    assert [e.is_branch for e in entries] == [False] * 5 + [True] * 2
    assert {e.branch_name for e in entries if e.is_branch} == {"Spur"}

    assert len(sections) == 3
    assert sections[2].label == "Spur"
    assert sections[2].is_branch
    assert sections[2].borough == Q


def test_bottom_branch_labels_only_first_branch_section():
    """Test a branch crossing boroughs is labelled once."""
    main = [make_station("M1"), make_station("P")]
    branch_stations = [make_station("S1", BK), make_station("S2", Q)]
    definition = RouteDefinition(main_line=("M1", "P"), branches=(spur(),))

    sections = build_tree(main, {"Spur": branch_stations}, definition)

    assert [s.label for s in sections] == [None, "Spur", None]
    assert [s.is_branch for s in sections] == [False, True, True]
    assert tree_entries(sections)[-1].position == LAST


def test_bottom_branch_at_terminal():
    """Test a branch point at the end of the main line leaves no continuation."""
    main = [make_station("M1"), make_station("P")]
    definition = RouteDefinition(main_line=("M1", "P"), branches=(spur(),))

    entries = tree_entries(build_tree(main, {"Spur": [make_station("S1")]}, definition))

    assert [(e.station.name, e.position) for e in entries] == [
        ("M1", FIRST), ("P", BRANCH_POINT), ("S1", SINGLE),
    ]
    assert not any(e.alongside_trunk for e in entries)


def test_bottom_branch_point_missing():
    """Test a branch point absent from the main line keeps ordinary main line tags."""
    main = [make_station("M1"), make_station("M2")]
    definition = RouteDefinition(main_line=("M1", "M2"), branches=(spur(branch_point="Elsewhere"),))

    entries = tree_entries(build_tree(main, {"Spur": [make_station("S1"), make_station("S2")]}, definition))

    assert [(e.station.name, e.position) for e in entries] == [
        ("M1", FIRST), ("M2", LAST), ("S1", FIRST), ("S2", LAST),
    ]
    assert BRANCH_POINT not in [e.position for e in entries]


def test_branch_point_only_in_unplaced_tail():
    """Test a branch point record outside the main line does not split the tail."""
    definition = RouteDefinition(main_line=("M1", "M2"), branches=(spur(),))
    stations = [make_station(n) for n in ("M1", "M2", "P", "S1", "Q")]

    resolved = resolve_route("X", stations, definition)
    assert [s.name for s in resolved.unplaced] == ["P", "Q"]

    sections = build_tree(resolved.main + resolved.unplaced, resolved.branch_stations(), definition)
    entries = tree_entries(sections)

    assert [(e.station.name, e.position) for e in entries] == [
        ("M1", FIRST), ("M2", MIDDLE), ("P", MIDDLE), ("Q", LAST),
        ("S1", SINGLE),
    ]
    assert not any(e.alongside_trunk for e in entries)
    assert [s.is_branch for s in sections] == [False, True]


def test_bottom_branch_without_resolved_stations():
    """Test a branch with no station records adds no sections."""
    main = [make_station("M1"), make_station("P"), make_station("M3")]
    definition = RouteDefinition(main_line=("M1", "P", "M3"), branches=(spur(),))

    sections = build_tree(main, {}, definition)

    assert not any(s.is_branch for s in sections)
    assert [e.position for e in tree_entries(sections)] == [FIRST, BRANCH_POINT, SINGLE]


def test_top_branch():
    """Test a top branch is drawn first and the main line starts at the merge point."""
    main = [make_station(n) for n in ("P", "M2", "M3")]
    branch_stations = [make_station("S1", BK), make_station("S2", BK)]
    definition = RouteDefinition(main_line=("P", "M2", "M3"), branches=(spur(BranchPosition.TOP),))

    sections = build_tree(main, {"Spur": branch_stations}, definition)
    entries = tree_entries(sections)

    assert [(e.station.name, e.position) for e in entries] == [
        ("S1", FIRST), ("S2", LAST),
        ("P", BRANCH_POINT), ("M2", MIDDLE), ("M3", LAST),
    ]
    assert [e.is_branch for e in entries] == [True, True, False, False, False]
    assert sections[0].label == "Spur"
    assert sections[1].label is None


def test_bottom_branch_preferred_over_top():
    """Test more than one branch falls back to the first bottom branch."""
    top = spur(BranchPosition.TOP, name="North")
    bottom = spur(BranchPosition.BOTTOM, name="South")
    main = [make_station("M1"), make_station("P"), make_station("M3")]
    definition = RouteDefinition(main_line=("M1", "P", "M3"), branches=(top, bottom))

    sections = build_tree(main, {"North": [make_station("N1")], "South": [make_station("S1")]}, definition)
    names = [e.station.name for e in tree_entries(sections)]

    assert names == ["M1", "P", "M3", "S1"]


def test_build_is_idempotent(seed_stations):
    """Test two builds from the same input are identical."""
    assert build_line_tree("A", seed_stations) == build_line_tree("A", seed_stations)


def test_a_train_tree(seed_stations):
    """Test the A train tree around Rockaway Blvd."""
    tree = build_line_tree("a", seed_stations)
    entries = tree.entries
    names = [e.station.name for e in entries]

    assert tree.line == "A"
    assert tree.name == "A Train - Eighth Avenue"
    assert tree.total_count == 40
    assert len(entries) == 40

    split = names.index("Rockaway Blvd")
    assert entries[split].position == BRANCH_POINT
    assert entries[0].position == FIRST
    assert all(e.position == MIDDLE for e in entries[1:split])

    continuation = entries[split + 1:split + 4]
    assert [e.station.name for e in continuation] == ["104 St", "111 St", "Ozone Park-Lefferts Blvd"]
    assert all(e.alongside_trunk for e in continuation)
    assert [e.position for e in continuation] == [FIRST, MIDDLE, LAST]

    branch = entries[split + 4:]
    assert len(branch) == 10
    assert all(e.is_branch and e.branch_name == "Far Rockaway" for e in branch)
    assert branch[-1].position == LAST
    assert branch[-1].station.name == "Far Rockaway-Mott Av"

    labelled = [s for s in tree.sections if s.label]
    assert [s.label for s in labelled] == ["Far Rockaway"]
    assert tree.sections[0].borough == M


def test_a_train_trunk_keeps_route_order(seed_stations):
    """Test entries before the branch point follow the main line order."""
    from metrolog.routes import lookup

    tree = build_line_tree("A", seed_stations)
    names = [e.station.name for e in tree.entries]
    trunk = names[:names.index("Rockaway Blvd") + 1]
    declared = [n for n in lookup("A").stations_before_branch(lookup("A").branches[0]) if n in trunk]

    assert trunk == declared


def test_unplaced_stations_drawn_at_end(seed_stations):
    """Test stations missing from the route tables end the main line."""
    extra = Station(
        id="test_extra", name="Aardvark Av", lines=("SIR",),
        latitude=40.5, longitude=-74.2, borough=Borough.STATEN_ISLAND,
    )

    tree = build_line_tree("SIR", seed_stations + [extra])

    assert tree.entries[-1].station.id == "test_extra"
    assert tree.entries[-1].position == LAST
    assert [e.station.id for e in tree.entries].count("test_extra") == 1


def test_unknown_line_tree(seed_stations):
    tree = build_line_tree("ZZ", seed_stations)
    assert tree.sections == []
    assert tree.total_count == 0
    assert tree.progress == 0.0


def test_line_progress(seed_stations):
    """Test visited stations count toward the line's progress."""
    from dataclasses import replace

    stations = [replace(s, is_visited=True) if s.name == "Tottenville" else s for s in seed_stations]
    tree = build_line_tree("SIR", stations)

    assert tree.visited_count == 1
    assert tree.total_count == 21
    assert tree.progress == pytest.approx(1 / 21)


def test_other_lines_and_selection_target(seed_stations):
    """Test an entry in a complex reports the complex's lines and opens the complex."""
    complexes = build_complexes(seed_stations)
    tree = build_line_tree("A", seed_stations)
    entry = next(e for e in tree.entries if e.station.name == "59 St-Columbus Circle")
    complex = complexes["59 St-Columbus Circle"]

    assert entry.other_lines("A") == ["C", "B", "D"]
    assert entry.other_lines("A", complex) == ["1", "C", "B", "D"]
    assert entry.selection_target(complexes) is complex

    plain = next(e for e in tree.entries if e.station.name == "Rockaway Blvd")
    assert plain.selection_target(complexes) is plain.station
    assert plain.other_lines("A") == []
