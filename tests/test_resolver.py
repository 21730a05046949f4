"""Tests for resolving route names to station records."""

import pytest
from metrolog.resolver import resolve, resolve_route, squared_distance
from metrolog.routes import Branch, BranchPosition, RouteDefinition, lookup
from metrolog.stations import Borough, Station, build_stations


def make_station(id, name, lat=0.0, lon=0.0, lines=("X",), borough=Borough.MANHATTAN):
    return Station(id=id, name=name, lines=tuple(lines), latitude=lat, longitude=lon, borough=borough)


@pytest.fixture(scope="module")
def seed_stations():
    return build_stations()


def test_nearest_candidate_wins():
    """Test a repeated name resolves to the record nearest the previous stop."""
    route = RouteDefinition(main_line=("A", "B"))
    a = make_station("a", "A", 0, 1)
    b2 = make_station("b2", "B", 10, 10)
    b1 = make_station("b1", "B", 0, 0)

    result = resolve("X", [b2, a, b1], route)

    assert [s.id for s in result] == ["a", "b1", "b2"]


def test_first_candidate_without_previous_selection():
    """Test the first unconsumed candidate is taken when nothing was selected yet."""
    route = RouteDefinition(main_line=("B",))
    b1 = make_station("b1", "B", 10, 10)
    b2 = make_station("b2", "B", 0, 0)

    resolved = resolve_route("X", [b1, b2], route)

    assert [s.id for s in resolved.main] == ["b1"]
    assert [s.id for s in resolved.unplaced] == ["b2"]


def test_distance_tie_uses_input_order():
    """Test equally distant candidates break the tie by input order."""
    route = RouteDefinition(main_line=("A", "B"))
    a = make_station("a", "A", 0, 0)
    b_first = make_station("b_first", "B", 1, 0)
    b_second = make_station("b_second", "B", -1, 0)

    resolved = resolve_route("X", [a, b_first, b_second], route)

    assert [s.id for s in resolved.main] == ["a", "b_first"]


def test_previous_is_last_selected_not_last_named():
    """Test omitted names do not move the reference point."""
    route = RouteDefinition(main_line=("A", "Missing", "B"))
    a = make_station("a", "A", 0, 0)
    far = make_station("far", "B", 5, 5)
    near = make_station("near", "B", 0.1, 0.1)

    result = resolve("X", [far, near, a], route)

    assert [s.id for s in result] == ["a", "near", "far"]


def test_unmatched_names_are_omitted():
    """Test route names without records are skipped silently."""
    route = RouteDefinition(main_line=("A", "Ghost", "B"))
    stations = [make_station("a", "A"), make_station("b", "B")]

    assert [s.name for s in resolve("X", stations, route)] == ["A", "B"]


def test_repeated_name_binds_two_records():
    """Test a name listed twice consumes two distinct records when available."""
    route = RouteDefinition(main_line=("A", "Loop", "B", "Loop"))
    stations = [
        make_station("a", "A", 0, 0),
        make_station("loop_south", "Loop", 0, 1),
        make_station("b", "B", 0, 9),
        make_station("loop_north", "Loop", 0, 10),
    ]

    result = resolve("X", stations, route)

    assert [s.id for s in result] == ["a", "loop_south", "b", "loop_north"]


def test_repeated_name_with_one_record_is_dropped():
    """Test the second occurrence is dropped when only one record exists."""
    route = RouteDefinition(main_line=("A", "Loop", "B", "Loop"))
    stations = [make_station("a", "A"), make_station("loop", "Loop"), make_station("b", "B")]

    result = resolve("X", stations, route)

    assert [s.id for s in result] == ["a", "loop", "b"]


def test_consumption_shared_with_branches():
    """Test the branch walk cannot reuse a record the main line took."""
    branch = Branch(name="Spur", stations=("P", "S1"), position=BranchPosition.BOTTOM, branch_point="P")
    route = RouteDefinition(main_line=("M1", "P"), branches=(branch,))
    stations = [make_station("m1", "M1"), make_station("p", "P"), make_station("s1", "S1")]

    resolved = resolve_route("X", stations, route)

    assert [s.id for s in resolved.main] == ["m1", "p"]
    branch_def, branch_stations = resolved.branches[0]
    assert branch_def is branch
    assert [s.id for s in branch_stations] == ["s1"]
    assert resolved.branch_stations() == {"Spur": branch_stations}


def test_fallback_tail_alphabetical():
    """Test unclaimed stations of the line come last, sorted by name."""
    route = RouteDefinition(main_line=("B", "A"))
    stations = [
        make_station("zeta", "Zeta"),
        make_station("b", "B"),
        make_station("alpha", "Alpha"),
        make_station("a", "A"),
        make_station("other_line", "Aardvark", lines=("Y",)),
    ]

    result = resolve("X", stations, route)

    assert [s.id for s in result] == ["b", "a", "alpha", "zeta"]


def test_only_line_members_considered():
    """Test records that do not serve the line are ignored."""
    route = RouteDefinition(main_line=("A",))
    stations = [make_station("a_y", "A", lines=("Y",)), make_station("a_x", "A", lines=("X", "Y"))]

    assert [s.id for s in resolve("x", stations, route)] == ["a_x"]


def test_unknown_line_returns_only_fallback():
    """Test an unknown line code resolves to the alphabetical tail of its records."""
    stations = [
        make_station("b", "Beta", lines=("ZZ",)),
        make_station("a", "Alpha", lines=("ZZ",)),
        make_station("c", "Gamma", lines=("A",)),
    ]

    resolved = resolve_route("ZZ", stations)

    assert resolved.main == []
    assert resolved.branches == []
    assert [s.id for s in resolved.unplaced] == ["a", "b"]


def test_unknown_line_without_records():
    assert resolve("ZZ", build_stations()) == []


def test_squared_distance():
    a = make_station("a", "A", 1, 2)
    b = make_station("b", "B", 4, 6)
    assert squared_distance(a, b) == 25


def test_resolution_never_repeats_a_station(seed_stations):
    """Test no station id appears twice for any line."""
    for line in ["1", "2", "A", "B", "F", "R", "SIR", "GS"]:
        ids = [s.id for s in resolve(line, seed_stations)]
        assert len(ids) == len(set(ids)), line


def test_resolution_covers_every_line_station(seed_stations):
    """Test every station serving a line appears exactly once."""
    for line in ["A", "B", "R", "7"]:
        expected = {s.id for s in seed_stations if line in s.lines}
        ids = [s.id for s in resolve(line, seed_stations)]
        assert set(ids) == expected, line
        assert len(ids) == len(expected)


def test_sir_round_trip(seed_stations):
    """Test a line with unique names and full coverage resolves in declared order."""
    route = lookup("SIR")
    result = resolve("SIR", seed_stations)

    assert [s.name for s in result] == list(route.main_line)


def test_a_train_resolves_branch(seed_stations):
    """Test the A train splits into main line and Far Rockaway branch."""
    resolved = resolve_route("A", seed_stations)

    assert resolved.main[0].name == "Inwood-207 St"
    assert resolved.main[-1].name == "Ozone Park-Lefferts Blvd"
    branch, branch_stations = resolved.branches[0]
    assert branch.name == "Far Rockaway"
    assert [s.name for s in branch_stations] == list(branch.stations)
    assert resolved.unplaced == []


def test_b_train_seventh_avenue_disambiguation(seed_stations):
    """Test the B train's two "7 Av" stops bind to the right boroughs."""
    result = resolve("B", seed_stations)
    names = [s.name for s in result]

    first = names.index("7 Av")
    second = names.index("7 Av", first + 1)
    assert result[first - 1].name == "59 St-Columbus Circle"
    assert result[first].borough == Borough.MANHATTAN
    assert result[second - 1].name == "Atlantic Av-Barclays Ctr"
    assert result[second].borough == Borough.BROOKLYN


def test_r_train_36th_street_disambiguation(seed_stations):
    """Test the R train's two "36 St" stops bind to Queens then Brooklyn."""
    result = resolve("R", seed_stations)
    matches = [s for s in result if s.name == "36 St"]

    assert [s.borough for s in matches] == [Borough.QUEENS, Borough.BROOKLYN]


def test_resolve_does_not_mutate_input(seed_stations):
    """Test resolving twice gives the same order."""
    stations = list(seed_stations)
    first = resolve("A", stations)
    second = resolve("A", stations)

    assert [s.id for s in first] == [s.id for s in second]
    assert stations == seed_stations
