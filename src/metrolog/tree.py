"""Branch-aware route tree for drawing a line diagram.

The builder turns resolved station records into borough sections of
entries, each tagged with its position in the drawn line so a renderer
knows which connector to draw (half line down, full line, half line up,
none). Branching lines are split into a trunk, the main line
continuation and the branch itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .lines import line_name, normalize_line, official_name, sorted_by_trunk
from .resolver import resolve_route
from .routes import Branch, RouteDefinition, lookup
from .stations import Borough, Station, StationComplex

logger = logging.getLogger(__name__)


class StationPosition(str, Enum):
    """Position of a station in its segment of the route tree."""
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    BRANCH_POINT = "branch_point"  # where a branch connects
    SINGLE = "single"              # only station in its segment


@dataclass(frozen=True)
class NoBranch:
    pass


@dataclass(frozen=True)
class TopBranch:
    branch: Branch


@dataclass(frozen=True)
class BottomBranch:
    branch: Branch


BranchKind = Union[NoBranch, TopBranch, BottomBranch]


def classify(definition: RouteDefinition) -> BranchKind:
    """Pick the branch to draw. Bottom branches win over top ones; only one is drawn."""
    if len(definition.branches) > 1:
        logger.warning(
            "Route has %d branches, drawing only one: %s",
            len(definition.branches), ", ".join(b.name for b in definition.branches),
        )
    if definition.bottom_branches:
        return BottomBranch(definition.bottom_branches[0])
    if definition.top_branches:
        return TopBranch(definition.top_branches[0])
    return NoBranch()


def position_for(index: int, length: int, is_branch_point: bool = False) -> StationPosition:
    if is_branch_point:
        return StationPosition.BRANCH_POINT
    if length == 1:
        return StationPosition.SINGLE
    if index == 0:
        return StationPosition.FIRST
    if index == length - 1:
        return StationPosition.LAST
    return StationPosition.MIDDLE


@dataclass(frozen=True)
class RouteEntry:
    """A station placed in the route tree."""
    station: Station
    position: StationPosition
    is_branch: bool = False
    branch_name: Optional[str] = None
    alongside_trunk: bool = False  # main line continues beside a branch

    @property
    def borough(self) -> Borough:
        return self.station.borough

    def other_lines(self, current_line: str, complex: Optional[StationComplex] = None) -> list[str]:
        """Connecting lines, from the whole complex when the station belongs to one."""
        current_line = normalize_line(current_line)
        lines = complex.all_lines if complex is not None else list(self.station.lines)
        return sorted_by_trunk([line for line in lines if line != current_line])

    def selection_target(self, complexes: dict[str, StationComplex]) -> Union[Station, StationComplex]:
        """What a tap on this entry opens: the owning complex, or the station itself."""
        if self.station.complex_name in complexes:
            return complexes[self.station.complex_name]
        return self.station


@dataclass
class RouteSection:
    """A contiguous run of entries in one borough."""
    borough: Borough
    entries: list[RouteEntry] = field(default_factory=list)
    label: Optional[str] = None  # branch name on the first section of a branch
    is_branch: bool = False


def _segment(
    stations: list[Station],
    *,
    branch_point_index: Optional[int] = None,
    branch_name: Optional[str] = None,
    alongside_trunk: bool = False,
) -> list[RouteEntry]:
    length = len(stations)
    return [
        RouteEntry(
            station=station,
            position=position_for(i, length, i == branch_point_index),
            is_branch=branch_name is not None,
            branch_name=branch_name,
            alongside_trunk=alongside_trunk,
        )
        for i, station in enumerate(stations)
    ]


def _sections(entries: list[RouteEntry], label: Optional[str] = None) -> list[RouteSection]:
    """Split entries into borough runs, keeping route order."""
    sections: list[RouteSection] = []
    for entry in entries:
        if not sections or sections[-1].borough != entry.borough:
            sections.append(RouteSection(borough=entry.borough, is_branch=entry.is_branch))
        sections[-1].entries.append(entry)
    if sections and label:
        sections[0].label = label
    return sections


def build_tree(
    main: list[Station],
    branches: dict[str, list[Station]],
    definition: RouteDefinition,
) -> list[RouteSection]:
    """Build the sectioned route tree.

    Args:
        main: Resolved main line stations, in route order
        branches: Resolved stations per branch name
        definition: The line's route definition

    Returns:
        Borough sections in drawing order
    """
    kind = classify(definition)

    if isinstance(kind, BottomBranch):
        branch = kind.branch
        split = None
        # main may end with the unplaced tail, which must never hold the split
        if branch.branch_point in definition.main_line:
            split = next((i for i, s in enumerate(main) if s.name == branch.branch_point), None)
        if split is None:
            logger.debug("Branch point %r not on main line", branch.branch_point)
            trunk = _segment(main)
            continuation = []
        else:
            trunk = _segment(main[:split + 1], branch_point_index=split)
            continuation = _segment(main[split + 1:], alongside_trunk=True)
        branch_entries = _segment(branches.get(branch.name, []), branch_name=branch.name)
        return _sections(trunk) + _sections(continuation) + _sections(branch_entries, label=branch.name)

    if isinstance(kind, TopBranch):
        branch = kind.branch
        branch_entries = _segment(branches.get(branch.name, []), branch_name=branch.name)
        # The main line starts where the branch merges in
        trunk = _segment(main, branch_point_index=0)
        return _sections(branch_entries, label=branch.name) + _sections(trunk)

    return _sections(_segment(main))


def tree_entries(sections: list[RouteSection]) -> list[RouteEntry]:
    """Flatten sections into entries in drawing order."""
    return [entry for section in sections for entry in section.entries]


@dataclass
class LineTree:
    """Everything a line detail view shows."""
    line: str
    name: str
    official_name: str
    sections: list[RouteSection]
    visited_count: int
    total_count: int

    @property
    def progress(self) -> float:
        if not self.total_count:
            return 0.0
        return self.visited_count / self.total_count

    @property
    def entries(self) -> list[RouteEntry]:
        return tree_entries(self.sections)


def build_line_tree(line: str, stations: list[Station]) -> LineTree:
    """Resolve and build the route tree for a line.

    Stations no route name claimed are drawn at the end of the main line.
    """
    line = normalize_line(line)
    definition = lookup(line)
    resolved = resolve_route(line, stations)

    sections = build_tree(
        resolved.main + resolved.unplaced,
        resolved.branch_stations(),
        definition,
    )
    line_stations = resolved.stations
    return LineTree(
        line=line,
        name=line_name(line),
        official_name=official_name(line),
        sections=sections,
        visited_count=sum(1 for s in line_stations if s.is_visited),
        total_count=len(line_stations),
    )
