"""Ordered route definitions for each subway line, with branches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from . import route_data
from .lines import normalize_line


class BranchPosition(str, Enum):
    """Where a branch is drawn relative to the main line."""
    TOP = "top"        # merges into the main line, drawn before it
    BOTTOM = "bottom"  # splits from the main line, drawn after it


@dataclass(frozen=True)
class Branch:
    """A branch of a subway line with ordered station names."""
    name: str
    stations: tuple[str, ...]
    position: BranchPosition
    branch_point: str  # Station where the branch connects to the main line


@dataclass(frozen=True)
class RouteDefinition:
    """Route for a line: the main line plus any branches."""
    main_line: tuple[str, ...] = ()
    branches: tuple[Branch, ...] = field(default_factory=tuple)

    @property
    def top_branches(self) -> list[Branch]:
        return [b for b in self.branches if b.position == BranchPosition.TOP]

    @property
    def bottom_branches(self) -> list[Branch]:
        return [b for b in self.branches if b.position == BranchPosition.BOTTOM]

    def stations_before_branch(self, branch: Branch) -> list[str]:
        """Main line stations up to and including the branch point.

        The whole main line if the branch point is not on it.
        """
        if branch.branch_point not in self.main_line:
            return list(self.main_line)
        index = self.main_line.index(branch.branch_point)
        return list(self.main_line[:index + 1])

    def stations_after_branch(self, branch: Branch) -> list[str]:
        """Main line stations after the branch point, empty if it is not on the line."""
        if branch.branch_point not in self.main_line:
            return []
        index = self.main_line.index(branch.branch_point)
        return list(self.main_line[index + 1:])

    @property
    def all_stations(self) -> list[str]:
        """Main line followed by every branch, in walk order."""
        names = list(self.main_line)
        for branch in self.branches:
            names.extend(branch.stations)
        return names


def _route(main_line: list[str], *branches: Branch) -> RouteDefinition:
    return RouteDefinition(main_line=tuple(main_line), branches=tuple(branches))


ROUTES: dict[str, RouteDefinition] = {
    # IRT Broadway-Seventh Avenue Line
    "1": _route(route_data.LINE_1_STATIONS),
    "2": _route(route_data.LINE_2_STATIONS),
    "3": _route(route_data.LINE_3_STATIONS),
    # IRT Lexington Avenue Line
    "4": _route(route_data.LINE_4_STATIONS),
    "5": _route(route_data.LINE_5_STATIONS),
    "6": _route(route_data.LINE_6_STATIONS),
    # IRT Flushing Line
    "7": _route(route_data.LINE_7_STATIONS),
    # IND Eighth Avenue Line
    "A": _route(
        route_data.LINE_A_MAIN_STATIONS,
        Branch(
            name="Far Rockaway",
            stations=tuple(route_data.LINE_A_FAR_ROCKAWAY_BRANCH),
            position=BranchPosition.BOTTOM,
            branch_point="Rockaway Blvd",
        ),
    ),
    "C": _route(route_data.LINE_C_STATIONS),
    "E": _route(route_data.LINE_E_STATIONS),
    # IND Sixth Avenue Line
    "B": _route(route_data.LINE_B_STATIONS),
    "D": _route(route_data.LINE_D_STATIONS),
    "F": _route(route_data.LINE_F_STATIONS),
    "M": _route(route_data.LINE_M_STATIONS),
    # IND Crosstown Line
    "G": _route(route_data.LINE_G_STATIONS),
    # BMT Broadway Line
    "N": _route(route_data.LINE_N_STATIONS),
    "Q": _route(route_data.LINE_Q_STATIONS),
    "R": _route(route_data.LINE_R_STATIONS),
    "W": _route(route_data.LINE_W_STATIONS),
    # BMT Nassau Street Line
    "J": _route(route_data.LINE_J_STATIONS),
    "Z": _route(route_data.LINE_Z_STATIONS),
    # BMT Canarsie Line
    "L": _route(route_data.LINE_L_STATIONS),
    # Shuttles
    "GS": _route(route_data.LINE_GS_STATIONS),
    "FS": _route(route_data.LINE_FS_STATIONS),
    "RS": _route(route_data.LINE_RS_STATIONS),
    # Staten Island Railway
    "SIR": _route(route_data.LINE_SIR_STATIONS),
}

EMPTY_ROUTE = RouteDefinition()


def lookup(line: str) -> RouteDefinition:
    """Route definition for a line. Unknown lines get an empty route."""
    return ROUTES.get(normalize_line(line), EMPTY_ROUTE)
