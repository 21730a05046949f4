"""Resolve a line's route names to concrete station records."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .lines import normalize_line
from .routes import Branch, RouteDefinition, lookup
from .stations import Station

logger = logging.getLogger(__name__)


@dataclass
class ResolvedRoute:
    """Station records for a line, split by the part of the route they resolved from."""
    line: str
    main: list[Station] = field(default_factory=list)
    branches: list[tuple[Branch, list[Station]]] = field(default_factory=list)
    unplaced: list[Station] = field(default_factory=list)  # on the line, not in the route tables

    @property
    def stations(self) -> list[Station]:
        """All records in walk order: main line, branches, then the unplaced tail."""
        result = list(self.main)
        for _, branch_stations in self.branches:
            result.extend(branch_stations)
        result.extend(self.unplaced)
        return result

    def branch_stations(self) -> dict[str, list[Station]]:
        return {branch.name: stations for branch, stations in self.branches}


def squared_distance(a: Station, b: Station) -> float:
    """Planar squared distance in degrees."""
    return (a.latitude - b.latitude) ** 2 + (a.longitude - b.longitude) ** 2


class _Walk:
    """Selection state for one resolution pass."""

    def __init__(self, by_name: dict[str, list[Station]]):
        self.by_name = by_name
        self.consumed: set[str] = set()
        self.previous: Optional[Station] = None

    def select(self, name: str) -> Optional[Station]:
        candidates = [s for s in self.by_name.get(name, []) if s.id not in self.consumed]
        if not candidates:
            return None

        if len(candidates) == 1 or self.previous is None:
            chosen = candidates[0]
        else:
            # min() keeps the first of equal distances, so ties go to input order
            previous = self.previous
            chosen = min(candidates, key=lambda s: squared_distance(s, previous))

        self.consumed.add(chosen.id)
        self.previous = chosen
        return chosen

    def walk(self, names: Iterable[str]) -> list[Station]:
        selected = []
        for name in names:
            station = self.select(name)
            if station is None:
                logger.debug("No station record left for %r", name)
                continue
            selected.append(station)
        return selected


def resolve_route(
    line: str,
    stations: Iterable[Station],
    definition: Optional[RouteDefinition] = None,
) -> ResolvedRoute:
    """Resolve a line's route definition against the available station records.

    Each route name takes one unconsumed record with that name. When a name
    has several candidates (e.g. "Canal St"), the one nearest the previously
    selected station wins. Records for the line that no route name claimed
    are returned sorted by name as the unplaced tail.

    The route definition defaults to the catalogue entry for the line.
    """
    line = normalize_line(line)
    if definition is None:
        definition = lookup(line)

    line_stations = [s for s in stations if line in s.lines]
    by_name: dict[str, list[Station]] = defaultdict(list)
    for station in line_stations:
        by_name[station.name].append(station)

    walk = _Walk(by_name)
    resolved = ResolvedRoute(line=line)
    resolved.main = walk.walk(definition.main_line)
    for branch in definition.branches:
        resolved.branches.append((branch, walk.walk(branch.stations)))

    resolved.unplaced = sorted(
        (s for s in line_stations if s.id not in walk.consumed),
        key=lambda s: s.name,
    )
    if resolved.unplaced:
        logger.debug(
            "%d station(s) on line %s missing from route tables: %s",
            len(resolved.unplaced), line, ", ".join(s.name for s in resolved.unplaced),
        )
    return resolved


def resolve(
    line: str,
    stations: Iterable[Station],
    definition: Optional[RouteDefinition] = None,
) -> list[Station]:
    """Ordered, deduplicated station records for a line."""
    return resolve_route(line, stations, definition).stations
