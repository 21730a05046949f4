"""NYC subway station records and station complexes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .lines import normalize_line
from .station_data import COMPLEXES_DATA, STATIONS_DATA


class Borough(str, Enum):
    MANHATTAN = "Manhattan"
    BROOKLYN = "Brooklyn"
    QUEENS = "Queens"
    BRONX = "Bronx"
    STATEN_ISLAND = "Staten Island"

    @classmethod
    def parse(cls, value: str) -> "Borough":
        """Parse a stored borough name, falling back to Manhattan."""
        try:
            return cls(value)
        except ValueError:
            return cls.MANHATTAN


@dataclass(frozen=True)
class Station:
    """A physical station record (one platform group serving some lines).

    Names are not unique: a transfer complex can have several records
    with the same name, one per set of platforms.
    """
    id: str
    name: str
    lines: tuple[str, ...]
    latitude: float
    longitude: float
    borough: Borough
    complex_name: Optional[str] = None
    is_visited: bool = False
    visited_date: Optional[datetime] = None

    def serves(self, line: str) -> bool:
        return normalize_line(line) in self.lines

    @property
    def lines_description(self) -> str:
        return " ".join(self.lines)


@dataclass
class StationComplex:
    """A group of station records sharing connections."""
    name: str
    borough: Borough
    stations: list[Station] = field(default_factory=list)

    @property
    def all_lines(self) -> list[str]:
        """All unique lines serving the complex."""
        return sorted({line for station in self.stations for line in station.lines})

    @property
    def lines_description(self) -> str:
        return " ".join(self.all_lines)

    @property
    def is_fully_visited(self) -> bool:
        return bool(self.stations) and all(s.is_visited for s in self.stations)

    @property
    def is_partially_visited(self) -> bool:
        return any(s.is_visited for s in self.stations)

    @property
    def visited_station_count(self) -> int:
        return sum(1 for s in self.stations if s.is_visited)


def station_id(name: str, lines: list[str]) -> str:
    """Stable id for a seed station, e.g. "canal_st_ace"."""
    slug = re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")
    return f"{slug}_{''.join(lines).lower()}"


def build_stations() -> list[Station]:
    """Build station records from the seed table, in seed order."""
    stations = []
    for name, lines, lat, lon, borough, complex_name in STATIONS_DATA:
        stations.append(Station(
            id=station_id(name, lines),
            name=name,
            lines=tuple(lines),
            latitude=lat,
            longitude=lon,
            borough=Borough(borough),
            complex_name=complex_name,
        ))
    return stations


def build_complexes(stations: list[Station]) -> dict[str, StationComplex]:
    """Group stations under the seed complexes. Complexes without stations are dropped."""
    complexes = {
        name: StationComplex(name=name, borough=Borough(borough))
        for name, borough in COMPLEXES_DATA
    }
    for station in stations:
        if station.complex_name in complexes:
            complexes[station.complex_name].stations.append(station)
    return {name: c for name, c in complexes.items() if c.stations}


# Seed snapshot, keyed by id
STATIONS: dict[str, Station] = {s.id: s for s in build_stations()}
