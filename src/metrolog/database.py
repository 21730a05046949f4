"""SQLite database for station records and visited state."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, func, Column, Integer, String, Float, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import sessionmaker, declarative_base, relationship

from .config import DB_PATH
from .stations import Borough, Station, StationComplex, build_stations
from .station_data import COMPLEXES_DATA

logger = logging.getLogger(__name__)

Base = declarative_base()


class ComplexRecord(Base):
    """Station complexes table."""
    __tablename__ = "station_complexes"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, unique=True)
    borough = Column(String(20), nullable=False)

    stations = relationship("StationRecord", back_populates="complex")


class StationRecord(Base):
    """Stations table. Lines are stored comma-joined, e.g. "A,C,E"."""
    __tablename__ = "stations"

    id = Column(Integer, primary_key=True)
    key = Column(String(100), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    lines = Column(String(100), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    borough = Column(String(20), nullable=False)
    is_visited = Column(Boolean, nullable=False, default=False)
    visited_date = Column(DateTime, nullable=True)
    complex_id = Column(Integer, ForeignKey("station_complexes.id", ondelete="SET NULL"), nullable=True)

    complex = relationship("ComplexRecord", back_populates="stations")

    def to_station(self) -> Station:
        return Station(
            id=self.key,
            name=self.name,
            lines=tuple(self.lines.split(",")) if self.lines else (),
            latitude=self.latitude,
            longitude=self.longitude,
            borough=Borough.parse(self.borough),
            complex_name=self.complex.name if self.complex else None,
            is_visited=self.is_visited,
            visited_date=self.visited_date,
        )


class Database:
    """Database manager for station records."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path or DB_PATH
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{self.db_path}")
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

    def seed_if_needed(self) -> int:
        """Insert the seed stations and complexes if the station table is empty.

        Returns the number of stations inserted.
        """
        session = self.Session()
        try:
            existing = session.query(func.count(StationRecord.id)).scalar()
            if existing:
                return 0

            complexes = {}
            for name, borough in COMPLEXES_DATA:
                record = ComplexRecord(name=name, borough=borough)
                session.add(record)
                complexes[name] = record

            stations = build_stations()
            for station in stations:
                session.add(StationRecord(
                    key=station.id,
                    name=station.name,
                    lines=",".join(station.lines),
                    latitude=station.latitude,
                    longitude=station.longitude,
                    borough=station.borough.value,
                    complex=complexes.get(station.complex_name),
                ))

            session.commit()
            logger.info("Seeded %d stations and %d complexes", len(stations), len(complexes))
            return len(stations)
        finally:
            session.close()

    def get_stations(self, line: Optional[str] = None) -> list[Station]:
        """Get station snapshots in insertion order, optionally for one line."""
        session = self.Session()
        try:
            records = session.query(StationRecord).order_by(StationRecord.id).all()
            stations = [r.to_station() for r in records]
        finally:
            session.close()

        if line:
            stations = [s for s in stations if s.serves(line)]
        return stations

    def get_station(self, station_id: str) -> Optional[Station]:
        """Get a station snapshot by id."""
        session = self.Session()
        try:
            record = session.query(StationRecord).filter_by(key=station_id).first()
            return record.to_station() if record else None
        finally:
            session.close()

    def get_complexes(self) -> dict[str, StationComplex]:
        """Get complexes that have stations, keyed by name."""
        session = self.Session()
        try:
            records = session.query(ComplexRecord).order_by(ComplexRecord.id).all()
            complexes = {}
            for record in records:
                if not record.stations:
                    continue
                complexes[record.name] = StationComplex(
                    name=record.name,
                    borough=Borough.parse(record.borough),
                    stations=[s.to_station() for s in sorted(record.stations, key=lambda s: s.id)],
                )
            return complexes
        finally:
            session.close()

    def set_visited(self, station_id: str, visited: bool) -> Optional[Station]:
        """Mark a station visited or unvisited. Returns None for an unknown id."""
        session = self.Session()
        try:
            record = session.query(StationRecord).filter_by(key=station_id).first()
            if record is None:
                return None

            if record.is_visited != visited:
                record.is_visited = visited
                record.visited_date = datetime.now() if visited else None
                session.commit()
            return record.to_station()
        finally:
            session.close()

    def toggle_visited(self, station_id: str) -> Optional[Station]:
        """Flip a station's visited flag. Returns None for an unknown id."""
        session = self.Session()
        try:
            record = session.query(StationRecord).filter_by(key=station_id).first()
            if record is None:
                return None

            record.is_visited = not record.is_visited
            record.visited_date = datetime.now() if record.is_visited else None
            session.commit()
            return record.to_station()
        finally:
            session.close()


_db: Optional[Database] = None


def get_db() -> Database:
    """Shared database instance, created and seeded on first use."""
    global _db
    if _db is None:
        _db = Database()
        _db.seed_if_needed()
    return _db
