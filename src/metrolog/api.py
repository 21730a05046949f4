"""FastAPI web interface for MetroLog."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional

from .config import configure_logging
from .database import Database, get_db
from .lines import LINE_ORDER
from .routes import lookup
from .stations import Station, StationComplex
from .tree import RouteEntry, build_line_tree

app = FastAPI(
    title="MetroLog NYC",
    description="Track visited NYC subway stations line by line",
    version="0.1.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class StationOut(BaseModel):
    id: str
    name: str
    lines: list[str]
    latitude: float
    longitude: float
    borough: str
    complex_name: Optional[str] = None
    is_visited: bool
    visited_date: Optional[str] = None


class EntryOut(BaseModel):
    station: StationOut
    position: str
    is_branch: bool
    branch_name: Optional[str] = None
    alongside_trunk: bool
    other_lines: list[str]


class SectionOut(BaseModel):
    borough: str
    label: Optional[str] = None
    is_branch: bool
    entries: list[EntryOut]


class LineTreeOut(BaseModel):
    line: str
    name: str
    official_name: str
    visited_count: int
    total_count: int
    progress: float
    sections: list[SectionOut]


def _station_out(station: Station) -> StationOut:
    return StationOut(
        id=station.id,
        name=station.name,
        lines=list(station.lines),
        latitude=station.latitude,
        longitude=station.longitude,
        borough=station.borough.value,
        complex_name=station.complex_name,
        is_visited=station.is_visited,
        visited_date=station.visited_date.isoformat() if station.visited_date else None,
    )


def _entry_out(entry: RouteEntry, line: str, complexes: dict[str, StationComplex]) -> EntryOut:
    return EntryOut(
        station=_station_out(entry.station),
        position=entry.position.value,
        is_branch=entry.is_branch,
        branch_name=entry.branch_name,
        alongside_trunk=entry.alongside_trunk,
        other_lines=entry.other_lines(line, complexes.get(entry.station.complex_name)),
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "MetroLog NYC"}


@app.get("/lines")
async def list_lines(db: Database = Depends(get_db)):
    """All lines with visit progress."""
    stations = db.get_stations()
    lines = []
    for line in LINE_ORDER:
        line_stations = [s for s in stations if line in s.lines]
        lines.append({
            "line": line,
            "branches": [b.name for b in lookup(line).branches],
            "visited_count": sum(1 for s in line_stations if s.is_visited),
            "total_count": len(line_stations),
        })
    return {"count": len(lines), "lines": lines}


@app.get("/lines/{line}", response_model=LineTreeOut)
async def get_line_tree(line: str, db: Database = Depends(get_db)):
    """Route tree for a line. Unknown lines give an empty tree."""
    tree = build_line_tree(line, db.get_stations(line))
    complexes = db.get_complexes()

    return LineTreeOut(
        line=tree.line,
        name=tree.name,
        official_name=tree.official_name,
        visited_count=tree.visited_count,
        total_count=tree.total_count,
        progress=tree.progress,
        sections=[
            SectionOut(
                borough=section.borough.value,
                label=section.label,
                is_branch=section.is_branch,
                entries=[_entry_out(e, tree.line, complexes) for e in section.entries],
            )
            for section in tree.sections
        ],
    )


@app.get("/stations")
async def list_stations(line: Optional[str] = None, db: Database = Depends(get_db)):
    """List all stations, or those serving one line."""
    stations = db.get_stations(line)
    return {
        "count": len(stations),
        "stations": [_station_out(s) for s in stations],
    }


@app.post("/stations/{station_id}/toggle", response_model=StationOut)
async def toggle_station(station_id: str, db: Database = Depends(get_db)):
    """Toggle a station's visited flag."""
    station = db.toggle_visited(station_id)
    if station is None:
        raise HTTPException(status_code=404, detail=f"Station not found: {station_id}")
    return _station_out(station)


def run_server(host: str = "0.0.0.0", port: int = 8000):
    """Run the FastAPI server."""
    import uvicorn
    configure_logging()
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
