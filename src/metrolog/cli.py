#!/usr/bin/env python3
"""Command-line interface for MetroLog."""

from typing import Optional

from .config import configure_logging
from .database import get_db
from .lines import LINE_ORDER, line_name
from .stations import StationComplex
from .tree import LineTree, StationPosition, build_line_tree

POSITION_MARKS = {
    StationPosition.FIRST: "┬",
    StationPosition.MIDDLE: "│",
    StationPosition.BRANCH_POINT: "├",
    StationPosition.LAST: "┴",
    StationPosition.SINGLE: "─",
}


def print_banner():
    """Print the welcome banner."""
    print("""
╔═══════════════════════════════════════════════════════════╗
║              MetroLog NYC 🚇                              ║
║                                                           ║
║  Track every subway station you have visited.             ║
║                                                           ║
║  Commands:                                                ║
║    /lines         - Progress on every line                ║
║    /line <code>   - Show a line's route, e.g. /line A     ║
║    /visit <id>    - Toggle a station as visited           ║
║    /quit          - Exit the program                      ║
╚═══════════════════════════════════════════════════════════╝
""")


def render_tree(tree: LineTree, complexes: Optional[dict[str, StationComplex]] = None) -> str:
    """Draw a line tree as text, one station per row."""
    complexes = complexes or {}
    rows = [f"{tree.name} ({tree.visited_count}/{tree.total_count} visited)"]
    if not tree.sections:
        rows.append("  (no stations)")
        return "\n".join(rows)

    for section in tree.sections:
        header = f"{section.label} Branch - {section.borough.value}" if section.label else section.borough.value
        rows.append(f"\n[{header}]")
        for entry in section.entries:
            prefix = "│ " if entry.alongside_trunk else ""
            if entry.is_branch:
                prefix += "  "
            node = "●" if entry.station.is_visited else "○"
            row = f"{prefix}{POSITION_MARKS[entry.position]} {node} {entry.station.name}"

            other_lines = entry.other_lines(tree.line, complexes.get(entry.station.complex_name))
            if other_lines:
                row += f"  ({' '.join(other_lines)})"
            rows.append(f"{row}  <{entry.station.id}>")
    return "\n".join(rows)


def render_lines(db) -> str:
    stations = db.get_stations()
    rows = []
    for line in LINE_ORDER:
        line_stations = [s for s in stations if line in s.lines]
        visited = sum(1 for s in line_stations if s.is_visited)
        rows.append(f"{line:>4}  {visited:>3}/{len(line_stations):<3} {line_name(line)}")
    return "\n".join(rows)


def handle_command(command: str, db) -> str:
    """Run one CLI command and return the text to print."""
    name, _, arg = command.partition(" ")
    name = name.lower()
    arg = arg.strip()

    if name == "/lines":
        return render_lines(db)

    if name == "/line":
        if not arg:
            return "Usage: /line <code>"
        tree = build_line_tree(arg, db.get_stations(arg))
        return render_tree(tree, db.get_complexes())

    if name == "/visit":
        if not arg:
            return "Usage: /visit <station id>"
        station = db.toggle_visited(arg)
        if station is None:
            return f"Station not found: {arg}"
        status = "visited" if station.is_visited else "not visited"
        return f"{station.name} ({station.lines_description}) marked {status}"

    return f"Unknown command: {name}"


def main():
    """Run the CLI."""
    configure_logging()
    print_banner()

    db = get_db()

    while True:
        try:
            user_input = input("\n> ").strip()

            if not user_input:
                continue

            if user_input.lower() in ["/quit", "/exit", "/q"]:
                print("\nGoodbye! Happy riding! 🚇")
                break

            print(handle_command(user_input, db))

        except KeyboardInterrupt:
            print("\n\nGoodbye! Happy riding! 🚇")
            break
        except Exception as e:
            print(f"\n[Error: {e}]")
            print("Please try again or type /quit to exit.")


if __name__ == "__main__":
    main()
