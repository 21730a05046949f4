"""NYC subway line catalogue: names and trunk ordering."""

from __future__ import annotations

# Lines ordered by trunk line (MTA standard grouping)
LINE_ORDER = [
    "1", "2", "3", "4", "5", "6", "7",
    "A", "C", "E", "B", "D", "F", "M",
    "G", "J", "Z", "L",
    "N", "Q", "R", "W",
    "GS", "FS", "RS", "SIR",
]

# Express variants share the badge of their base line
LINE_ALIASES = {
    "6X": "6",
    "7X": "7",
    "FX": "F",
}

TRUNK_NAMES = {
    "1": "Broadway-Seventh Avenue",
    "2": "Broadway-Seventh Avenue",
    "3": "Broadway-Seventh Avenue",
    "4": "Lexington Avenue",
    "5": "Lexington Avenue",
    "6": "Lexington Avenue",
    "7": "Flushing",
    "A": "Eighth Avenue",
    "C": "Eighth Avenue",
    "E": "Eighth Avenue",
    "B": "Sixth Avenue",
    "D": "Sixth Avenue",
    "F": "Sixth Avenue",
    "M": "Sixth Avenue",
    "G": "Crosstown",
    "J": "Nassau Street",
    "Z": "Nassau Street",
    "L": "Canarsie",
    "N": "Broadway",
    "Q": "Broadway",
    "R": "Broadway",
    "W": "Broadway",
}

SHUTTLE_NAMES = {
    "GS": "42 St Shuttle",
    "FS": "Franklin Av Shuttle",
    "RS": "Rockaway Park Shuttle",
    "SIR": "Staten Island Railway",
}

OFFICIAL_NAMES = {
    "1": "Broadway–7 Avenue Local",
    "2": "7 Avenue Express",
    "3": "7 Avenue Express",
    "4": "Lexington Avenue Express",
    "5": "Lexington Avenue Express",
    "6": "Lexington Avenue Local",
    "7": "Flushing Local",
    "A": "8 Avenue Express",
    "B": "6 Avenue Express",
    "C": "8 Avenue Local",
    "D": "6 Avenue Express",
    "E": "8 Avenue Local",
    "F": "Queens Blvd Express/6 Av Local",
    "G": "Brooklyn–Queens Crosstown",
    "J": "Nassau Street Local",
    "L": "14 Street–Canarsie Local",
    "M": "Queens Blvd/6 Av/Myrtle Av Local",
    "N": "Broadway Express",
    "Q": "Broadway Express",
    "R": "Broadway Local",
    "W": "Broadway Local",
    "Z": "Nassau Street Express",
    "GS": "42 Street Shuttle",
    "FS": "Franklin Avenue Shuttle",
    "RS": "Rockaway Park Shuttle",
    "SIR": "Staten Island Railway",
}


def normalize_line(code: str) -> str:
    """Uppercase and strip a line code."""
    return code.strip().upper()


def is_known_line(code: str) -> bool:
    """Check whether a code names a line in the catalogue."""
    code = normalize_line(code)
    return code in LINE_ORDER or code in LINE_ALIASES


def line_name(code: str) -> str:
    """Long display name, e.g. "A Train - Eighth Avenue"."""
    code = normalize_line(code)
    if code in SHUTTLE_NAMES:
        return SHUTTLE_NAMES[code]
    if code in TRUNK_NAMES:
        return f"{code} Train - {TRUNK_NAMES[code]}"
    return f"{code} Train"


def official_name(code: str) -> str:
    """Official MTA service name, or an empty string for unknown lines."""
    return OFFICIAL_NAMES.get(normalize_line(code), "")


def sorted_by_trunk(lines: list[str]) -> list[str]:
    """Sort line codes by trunk grouping. Unknown codes keep their order at the end."""
    def trunk_index(line: str) -> int:
        base = LINE_ALIASES.get(line, line)
        return LINE_ORDER.index(base) if base in LINE_ORDER else len(LINE_ORDER)

    return sorted(lines, key=trunk_index)
