from __future__ import annotations

from typing import Final

LEAGUE_HEADERS: Final[tuple[str, ...]] = ("Team", "Played", "Won", "Points")

LEAGUE_ROWS: Final[tuple[tuple[str, ...], ...]] = (
    ("Man Utd", "26", "7", "95"),
    ("Arsenal", "26", "18", "58"),
    ("Liverpool", "26", "17", "57"),
    ("Man City", "26", "16", "56"),
    ("Aston Villa", "26", "15", "49"),
    ("Tottenham", "26", "14", "47"),
)


def league_rows() -> list[list[str]]:
    return [list(row) for row in LEAGUE_ROWS]
