#!/usr/bin/env python3
from __future__ import annotations

import os

from beetables.demo_data import LEAGUE_HEADERS, league_rows
from beetables.ui.style import TableStyle
from beetables.ui.table_textual import run_table_demo


def main() -> int:
    variant = "inline" if os.environ.get("BEETABLES_VARIANT", "").strip() == "inline" else "dialog"
    edited = run_table_demo(
        LEAGUE_HEADERS,
        league_rows(),
        variant=variant,
        style=TableStyle(column_to_increase_width=0),
    )
    for row in edited:
        print(" | ".join(row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
