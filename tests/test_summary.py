from __future__ import annotations

from rich.console import Console

from beetables.demo_data import LEAGUE_HEADERS, league_rows
from beetables.edit.grid import GridEditModel
from beetables.ui.summary import build_table, render_grid, render_table


def test_build_table_has_one_row_per_data_row() -> None:
    table = build_table(LEAGUE_HEADERS, league_rows(), title="League table")
    assert len(table.columns) == len(LEAGUE_HEADERS)
    assert table.row_count == len(league_rows())


def test_render_table_prints_cells_verbatim() -> None:
    console = Console(record=True, width=100)
    render_table(console, ("Team", "Points"), [["[bold]Man Utd", "95"]])
    text = console.export_text()
    assert "[bold]Man Utd" in text
    assert "95" in text


def test_render_grid_lists_all_items() -> None:
    console = Console(record=True, width=80)
    model = GridEditModel()
    model.start_edit(2)
    model.change_text(2, "edited")
    render_grid(console, model)
    text = console.export_text()
    assert "edited" in text
    assert "Single item" in text
    assert "Item is 15" in text
