from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..edit.grid import SINGLE_ITEM, GridEditModel


def build_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    title: str | None = None,
) -> Table:
    table = Table(title=title, header_style="bold", show_lines=True)
    for header in headers:
        table.add_column(header, justify="center")
    for row in rows:
        # Cells are plain text; never interpret them as markup.
        table.add_row(*(Text(value) for value in row))
    return table


def render_table(
    console: Console,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    title: str | None = None,
) -> None:
    console.print(build_table(headers, rows, title=title))


def render_grid(console: Console, model: GridEditModel) -> None:
    table = Table(title="Grid items", header_style="bold")
    table.add_column("Item", justify="right")
    table.add_column("Text")
    for target in model.targets():
        label = "single" if target == SINGLE_ITEM else str(target)
        table.add_row(label, Text(model.text_for(target)))
    console.print(table)
