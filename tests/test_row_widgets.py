from __future__ import annotations

import asyncio

from textual.app import App, ComposeResult

from beetables.ui.dialog import EditCellDialog
from beetables.ui.table_textual import InlineEditableTableRow, _Cell, _TableRowBase, make_row

_ROW = ["Man Utd", "26", "7", "95"]


class _RowApp(App[None]):
    def __init__(self, row: _TableRowBase) -> None:
        super().__init__()
        self._row = row

    def compose(self) -> ComposeResult:
        yield self._row


def _mount_row(variant, changes) -> tuple[_RowApp, _TableRowBase]:  # noqa: ANN001
    def _record(row_index: int, column_index: int, value: str) -> None:
        changes(row_index, column_index, value)
        row.set_cell(column_index, value)

    row = make_row(variant, _ROW, 0, on_data_change=_record)
    return (_RowApp(row), row)


def _cell_text(row: _TableRowBase, column_index: int) -> str:
    return row.query_one(f"#cell-{column_index}", _Cell).cell_text


def test_dialog_row_commits_typed_value_on_enter(changes) -> None:
    app, row = _mount_row("dialog", changes)

    async def _scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.click("#cell-1")
            await pilot.pause()
            assert isinstance(app.screen, EditCellDialog)
            assert row.controller.draft_value == "26"

            await pilot.press("end", "backspace", "backspace", "2", "7", "enter")
            await pilot.pause()
            assert not isinstance(app.screen, EditCellDialog)
            assert row.controller.state is None
            assert _cell_text(row, 1) == "27"

    asyncio.run(_scenario())
    assert changes.calls == [(0, 1, "27")]


def test_dialog_row_escape_cancels_and_keeps_cell_text(changes) -> None:
    app, row = _mount_row("dialog", changes)

    async def _scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.click("#cell-2")
            await pilot.pause()
            await pilot.press("end", "backspace", "9", "9")
            await pilot.pause()
            assert row.controller.draft_value == "99"

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, EditCellDialog)
            assert row.controller.state is None
            assert _cell_text(row, 2) == "7"

    asyncio.run(_scenario())
    assert changes.calls == []


def test_dialog_row_backdrop_click_dismisses_without_commit(changes) -> None:
    app, row = _mount_row("dialog", changes)

    async def _scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.click("#cell-3")
            await pilot.pause()
            assert isinstance(app.screen, EditCellDialog)

            await pilot.click(offset=(1, 1))
            await pilot.pause()
            assert not isinstance(app.screen, EditCellDialog)
            assert row.controller.state is None
            assert _cell_text(row, 3) == "95"

    asyncio.run(_scenario())
    assert changes.calls == []


def test_inline_row_commits_on_enter_and_on_blur(changes) -> None:
    app, row = _mount_row("inline", changes)
    assert isinstance(row, InlineEditableTableRow)

    async def _scenario() -> None:
        async with app.run_test() as pilot:
            await pilot.click("#cell-1")
            await pilot.pause()
            assert row.controller.editing_column == 1

            await pilot.press("end", "backspace", "7", "enter")
            await pilot.pause()
            assert row.controller.state is None
            assert _cell_text(row, 1) == "27"

            await pilot.click("#cell-2")
            await pilot.pause()
            assert row.controller.editing_column == 2
            assert row.controller.has_focus

            # Moving focus to another cell commits the untouched value.
            await pilot.click("#cell-3")
            await pilot.pause()

    asyncio.run(_scenario())
    assert changes.calls[:2] == [(0, 1, "27"), (0, 2, "7")]
