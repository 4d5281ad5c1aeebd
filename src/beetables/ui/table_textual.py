from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.events import Blur, Click, Focus
from textual.message import Message
from textual.widgets import Footer, Header, Input, Static

from ..edit.controller import DataChangeCallback, InlineRowEditController, RowEditController
from .dialog import EditCellDialog, EditOutcome
from .style import TableStyle, apply_styles, cell_styles, column_width, row_styles

RowVariant = Literal["dialog", "inline"]


class CellEdited(Message):
    """Posted by a table row after a cell edit was committed."""

    def __init__(self, row_index: int, column_index: int, value: str) -> None:
        super().__init__()
        self.row_index = row_index
        self.column_index = column_index
        self.value = value


class _Cell(Static):
    can_focus = True
    BINDINGS = [Binding("enter", "tap", "Edit", show=False)]

    class Tapped(Message):
        def __init__(self, column_index: int) -> None:
            super().__init__()
            self.column_index = column_index

    def __init__(self, text: str, *, column_index: int) -> None:
        super().__init__(text, markup=False, id=f"cell-{column_index}", classes="cell")
        self.column_index = column_index
        self.cell_text = text

    def set_text(self, text: str) -> None:
        self.cell_text = text
        self.update(text)

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Tapped(self.column_index))

    def action_tap(self) -> None:
        self.post_message(self.Tapped(self.column_index))


class _CellInput(Input):
    class FocusChanged(Message):
        def __init__(self, field: _CellInput, focused: bool) -> None:
            super().__init__()
            self.field = field
            self.focused = focused

    def on_focus(self, _event: Focus) -> None:
        self.post_message(self.FocusChanged(self, True))

    def on_blur(self, _event: Blur) -> None:
        self.post_message(self.FocusChanged(self, False))


class _TableRowBase(Horizontal):
    DEFAULT_CSS = """
    _TableRowBase {
        height: auto;
    }
    _TableRowBase > .cell {
        height: 3;
    }
    _TableRowBase > .cell:focus {
        background: $accent 30%;
    }
    _TableRowBase > .cell-input {
        height: 3;
        border: tall $accent;
    }
    """

    def __init__(
        self,
        data: Sequence[str],
        row_index: int,
        *,
        style: TableStyle | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._data = list(data)
        self.row_index = row_index
        self._style = style or TableStyle()

    @property
    def data(self) -> tuple[str, ...]:
        return tuple(self._data)

    def compose(self) -> ComposeResult:
        for column_index, value in enumerate(self._data):
            yield _Cell(value, column_index=column_index)

    def on_mount(self) -> None:
        apply_styles(self.styles, row_styles(self._style))
        for cell in self._cells():
            apply_styles(cell.styles, cell_styles(self._style, cell.column_index))

    def _cells(self) -> list[_Cell]:
        return list(self.query(_Cell))

    def _cell(self, column_index: int) -> _Cell:
        return next(cell for cell in self._cells() if cell.column_index == column_index)

    def set_cell(self, column_index: int, value: str) -> None:
        self._data[column_index] = value
        if self.is_mounted:
            self._cell(column_index).set_text(value)

    def update_data(self, values: Sequence[str]) -> None:
        previous = len(self._data)
        self._data = list(values)
        if not self.is_mounted:
            return
        if len(self._data) != previous:
            self.refresh(recompose=True)
            self.call_after_refresh(self.on_mount)
            return
        for cell in self._cells():
            cell.set_text(self._data[cell.column_index])


class EditableTableRow(_TableRowBase):
    """Table row whose cells are edited through a modal dialog."""

    def __init__(
        self,
        data: Sequence[str],
        row_index: int,
        *,
        style: TableStyle | None = None,
        on_data_change: DataChangeCallback | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(data, row_index, style=style, id=id)
        self.controller = RowEditController(row_index, on_data_change=on_data_change)

    @on(_Cell.Tapped)
    def _start_edit(self, event: _Cell.Tapped) -> None:
        event.stop()
        column = event.column_index
        self.controller.start_edit(column, self._data[column])
        self.app.push_screen(
            EditCellDialog(
                title="Edit cell",
                value=self.controller.draft_value,
                on_change=self.controller.update_draft,
            ),
            self._on_dialog_closed,
        )

    def _on_dialog_closed(self, outcome: EditOutcome | None) -> None:
        if outcome == "confirm" and self.controller.is_editing:
            column, value = self.controller.confirm()
            self.post_message(CellEdited(self.row_index, column, value))
            return
        self.controller.dismiss()


class InlineEditableTableRow(_TableRowBase):
    """Table row whose tapped cell turns into a text input in place."""

    def __init__(
        self,
        data: Sequence[str],
        row_index: int,
        *,
        style: TableStyle | None = None,
        on_data_change: DataChangeCallback | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(data, row_index, style=style, id=id)
        self.controller = InlineRowEditController(row_index, on_data_change=on_data_change)
        self._editor: _CellInput | None = None

    @on(_Cell.Tapped)
    def _start_edit(self, event: _Cell.Tapped) -> None:
        event.stop()
        column = event.column_index
        if not self.controller.start_edit(column, self._data[column]):
            return
        cell = self._cell(column)
        field = _CellInput(value=self.controller.draft_value, classes="cell-input")
        apply_styles(
            field.styles,
            {"width": column_width(self._style, column), "text_align": self._style.text_align},
        )
        self._editor = field
        cell.display = False
        self.mount(field, before=cell)
        self.call_after_refresh(self._place_cursor, field)
        field.focus()

    def _place_cursor(self, field: _CellInput) -> None:
        cursor = self.controller.cursor_position
        if field.is_mounted and cursor is not None:
            field.cursor_position = cursor

    @on(Input.Changed)
    def _draft_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.input is self._editor and self.controller.is_editing:
            self.controller.update_draft(event.value)

    @on(Input.Submitted)
    def _submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if event.input is not self._editor:
            return
        self._finish(self.controller.submit())

    @on(_CellInput.FocusChanged)
    def _focus_changed(self, event: _CellInput.FocusChanged) -> None:
        event.stop()
        if event.field is not self._editor:
            return
        if event.focused:
            self.controller.focus_gained()
            return
        self._finish(self.controller.focus_lost())

    def _finish(self, committed: tuple[int, str] | None) -> None:
        if committed is None:
            return
        column, value = committed
        editor = self._editor
        self._editor = None
        if editor is not None:
            editor.remove()
        cell = self._cell(column)
        cell.set_text(self._data[column])
        cell.display = True
        self.post_message(CellEdited(self.row_index, column, value))


class TableHeaderRow(_TableRowBase):
    """Non-editable header line using the same column widths as the rows."""

    DEFAULT_CSS = """
    TableHeaderRow > .cell {
        text-style: bold;
    }
    """

    def __init__(
        self,
        headers: Sequence[str],
        *,
        style: TableStyle | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(headers, -1, style=style, id=id)

    def compose(self) -> ComposeResult:
        for column_index, value in enumerate(self._data):
            cell = _Cell(value, column_index=column_index)
            cell.can_focus = False
            yield cell

    @on(_Cell.Tapped)
    def _ignore_tap(self, event: _Cell.Tapped) -> None:
        event.stop()


def make_row(
    variant: RowVariant,
    data: Sequence[str],
    row_index: int,
    *,
    style: TableStyle | None = None,
    on_data_change: DataChangeCallback | None = None,
) -> EditableTableRow | InlineEditableTableRow:
    if variant == "inline":
        return InlineEditableTableRow(
            data, row_index, style=style, on_data_change=on_data_change, id=f"row-{row_index}"
        )
    return EditableTableRow(
        data, row_index, style=style, on_data_change=on_data_change, id=f"row-{row_index}"
    )


def format_edit_status(row_index: int, column_index: int, value: str) -> str:
    return f"Row {row_index + 1}, column {column_index + 1} set to {value!r}"


def run_table_demo(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    variant: RowVariant = "dialog",
    style: TableStyle | None = None,
) -> list[list[str]]:
    """Run the editable league-table demo and return the rows as edited."""

    table_rows = [list(row) for row in rows]

    class _TableDemoApp(App[None]):
        TITLE = "beetables"
        SUB_TITLE = f"{variant} editing"
        BINDINGS = [
            Binding("q", "quit", "Quit"),
        ]
        CSS = """
        #table {
            height: 1fr;
        }
        #status {
            height: 1;
            padding: 0 1;
            color: #fce94f;
            background: #555753;
        }
        """

        def compose(self) -> ComposeResult:
            yield Header(show_clock=False)
            with VerticalScroll(id="table"):
                yield TableHeaderRow(headers, style=style)
                for row_index, row in enumerate(table_rows):
                    yield make_row(
                        variant,
                        row,
                        row_index,
                        style=style,
                        on_data_change=self._on_data_change,
                    )
            yield Static("Click a cell (or focus it and press Enter) to edit.", id="status")
            yield Footer()

        def _on_data_change(self, row_index: int, column_index: int, value: str) -> None:
            table_rows[row_index][column_index] = value
            row = self.query_one(f"#row-{row_index}", _TableRowBase)
            row.set_cell(column_index, value)

        def on_cell_edited(self, event: CellEdited) -> None:
            self.query_one("#status", Static).update(
                format_edit_status(event.row_index, event.column_index, event.value)
            )

    _TableDemoApp().run()
    return table_rows
