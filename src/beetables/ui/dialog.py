from __future__ import annotations

from collections.abc import Callable
from typing import Literal

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

EditOutcome = Literal["confirm", "cancel", "dismiss"]


class EditCellDialog(ModalScreen[EditOutcome]):
    """Modal editor for one value.

    Dismisses with ``"confirm"`` (Confirm button or Enter), ``"cancel"``
    (Cancel button or Escape) or ``"dismiss"`` (click outside the dialog).
    The live input text is reported through ``on_change``.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]
    CSS = """
    EditCellDialog {
        align: center middle;
    }
    EditCellDialog > #dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: heavy $accent;
        background: $surface;
    }
    EditCellDialog #buttons {
        height: auto;
        align-horizontal: right;
        margin-top: 1;
    }
    EditCellDialog Button {
        margin-left: 1;
    }
    """

    def __init__(
        self,
        *,
        title: str,
        value: str,
        label: str = "Enter new value",
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__()
        self._title = title
        self._value = value
        self._label = label
        self._on_change = on_change

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self._title, id="title")
            if self._label:
                yield Label(self._label, classes="dim")
            yield Input(value=self._value, id="value")
            with Horizontal(id="buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Confirm", id="confirm", variant="primary")

    def on_mount(self) -> None:
        field = self.query_one(Input)
        field.focus()
        field.cursor_position = len(field.value)

    def on_input_changed(self, event: Input.Changed) -> None:
        if self._on_change is not None:
            self._on_change(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss("confirm")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss("confirm" if event.button.id == "confirm" else "cancel")

    def on_click(self, event: Click) -> None:
        # Only clicks that land on the backdrop, not inside the dialog box.
        widget, _ = self.get_widget_at(event.screen_x, event.screen_y)
        if widget is self:
            self.dismiss("dismiss")

    def action_cancel(self) -> None:
        self.dismiss("cancel")
