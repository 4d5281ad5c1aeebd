from __future__ import annotations

from ..edit.grid import SINGLE_ITEM, GridEditModel, GridTarget
from .dialog import EditOutcome


def item_id(target: GridTarget) -> str:
    return "item-single" if target == SINGLE_ITEM else f"item-{target}"


def run_grid_demo(model: GridEditModel | None = None) -> GridEditModel:
    """Open the grid demo: sixteen items plus one separate item, each editable.

    Textual is imported lazily so the CLI stays usable without a terminal.
    """

    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Grid
    from textual.events import Click
    from textual.widgets import Footer, Header, Static

    from .dialog import EditCellDialog

    state = model or GridEditModel()

    class _GridItem(Static):
        can_focus = True
        BINDINGS = [Binding("enter", "edit", "Edit", show=False)]

        def __init__(self, target: GridTarget) -> None:
            super().__init__(state.text_for(target), markup=False, id=item_id(target))
            self.target = target

        def on_click(self, event: Click) -> None:
            event.stop()
            self.app.action_edit_item(self.target)  # type: ignore[attr-defined]

        def action_edit(self) -> None:
            self.app.action_edit_item(self.target)  # type: ignore[attr-defined]

    class _GridDemoApp(App[None]):
        TITLE = "beetables grid"
        BINDINGS = [
            Binding("q", "quit", "Quit"),
        ]
        CSS = """
        #grid {
            grid-size: 6;
            grid-gutter: 1 2;
            padding: 1 2;
            height: auto;
        }
        _GridItem {
            width: 20;
            height: 3;
            border: solid #3465a4;
            content-align: center middle;
        }
        _GridItem.editing {
            border: heavy #fce94f;
        }
        """

        def compose(self) -> ComposeResult:
            yield Header(show_clock=False)
            with Grid(id="grid"):
                for target in state.targets():
                    yield _GridItem(target)
            yield Footer()

        def _item(self, target: GridTarget) -> _GridItem:
            return self.query_one(f"#{item_id(target)}", _GridItem)

        def _refresh_items(self) -> None:
            for item in self.query(_GridItem):
                item.update(state.text_for(item.target))
                item.set_class(state.is_editing(item.target), "editing")

        def on_click(self, _event: Click) -> None:
            # Clicks on the background end any edit in progress.
            if len(self.screen_stack) > 1:
                return
            state.clear()
            self.set_focus(None)
            self._refresh_items()

        def action_edit_item(self, target: GridTarget) -> None:
            if len(self.screen_stack) > 1:
                return
            state.start_edit(target)
            self._refresh_items()

            def _live_update(text: str) -> None:
                state.change_text(target, text)
                self._item(target).update(text)

            self.push_screen(
                EditCellDialog(
                    title="Edit text",
                    value=state.text_for(target),
                    label="",
                    on_change=_live_update,
                ),
                self._on_dialog_closed,
            )

        def _on_dialog_closed(self, outcome: EditOutcome | None) -> None:
            if outcome == "cancel":
                state.cancel_edit()
            else:
                state.end_edit()
            self._refresh_items()

    _GridDemoApp().run()
    return state
