from __future__ import annotations

import logging
from collections.abc import Callable

from . import state as transitions
from .state import EditState

logger = logging.getLogger(__name__)

DataChangeCallback = Callable[[int, int, str], None]


class RowEditController:
    """Tracks the one cell of a table row that is being edited.

    This is the dialog variant: editing is confirmed or dismissed through a
    modal, and a tap while editing retargets the session.
    """

    def __init__(
        self,
        row_index: int,
        *,
        on_data_change: DataChangeCallback | None = None,
    ) -> None:
        self.row_index = row_index
        self.on_data_change = on_data_change
        self._state: EditState = None

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return self._state is not None

    @property
    def editing_column(self) -> int | None:
        return None if self._state is None else self._state.column

    @property
    def draft_value(self) -> str:
        return "" if self._state is None else self._state.draft

    def start_edit(self, column_index: int, current_value: str) -> bool:
        self._state = transitions.start_edit(self._state, column_index, current_value)
        logger.debug(
            "Row %d: editing column %d (draft=%r)", self.row_index, column_index, current_value
        )
        return True

    def update_draft(self, text: str) -> None:
        self._state = transitions.update_draft(self._state, text)

    def commit(self) -> tuple[int, str]:
        self._state, (column, value) = transitions.commit(self._state)
        logger.info("Row %d: commit column %d -> %r", self.row_index, column, value)
        callback = self.on_data_change
        if callback is not None:
            callback(self.row_index, column, value)
        return (column, value)

    def cancel(self) -> None:
        if self._state is None:
            return
        logger.debug("Row %d: cancel edit of column %d", self.row_index, self._state.column)
        self._state = transitions.cancel(self._state)

    def confirm(self) -> tuple[int, str]:
        return self.commit()

    def dismiss(self) -> None:
        self.cancel()


class InlineRowEditController(RowEditController):
    """Inline variant: the cell itself becomes the input.

    Commit happens on an explicit submit or when the input loses focus after
    having gained it at least once. Losing focus without typing still commits
    the unchanged value.
    """

    def start_edit(self, column_index: int, current_value: str) -> bool:
        current = self._state
        if current is not None:
            if current.column != column_index:
                logger.debug(
                    "Row %d: tap on column %d blocked while column %d is active",
                    self.row_index,
                    column_index,
                    current.column,
                )
            return False
        self._state = transitions.start_edit(
            self._state, column_index, current_value, cursor_at_end=True
        )
        logger.debug(
            "Row %d: inline editing column %d (draft=%r)",
            self.row_index,
            column_index,
            current_value,
        )
        return True

    @property
    def cursor_position(self) -> int | None:
        return None if self._state is None else self._state.cursor

    @property
    def has_focus(self) -> bool:
        return self._state is not None and self._state.has_focus

    def focus_gained(self) -> None:
        self._state = transitions.mark_focused(self._state)

    def focus_lost(self) -> tuple[int, str] | None:
        if self._state is None or not self._state.has_focus:
            return None
        return self.commit()

    def submit(self) -> tuple[int, str] | None:
        if self._state is None:
            return None
        return self.commit()
