from __future__ import annotations

from dataclasses import dataclass, replace

from ..errors import EditStateError


@dataclass(frozen=True, slots=True)
class Editing:
    """The single cell of a row that is currently in edit mode."""

    column: int
    draft: str
    cursor: int | None = None
    has_focus: bool = False


EditState = Editing | None


def start_edit(
    state: EditState,
    column: int,
    current_value: str,
    *,
    cursor_at_end: bool = False,
) -> Editing:
    """Open an edit session on ``column`` seeded with the cell's current value.

    Any existing session is replaced; callers that must not retarget an active
    session check ``state`` first.
    """

    cursor = len(current_value) if cursor_at_end else None
    return Editing(column=column, draft=current_value, cursor=cursor)


def update_draft(state: EditState, text: str) -> Editing:
    if state is None:
        raise EditStateError("No cell is being edited; cannot update draft.")
    return replace(state, draft=text)


def mark_focused(state: EditState) -> EditState:
    if state is None:
        return None
    return replace(state, has_focus=True)


def commit(state: EditState) -> tuple[EditState, tuple[int, str]]:
    """Close the session and return the ``(column, value)`` to propagate."""

    if state is None:
        raise EditStateError("No cell is being edited; nothing to commit.")
    return (None, (state.column, state.draft))


def cancel(state: EditState) -> EditState:
    """Drop the session, whatever its draft."""

    return None
