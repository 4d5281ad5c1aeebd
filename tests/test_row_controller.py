from __future__ import annotations

import pytest

from beetables.edit.controller import RowEditController
from beetables.errors import EditStateError

_ROW = ["Man Utd", "26", "7", "95"]


def test_tap_then_type_then_commit_reports_new_value(changes) -> None:
    controller = RowEditController(4, on_data_change=changes)
    assert controller.editing_column is None

    controller.start_edit(1, _ROW[1])
    assert controller.is_editing
    assert controller.editing_column == 1
    assert controller.draft_value == "26"

    controller.update_draft("27")
    assert controller.draft_value == "27"

    assert controller.commit() == (1, "27")
    assert changes.calls == [(4, 1, "27")]
    assert controller.editing_column is None
    assert not controller.is_editing


def test_cancel_discards_draft_without_callback(changes) -> None:
    controller = RowEditController(0, on_data_change=changes)
    controller.start_edit(2, _ROW[2])
    controller.update_draft("99")
    controller.cancel()

    assert changes.calls == []
    assert controller.editing_column is None
    assert controller.draft_value == ""


def test_cancel_when_idle_is_noop(changes) -> None:
    controller = RowEditController(0, on_data_change=changes)
    controller.cancel()
    controller.cancel()
    assert controller.state is None
    assert changes.calls == []


def test_commit_without_callback_is_tolerated() -> None:
    controller = RowEditController(0)
    controller.start_edit(0, "Man Utd")
    assert controller.commit() == (0, "Man Utd")
    assert controller.state is None


def test_commit_and_update_while_idle_raise() -> None:
    controller = RowEditController(0)
    with pytest.raises(EditStateError):
        controller.commit()
    with pytest.raises(EditStateError):
        controller.update_draft("x")


def test_tap_while_editing_retargets_dialog_session(changes) -> None:
    controller = RowEditController(1, on_data_change=changes)
    controller.start_edit(0, "Arsenal")
    controller.update_draft("Gunners")
    assert controller.start_edit(3, "58") is True

    assert controller.editing_column == 3
    assert controller.draft_value == "58"
    controller.confirm()
    assert changes.calls == [(1, 3, "58")]


def test_dismiss_cancels(changes) -> None:
    controller = RowEditController(2, on_data_change=changes)
    controller.start_edit(1, "26")
    controller.update_draft("30")
    controller.dismiss()
    assert changes.calls == []
    assert controller.state is None


def test_empty_value_is_accepted(changes) -> None:
    controller = RowEditController(0, on_data_change=changes)
    controller.start_edit(0, "Man Utd")
    controller.update_draft("")
    controller.confirm()
    assert changes.calls == [(0, 0, "")]


def test_callback_can_be_attached_after_construction(changes) -> None:
    controller = RowEditController(5)
    controller.on_data_change = changes
    controller.start_edit(1, "26")
    controller.commit()
    assert changes.calls == [(5, 1, "26")]


def test_at_most_one_column_in_edit(changes) -> None:
    controller = RowEditController(0, on_data_change=changes)
    for column, value in enumerate(_ROW):
        controller.start_edit(column, value)
        assert controller.editing_column == column
    controller.commit()
    assert changes.calls == [(0, 3, "95")]
