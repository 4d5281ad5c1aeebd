from __future__ import annotations


class BeetablesError(Exception):
    """Base class for beetables errors."""


class EditStateError(BeetablesError):
    """Raised when an edit operation is invoked in a state that does not allow it.

    For example committing or updating the draft of a row that has no cell in
    edit mode.
    """
