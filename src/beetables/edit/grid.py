from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Literal

from ..errors import EditStateError

logger = logging.getLogger(__name__)

SINGLE_ITEM: Final = "single"
GRID_ITEM_COUNT: Final[int] = 16

GridTarget = int | Literal["single"]


def _default_texts() -> dict[int, str]:
    return {index: f"Item is {index}" for index in range(GRID_ITEM_COUNT)}


@dataclass(slots=True)
class GridEditModel:
    """Edit state for the grid demo: at most one item (or the single item) in edit.

    Text changes are written through on every keystroke; ``cancel_edit`` puts
    back the text the item had when editing started. So cancel does more
    than discard the dialog field: it also undoes the text already written
    through, whereas confirm, dismiss and ``clear`` keep it.
    """

    item_texts: dict[int, str] = field(default_factory=_default_texts)
    single_text: str = "Single item"
    editing: GridTarget | None = None
    _text_at_start: str = field(default="", init=False)

    def targets(self) -> list[GridTarget]:
        return [*sorted(self.item_texts), SINGLE_ITEM]

    def _check_target(self, target: GridTarget) -> None:
        if target == SINGLE_ITEM:
            return
        if isinstance(target, bool) or target not in self.item_texts:
            raise EditStateError(f"Unknown grid target: {target!r}")

    def text_for(self, target: GridTarget) -> str:
        self._check_target(target)
        if target == SINGLE_ITEM:
            return self.single_text
        return self.item_texts[target]

    def is_editing(self, target: GridTarget) -> bool:
        return self.editing is not None and self.editing == target

    def start_edit(self, target: GridTarget) -> None:
        self._check_target(target)
        self.editing = target
        self._text_at_start = self.text_for(target)
        logger.debug("Grid: editing %r", target)

    def change_text(self, target: GridTarget, text: str) -> None:
        if not self.is_editing(target):
            raise EditStateError(f"Grid target {target!r} is not being edited.")
        if target == SINGLE_ITEM:
            self.single_text = text
        else:
            self.item_texts[target] = text

    def end_edit(self) -> None:
        if self.editing is not None:
            logger.debug("Grid: finished editing %r", self.editing)
        self.editing = None

    def cancel_edit(self) -> None:
        target = self.editing
        if target is None:
            return
        if target == SINGLE_ITEM:
            self.single_text = self._text_at_start
        else:
            self.item_texts[target] = self._text_at_start
        logger.debug("Grid: cancelled edit of %r", target)
        self.editing = None

    def clear(self) -> None:
        self.editing = None
