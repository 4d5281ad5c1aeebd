from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

TextAlign = Literal["left", "center", "right"]
VerticalAlign = Literal["top", "middle", "bottom"]

LIGHT_GRAY = "#d3d3d3"
LIGHT_COLOR = "#f5f5f5"

_WIDE_COLUMN_WEIGHT = 8
_COLUMN_WEIGHT = 2


@dataclass(frozen=True, slots=True)
class TableStyle:
    border_color: str = LIGHT_GRAY
    text_style: str = ""
    text_color: str = "#202326"
    background_color: str = LIGHT_COLOR
    text_align: TextAlign = "center"
    content_align: tuple[TextAlign, VerticalAlign] = ("center", "middle")
    padding: int = 0
    divider_thickness: int = 1
    disable_vertical_dividers: bool = False
    horizontal_divider_color: str = LIGHT_GRAY
    column_to_increase_width: int | None = None


def column_width(style: TableStyle, column_index: int) -> str:
    weight = (
        _WIDE_COLUMN_WEIGHT if column_index == style.column_to_increase_width else _COLUMN_WEIGHT
    )
    return f"{weight}fr"


def row_styles(style: TableStyle) -> dict[str, Any]:
    return {
        "background": style.background_color,
        "padding": (style.padding, style.padding),
    }


def cell_styles(style: TableStyle, column_index: int) -> dict[str, Any]:
    """Textual style attributes for one cell, keyed by ``Styles`` attribute name."""

    styles: dict[str, Any] = {
        "width": column_width(style, column_index),
        "text_align": style.text_align,
        "content_align": style.content_align,
        "color": style.text_color,
    }
    if style.text_style:
        styles["text_style"] = style.text_style
    if style.divider_thickness <= 0:
        styles["border"] = None
    elif style.disable_vertical_dividers:
        styles["border"] = None
        styles["border_bottom"] = ("solid", style.horizontal_divider_color)
    else:
        styles["border"] = ("solid", style.border_color)
    return styles


def apply_styles(target: Any, values: dict[str, Any]) -> None:
    """Assign ``values`` onto a Textual ``Styles`` object."""

    for name, value in values.items():
        setattr(target, name, value)
