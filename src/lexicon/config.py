"""Static configuration for the vocabulary and decomposition source files."""

from __future__ import annotations

from typing import Tuple, TypedDict


class TableLayout(TypedDict):
    delimiter: str
    columns: Tuple[str, ...]


SOURCE_ENCODING = "utf-8-sig"

# Marks a decomposition row whose second component slot is empty.
NO_COMPONENT = "*"

# ---------------------------------------------------------------------------
# File layouts. Neither file carries a header row.

VOCABULARY_LAYOUT: TableLayout = {
    "delimiter": ",",
    "columns": ("term", "pinyin", "part_of_speech", "translation"),
}

DECOMPOSITION_LAYOUT: TableLayout = {
    "delimiter": "\t",
    "columns": (
        "character",
        "strokes",
        "composition_type",
        "left_component",
        "left_component_strokes",
        "right_component",
        "right_component_strokes",
        "signature",
        "notes",
        "section",
    ),
}

STROKE_FIELDS: Tuple[str, ...] = ("strokes", "left_component_strokes", "right_component_strokes")


__all__ = [
    "DECOMPOSITION_LAYOUT",
    "NO_COMPONENT",
    "SOURCE_ENCODING",
    "STROKE_FIELDS",
    "TableLayout",
    "VOCABULARY_LAYOUT",
]
