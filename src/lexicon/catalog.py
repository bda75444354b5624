"""
Decomposition database reader and the per-character catalog.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .config import DECOMPOSITION_LAYOUT, SOURCE_ENCODING, STROKE_FIELDS
from .errors import MalformedRecordError
from .helpers import to_stroke_count
from .records import CharacterRecord

CharacterCatalog = Dict[str, CharacterRecord]


def record_from_row(
    row: Sequence[str],
    row_index: int,
    path: Optional[Path] = None,
) -> CharacterRecord:
    """Parse one decomposition row, raising MalformedRecordError on a bad shape or stroke field."""
    columns = DECOMPOSITION_LAYOUT["columns"]
    if len(row) != len(columns):
        raise MalformedRecordError(
            row_index,
            f"expected {len(columns)} values, found {len(row)}",
            path,
        )

    fields = dict(zip(columns, row))
    strokes: Dict[str, int] = {}
    for name in STROKE_FIELDS:
        try:
            strokes[name] = to_stroke_count(fields[name])
        except ValueError as exc:
            raise MalformedRecordError(row_index, f"invalid {name}: {exc}", path) from exc

    return CharacterRecord(
        character=fields["character"],
        strokes=strokes["strokes"],
        composition_code=fields["composition_type"],
        left_component=fields["left_component"],
        left_component_strokes=strokes["left_component_strokes"],
        right_component=fields["right_component"],
        right_component_strokes=strokes["right_component_strokes"],
        signature=fields["signature"],
        notes=fields["notes"],
        section=fields["section"],
    )


def build_catalog(
    rows: Iterable[Sequence[str]],
    path: Optional[Path] = None,
) -> CharacterCatalog:
    """
    Key decomposition records by character.

    A later row for the same character replaces the earlier record; the key
    keeps the position where the character was first seen.
    """
    catalog: CharacterCatalog = {}
    for row_index, row in enumerate(rows):
        record = record_from_row(row, row_index, path)
        catalog[record.character] = record
    return catalog


def read_decomposition_rows(path: Path) -> List[List[str]]:
    """Read the tab-separated database, skipping blank lines."""
    rows: List[List[str]] = []
    with path.open("r", encoding=SOURCE_ENCODING) as handle:
        try:
            for raw_line in handle:
                raw_line = raw_line.rstrip("\r\n")
                if not raw_line:
                    continue
                rows.append(raw_line.split(DECOMPOSITION_LAYOUT["delimiter"]))
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(len(rows), f"invalid text encoding: {exc}", path) from exc
    return rows


def load_catalog(path: Path, *, verbose: bool = True) -> CharacterCatalog:
    """Read ``path`` into a catalog, failing on the first malformed row."""
    catalog = build_catalog(read_decomposition_rows(path), path)
    if verbose:
        print(f"[lexicon] Loaded {len(catalog)} decomposition records from {path}", file=sys.stderr)
    return catalog


__all__ = [
    "CharacterCatalog",
    "build_catalog",
    "load_catalog",
    "read_decomposition_rows",
    "record_from_row",
]
