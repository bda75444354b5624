"""
Vocabulary source reader and the character → vocabulary index.
"""

from __future__ import annotations

import csv
import sys
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence

from .config import SOURCE_ENCODING, VOCABULARY_LAYOUT
from .errors import MalformedRecordError
from .helpers import pad_row, unique_characters
from .records import VocabularyEntry

VocabularyIndex = Dict[str, List[VocabularyEntry]]


def entries_from_rows(rows: Iterable[Sequence[str]]) -> Iterator[VocabularyEntry]:
    """
    Turn raw vocabulary rows into entries.

    Rows may carry one to four columns; missing trailing columns become empty
    strings and columns past the fourth are ignored. Rows without columns or
    with an empty term are skipped.
    """
    width = len(VOCABULARY_LAYOUT["columns"])
    for row in rows:
        if not row:
            continue
        term, pinyin, part_of_speech, translation = pad_row(row, width)
        if not term:
            continue
        yield VocabularyEntry(
            term=term,
            pinyin=pinyin,
            part_of_speech=part_of_speech,
            translation=translation,
        )


def build_vocabulary_index(rows: Iterable[Sequence[str]]) -> VocabularyIndex:
    """
    Map every character found in a term to the entries containing it.

    A character repeated inside one term indexes that entry once. Entries are
    listed in the order their rows appear.
    """
    index: VocabularyIndex = {}
    for entry in entries_from_rows(rows):
        for char in unique_characters(entry.term):
            index.setdefault(char, []).append(entry)
    return index


def read_vocabulary_rows(path: Path) -> List[List[str]]:
    """Read the comma-separated vocabulary file; it has no header row."""
    rows: List[List[str]] = []
    with path.open("r", encoding=SOURCE_ENCODING, newline="") as handle:
        reader = csv.reader(handle, delimiter=VOCABULARY_LAYOUT["delimiter"], strict=True)
        try:
            for row in reader:
                rows.append(row)
        except csv.Error as exc:
            raise MalformedRecordError(len(rows), str(exc), path) from exc
        except UnicodeDecodeError as exc:
            raise MalformedRecordError(len(rows), f"invalid text encoding: {exc}", path) from exc
    return rows


def load_vocabulary_index(path: Path, *, verbose: bool = True) -> VocabularyIndex:
    """Read ``path`` and build its vocabulary index."""
    rows = read_vocabulary_rows(path)
    index = build_vocabulary_index(rows)
    if verbose:
        print(
            f"[lexicon] Indexed {len(rows)} vocabulary rows over {len(index)} characters from {path}",
            file=sys.stderr,
        )
    return index


__all__ = [
    "VocabularyIndex",
    "build_vocabulary_index",
    "entries_from_rows",
    "load_vocabulary_index",
    "read_vocabulary_rows",
]
