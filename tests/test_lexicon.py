"""Tests for the vocabulary index, the decomposition catalog, and their helpers."""

from __future__ import annotations

from pathlib import Path
from typing import List

import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.lexicon.catalog import build_catalog, load_catalog, read_decomposition_rows, record_from_row
from src.lexicon.errors import MalformedRecordError
from src.lexicon.helpers import pad_row, to_stroke_count, unique_characters
from src.lexicon.records import CompositionType, VocabularyEntry, parse_composition_type
from src.lexicon.vocabulary import (
    build_vocabulary_index,
    entries_from_rows,
    load_vocabulary_index,
    read_vocabulary_rows,
)


# ---------------------------------------------------------------------------
# Helper fixtures and utilities


def _decomposition_row(
    character: str,
    strokes: str = "7",
    code: str = "吅",
    left: str = "木",
    right: str = "才",
) -> List[str]:
    return [character, strokes, code, left, "4", right, "3", "DD", "", "section"]


# ---------------------------------------------------------------------------
# Helper utility tests


def test_to_stroke_count_accepts_digits() -> None:
    assert to_stroke_count("12") == 12
    assert to_stroke_count("+5") == 5
    assert to_stroke_count("007") == 7
    assert to_stroke_count(0) == 0


def test_to_stroke_count_rejects_invalid() -> None:
    with pytest.raises(ValueError):
        to_stroke_count("seven")
    with pytest.raises(ValueError):
        to_stroke_count("-1")
    with pytest.raises(ValueError):
        to_stroke_count(None)
    with pytest.raises(ValueError):
        to_stroke_count("")
    for value in ("1_0", " 4 ", "３", "+", "+-1"):
        with pytest.raises(ValueError):
            to_stroke_count(value)


def test_pad_row_fills_and_truncates() -> None:
    assert pad_row(["a"], 3) == ["a", "", ""]
    assert pad_row(["a", "b", "c", "d"], 2) == ["a", "b"]


def test_unique_characters_keeps_first_seen_order() -> None:
    assert unique_characters("谢谢你") == ["谢", "你"]
    assert unique_characters("") == []


def test_parse_composition_type() -> None:
    assert parse_composition_type("吅") is CompositionType.horizontal
    assert parse_composition_type("+") is CompositionType.superposition
    assert parse_composition_type("?") is None


# ---------------------------------------------------------------------------
# Vocabulary index tests


def test_index_maps_each_character_to_its_entries() -> None:
    index = build_vocabulary_index(
        [
            ["木材", "mucai", "n", "lumber"],
            ["树木", "shumu", "n", "tree"],
        ]
    )

    lumber = VocabularyEntry("木材", "mucai", "n", "lumber")
    tree = VocabularyEntry("树木", "shumu", "n", "tree")
    assert index["木"] == [lumber, tree]
    assert index["材"] == [lumber]
    assert index["树"] == [tree]
    assert set(index) == {"木", "材", "树"}


def test_index_counts_repeated_character_once_per_entry() -> None:
    index = build_vocabulary_index([["谢谢", "xiexie", "v", "thanks"]])

    assert len(index["谢"]) == 1
    assert index["谢"][0].term == "谢谢"


def test_index_keeps_duplicate_terms() -> None:
    index = build_vocabulary_index([["好", "hao"], ["好", "hao", "adj", "good"]])

    assert [entry.translation for entry in index["好"]] == ["", "good"]


def test_entries_default_missing_columns() -> None:
    entries = list(entries_from_rows([["人"], ["大", "da"], ["天", "tian", "n", "sky", "extra"]]))

    assert entries[0] == VocabularyEntry("人", "", "", "")
    assert entries[1] == VocabularyEntry("大", "da", "", "")
    assert entries[2] == VocabularyEntry("天", "tian", "n", "sky")


def test_entries_skip_empty_rows_and_terms() -> None:
    assert list(entries_from_rows([[], [""], ["", "pinyin", "n", "nothing"]])) == []
    assert build_vocabulary_index([[], [""]]) == {}


def test_read_vocabulary_rows_handles_quotes_and_bom(tmp_path: Path) -> None:
    path = tmp_path / "vocab.csv"
    path.write_text('\ufeff是,shi,v,"to be, to exist"\n\n你好\n', encoding="utf-8")

    rows = read_vocabulary_rows(path)

    assert rows[0] == ["是", "shi", "v", "to be, to exist"]
    index = load_vocabulary_index(path, verbose=False)
    assert index["是"][0].translation == "to be, to exist"
    assert set(index) == {"是", "你", "好"}


def test_read_vocabulary_rows_rejects_unterminated_quote(tmp_path: Path) -> None:
    path = tmp_path / "vocab.csv"
    path.write_text('树木,shumu,n,tree\n木材,"mucai\n', encoding="utf-8")

    with pytest.raises(MalformedRecordError) as excinfo:
        read_vocabulary_rows(path)

    assert excinfo.value.row_index == 1
    assert excinfo.value.path == path


def test_read_vocabulary_rows_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "vocab.csv"
    path.write_bytes(b"\xff\xfe\xfa,x\n")

    with pytest.raises(MalformedRecordError) as excinfo:
        read_vocabulary_rows(path)

    assert excinfo.value.row_index == 0
    assert "encoding" in str(excinfo.value)


def test_read_decomposition_rows_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "decomp.tsv"
    path.write_bytes(b"\xff\xfe\tx\n")

    with pytest.raises(MalformedRecordError):
        read_decomposition_rows(path)


def test_load_vocabulary_index_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_vocabulary_index(tmp_path / "missing.csv", verbose=False)


# ---------------------------------------------------------------------------
# Catalog tests


def test_record_from_row_parses_every_field() -> None:
    record = record_from_row(["材", "7", "吅", "木", "4", "才", "3", "DD", "note", "sec"], 0)

    assert record.character == "材"
    assert record.strokes == 7
    assert record.composition_type is CompositionType.horizontal
    assert record.left_component == "木"
    assert record.left_component_strokes == 4
    assert record.right_component == "才"
    assert record.right_component_strokes == 3
    assert (record.signature, record.notes, record.section) == ("DD", "note", "sec")


def test_record_from_row_keeps_unknown_composition_code() -> None:
    record = record_from_row(_decomposition_row("X", code="?"), 0)

    assert record.composition_code == "?"
    assert record.composition_type is None


def test_build_catalog_rejects_wrong_column_count() -> None:
    rows = [_decomposition_row("材"), _decomposition_row("树")[:9]]

    with pytest.raises(MalformedRecordError) as excinfo:
        build_catalog(rows)

    assert excinfo.value.row_index == 1
    assert "row 1" in str(excinfo.value)
    assert "found 9" in str(excinfo.value)


@pytest.mark.parametrize("position", [1, 4, 6])
@pytest.mark.parametrize("value", ["x", "1_0", " 4 ", "３", "", "4.0"])
def test_build_catalog_rejects_bad_stroke_fields(position: int, value: str) -> None:
    row = _decomposition_row("材")
    row[position] = value

    with pytest.raises(MalformedRecordError) as excinfo:
        build_catalog([row])

    assert excinfo.value.row_index == 0


def test_build_catalog_rejects_negative_strokes() -> None:
    with pytest.raises(MalformedRecordError):
        build_catalog([_decomposition_row("材", strokes="-3")])


def test_build_catalog_last_row_wins_for_duplicates() -> None:
    catalog = build_catalog(
        [
            _decomposition_row("材", strokes="7"),
            _decomposition_row("树", strokes="9"),
            _decomposition_row("材", strokes="8", right="寸"),
        ]
    )

    assert list(catalog) == ["材", "树"]
    assert catalog["材"].strokes == 8
    assert catalog["材"].right_component == "寸"


def test_load_catalog_skips_blank_lines_and_keeps_empty_fields(tmp_path: Path) -> None:
    path = tmp_path / "decomp.tsv"
    lines = [
        "\t".join(["材", "7", "吅", "木", "4", "才", "3", "DD", "", ""]),
        "",
        "\t".join(["木", "4", "一", "木", "4", "*", "0", "D", "", ""]),
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    assert len(read_decomposition_rows(path)) == 2
    catalog = load_catalog(path, verbose=False)
    assert catalog["木"].right_component == "*"
    assert catalog["材"].section == ""


def test_load_catalog_reports_path_and_row(tmp_path: Path) -> None:
    path = tmp_path / "decomp.tsv"
    good = "\t".join(_decomposition_row("材"))
    bad = "\t".join(_decomposition_row("树")[:9])
    path.write_text(f"{good}\n{bad}\n", encoding="utf-8")

    with pytest.raises(MalformedRecordError) as excinfo:
        load_catalog(path, verbose=False)

    assert excinfo.value.row_index == 1
    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)
