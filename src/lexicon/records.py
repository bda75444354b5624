"""Input records shared by the vocabulary index and the character catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CompositionType(str, Enum):
    """Structural pattern of a decomposition, keyed by the glyph code used in the database.

    primitive: not composed; only the first slot is meaningful
    horizontal / vertical: two parts side by side or stacked
    inclusion: second part enclosed by the first
    vertical_repetition: stacked, the top part being a repetition
    horizontal_of_three: three parts side by side, the third repeating the first
    repetition_of_three / repetition_of_four: first part repeated, second slot unused
    vertical_separated: stacked, separated by a cover stroke
    superposition: graphical superposition or addition
    """

    primitive = "一"
    horizontal = "吅"
    vertical = "吕"
    inclusion = "回"
    vertical_repetition = "咒"
    horizontal_of_three = "弼"
    repetition_of_three = "品"
    repetition_of_four = "叕"
    vertical_separated = "冖"
    superposition = "+"


def parse_composition_type(code: str) -> Optional[CompositionType]:
    """Return the composition type for a glyph code, or None when the code is unknown."""
    try:
        return CompositionType(code)
    except ValueError:
        return None


@dataclass(frozen=True)
class VocabularyEntry:
    """One vocabulary row; every field except ``term`` may be empty."""

    term: str
    pinyin: str = ""
    part_of_speech: str = ""
    translation: str = ""


@dataclass(frozen=True)
class CharacterRecord:
    """Single-level decomposition of one character."""

    character: str
    strokes: int
    composition_code: str
    left_component: str
    left_component_strokes: int
    right_component: str
    right_component_strokes: int
    signature: str = ""
    notes: str = ""
    section: str = ""

    @property
    def composition_type(self) -> Optional[CompositionType]:
        return parse_composition_type(self.composition_code)


__all__ = ["CharacterRecord", "CompositionType", "VocabularyEntry", "parse_composition_type"]
