"""
Derive the (component, position) pairs a single character contributes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Set, Tuple

from src.lexicon.config import NO_COMPONENT
from src.lexicon.records import CharacterRecord, CompositionType

from .positions import Position

ComponentPositions = Dict[str, FrozenSet[Position]]


# (first slot positions, second slot positions) per composition type. An empty
# second entry means the type only defines its first component.
_LAYOUT_TABLE: Mapping[CompositionType, Tuple[FrozenSet[Position], FrozenSet[Position]]] = MappingProxyType(
    {
        CompositionType.primitive: (frozenset({Position.primitive}), frozenset()),
        CompositionType.horizontal: (frozenset({Position.left}), frozenset({Position.right})),
        CompositionType.vertical: (frozenset({Position.top}), frozenset({Position.bottom})),
        CompositionType.inclusion: (frozenset({Position.outer}), frozenset({Position.inner})),
        CompositionType.vertical_repetition: (
            frozenset({Position.top_repeated}),
            frozenset({Position.bottom}),
        ),
        CompositionType.horizontal_of_three: (
            frozenset({Position.left, Position.right}),
            frozenset({Position.middle}),
        ),
        CompositionType.repetition_of_three: (frozenset({Position.top}), frozenset()),
        CompositionType.repetition_of_four: (frozenset({Position.top_repeated}), frozenset()),
        CompositionType.vertical_separated: (frozenset({Position.top}), frozenset({Position.bottom})),
        CompositionType.superposition: (
            frozenset({Position.super_primary}),
            frozenset({Position.super_secondary}),
        ),
    }
)

_missing = set(CompositionType) - set(_LAYOUT_TABLE)
if _missing:
    raise RuntimeError(f"No component layout for composition types: {sorted(t.name for t in _missing)}")


def layout_for(composition_type: CompositionType) -> Tuple[FrozenSet[Position], FrozenSet[Position]]:
    """Return the first/second slot positions registered for ``composition_type``."""
    return _LAYOUT_TABLE[composition_type]


def extract_component_positions(record: CharacterRecord) -> ComponentPositions:
    """
    Map each component of ``record`` to the positions it occupies.

    Unknown composition types contribute nothing. A second component equal to
    ``NO_COMPONENT`` is dropped. When both slots name the same component its
    positions are merged.
    """
    composition_type = record.composition_type
    if composition_type is None:
        return {}

    left_positions, right_positions = _LAYOUT_TABLE[composition_type]
    merged: Dict[str, Set[Position]] = {}
    merged.setdefault(record.left_component, set()).update(left_positions)
    if right_positions and record.right_component != NO_COMPONENT:
        merged.setdefault(record.right_component, set()).update(right_positions)
    return {component: frozenset(positions) for component, positions in merged.items()}


__all__ = ["ComponentPositions", "extract_component_positions", "layout_for"]
