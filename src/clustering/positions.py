"""Slots a component can occupy inside a character."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class Position(IntEnum):
    """Component slot. Ordinals give the explicit tie-break order between clusters."""

    primitive = 0
    left = 1
    right = 2
    top = 3
    bottom = 4
    outer = 5
    inner = 6
    middle = 7
    top_repeated = 8
    bottom_repeated = 9
    super_primary = 10
    super_secondary = 11

    @property
    def label(self) -> str:
        return POSITION_LABELS[self]


POSITION_LABELS: Mapping[Position, str] = MappingProxyType(
    {
        Position.primitive: "primitive",
        Position.left: "left",
        Position.right: "right",
        Position.top: "top",
        Position.bottom: "bottom",
        Position.outer: "outer",
        Position.inner: "inner",
        Position.middle: "middle",
        Position.top_repeated: "top repeated",
        Position.bottom_repeated: "bottom repeated",
        Position.super_primary: "primary",
        Position.super_secondary: "secondary",
    }
)


__all__ = ["POSITION_LABELS", "Position"]
