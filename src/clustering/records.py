"""Records produced by the cluster builder and sorter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from src.lexicon.records import CharacterRecord, VocabularyEntry

from .positions import Position

GroupKey = Tuple[str, Position]


@dataclass(frozen=True)
class KnownCharacter:
    """A catalog record paired with the vocabulary that uses the character."""

    record: CharacterRecord
    vocabulary: Tuple[VocabularyEntry, ...]

    @property
    def character(self) -> str:
        return self.record.character

    @property
    def strokes(self) -> int:
        return self.record.strokes


@dataclass(frozen=True)
class Cluster:
    """Two or more characters sharing one component in the same position."""

    component: str
    position: Position
    characters: Tuple[KnownCharacter, ...]

    def __post_init__(self) -> None:
        if len(self.characters) < 2:
            raise ValueError(
                f"A cluster needs at least two characters; {self.component!r}/{self.position.label} "
                f"has {len(self.characters)}."
            )

    @property
    def key(self) -> GroupKey:
        return (self.component, self.position)

    @property
    def size(self) -> int:
        return len(self.characters)


@dataclass(frozen=True)
class ClusterResult:
    """Builder output: true clusters plus the (component, position) keys only one character reached."""

    clusters: Tuple[Cluster, ...]
    singletons: Dict[GroupKey, KnownCharacter]

    @property
    def isolated(self) -> Tuple[KnownCharacter, ...]:
        """Characters behind the singleton keys, de-duplicated in first-seen order."""
        seen: Dict[str, KnownCharacter] = {}
        for known in self.singletons.values():
            seen.setdefault(known.character, known)
        return tuple(seen.values())


__all__ = ["Cluster", "ClusterResult", "GroupKey", "KnownCharacter"]
