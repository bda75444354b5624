"""
Group characters that share a component in the same position.
"""

from __future__ import annotations

import sys
from typing import Dict, List, Mapping, Sequence

from src.lexicon.records import CharacterRecord, VocabularyEntry

from .extraction import extract_component_positions
from .records import Cluster, ClusterResult, GroupKey, KnownCharacter


def attach_vocabulary(
    catalog: Mapping[str, CharacterRecord],
    vocabulary_index: Mapping[str, Sequence[VocabularyEntry]],
) -> List[KnownCharacter]:
    """Keep catalog characters that appear in the vocabulary, in catalog order."""
    known: List[KnownCharacter] = []
    for char, record in catalog.items():
        entries = vocabulary_index.get(char)
        if not entries:
            continue
        known.append(KnownCharacter(record=record, vocabulary=tuple(entries)))
    return known


def group_by_component(known: Sequence[KnownCharacter]) -> Dict[GroupKey, List[KnownCharacter]]:
    """Bucket characters by every (component, position) pair they contribute, in first-seen key order."""
    groups: Dict[GroupKey, List[KnownCharacter]] = {}
    for character in known:
        for component, positions in extract_component_positions(character.record).items():
            for position in sorted(positions):
                groups.setdefault((component, position), []).append(character)
    return groups


def build_clusters(
    catalog: Mapping[str, CharacterRecord],
    vocabulary_index: Mapping[str, Sequence[VocabularyEntry]],
    *,
    verbose: bool = False,
) -> ClusterResult:
    """
    Split component groups into clusters (two or more members) and singletons.

    Membership is exact equality on (component, position); groups for the same
    component in different positions are never merged.
    """
    known = attach_vocabulary(catalog, vocabulary_index)
    clusters: List[Cluster] = []
    singletons: Dict[GroupKey, KnownCharacter] = {}
    for (component, position), members in group_by_component(known).items():
        if len(members) < 2:
            singletons[(component, position)] = members[0]
        else:
            clusters.append(Cluster(component=component, position=position, characters=tuple(members)))

    if verbose:
        print(
            f"[clustering] {len(known)} of {len(catalog)} characters have vocabulary; "
            f"built {len(clusters)} clusters, {len(singletons)} isolated pairs",
            file=sys.stderr,
        )
    return ClusterResult(clusters=tuple(clusters), singletons=singletons)


__all__ = ["attach_vocabulary", "build_clusters", "group_by_component"]
