"""Deterministic ordering of clusters, their characters, and each character's vocabulary."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Tuple

from .records import Cluster, KnownCharacter


def sort_character(character: KnownCharacter) -> KnownCharacter:
    """Return ``character`` with its vocabulary ordered by term."""
    return replace(character, vocabulary=tuple(sorted(character.vocabulary, key=lambda entry: entry.term)))


def sort_cluster(cluster: Cluster) -> Cluster:
    """Order members by stroke count (stable on ties) and sort each member's vocabulary."""
    members = sorted(cluster.characters, key=lambda known: known.strokes)
    return replace(cluster, characters=tuple(sort_character(known) for known in members))


def _cluster_order(cluster: Cluster, order_ties: bool) -> Tuple[object, ...]:
    if order_ties:
        return (-cluster.size, cluster.component, int(cluster.position))
    return (-cluster.size,)


def sort_clusters(clusters: Iterable[Cluster], *, order_ties: bool = False) -> List[Cluster]:
    """
    Largest clusters first.

    Equal-size clusters keep their incoming order unless ``order_ties`` is set,
    in which case they are ordered by component and then position.
    """
    ordered = sorted(clusters, key=lambda cluster: _cluster_order(cluster, order_ties))
    return [sort_cluster(cluster) for cluster in ordered]


__all__ = ["sort_character", "sort_cluster", "sort_clusters"]
