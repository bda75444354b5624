"""Render sorted clusters as a Markdown report."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from src.clustering.records import Cluster, KnownCharacter

VOCABULARY_TABLE_HEADER = "| Term | Pinyin | PoS | Translation |"
VOCABULARY_TABLE_RULE = "| --- | --- | --- | --- |"


def _character_lines(known: KnownCharacter) -> Iterator[str]:
    yield f"### {known.character} vocabulary"
    yield VOCABULARY_TABLE_HEADER
    yield VOCABULARY_TABLE_RULE
    for entry in known.vocabulary:
        yield f"| {entry.term} | {entry.pinyin} | {entry.part_of_speech} | {entry.translation} |"


def cluster_lines(cluster: Cluster) -> List[str]:
    """Lines for a single cluster, in the order the cluster already holds its members."""
    lines = [
        f"# Cluster for {cluster.component} in position {cluster.position.label}",
        "## " + "".join(known.character for known in cluster.characters),
    ]
    for known in cluster.characters:
        lines.extend(_character_lines(known))
    return lines


def render_report(clusters: Iterable[Cluster]) -> str:
    """Join every cluster section into one newline-terminated document."""
    lines: List[str] = []
    for cluster in clusters:
        lines.extend(cluster_lines(cluster))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


__all__ = ["VOCABULARY_TABLE_HEADER", "VOCABULARY_TABLE_RULE", "cluster_lines", "render_report"]
