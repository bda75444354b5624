"""Tabular overview of the sorted clusters."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from src.clustering.records import Cluster

SUMMARY_COLUMNS = ("rank", "component", "position", "size", "characters", "vocabulary")


def cluster_summary(clusters: Sequence[Cluster]) -> pd.DataFrame:
    """One row per cluster, keeping the order of ``clusters``."""
    return pd.DataFrame(
        {
            "rank": list(range(1, len(clusters) + 1)),
            "component": [cluster.component for cluster in clusters],
            "position": [cluster.position.label for cluster in clusters],
            "size": [cluster.size for cluster in clusters],
            "characters": ["".join(known.character for known in cluster.characters) for cluster in clusters],
            "vocabulary": [sum(len(known.vocabulary) for known in cluster.characters) for cluster in clusters],
        },
        columns=list(SUMMARY_COLUMNS),
    )


def write_cluster_summary(clusters: Sequence[Cluster], path: Path) -> pd.DataFrame:
    """Write the summary table as CSV and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = cluster_summary(clusters)
    frame.to_csv(path, index=False, encoding="utf-8")
    return frame


__all__ = ["SUMMARY_COLUMNS", "cluster_summary", "write_cluster_summary"]
