"""Position-aware grouping of characters by shared component."""

from .builder import attach_vocabulary, build_clusters, group_by_component
from .extraction import extract_component_positions
from .positions import POSITION_LABELS, Position
from .records import Cluster, ClusterResult, GroupKey, KnownCharacter
from .sorting import sort_clusters

__all__ = [
    "POSITION_LABELS",
    "Cluster",
    "ClusterResult",
    "GroupKey",
    "KnownCharacter",
    "Position",
    "attach_vocabulary",
    "build_clusters",
    "extract_component_positions",
    "group_by_component",
    "sort_clusters",
]
