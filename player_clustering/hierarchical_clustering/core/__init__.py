"""Core clustering calculation modules."""

from player_clustering.hierarchical_clustering.core.linkage import (
    DendrogramLevel,
    build_dendrogram,
    euclidean_distance,
    pairwise_distances,
)
from player_clustering.hierarchical_clustering.core.cutter import (
    ClusterGroup,
    cut_dendrogram,
    select_level,
)
from player_clustering.hierarchical_clustering.core.clustering import (
    ClusteringResult,
    HierarchicalClustering,
    HierarchicalClusteringConfig,
    compute_clustering,
)

__all__ = [
    "DendrogramLevel",
    "build_dendrogram",
    "euclidean_distance",
    "pairwise_distances",
    "ClusterGroup",
    "cut_dendrogram",
    "select_level",
    "ClusteringResult",
    "HierarchicalClustering",
    "HierarchicalClusteringConfig",
    "compute_clustering",
]
