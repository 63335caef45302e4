"""
Hierarchical Clustering Module.

Deterministic, explainable grouping of entities by their feature vectors.
Each feature is scaled with its own statistics, then an agglomerative
single-linkage tree is built bottom-up and cut at the requested number of
groups.

Key design decisions:
  - No trained model: the same input always yields the same groups.
  - Single linkage with Euclidean distance; ties between equally close
    cluster pairs are broken by lowest position pair.
  - Every intermediate partition is kept, so the merge history can be shown
    next to the final groups.

Notes:
  - Naive O(n^3) merging. Suited to rosters and squads (hundreds to a few
    thousand entities), not to large datasets.
  - Single linkage chains: one intermediate entity can bridge two groups.
"""

from player_clustering.hierarchical_clustering.core.clustering import (
    ClusteringResult,
    HierarchicalClustering,
    HierarchicalClusteringConfig,
    compute_clustering,
)

__all__ = [
    "ClusteringResult",
    "HierarchicalClustering",
    "HierarchicalClusteringConfig",
    "compute_clustering",
]
