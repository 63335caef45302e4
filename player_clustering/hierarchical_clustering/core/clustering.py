"""
Main clustering calculation.

Combines feature statistics, scaling, dendrogram construction and the final
cut into one call that turns records into named groups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from player_clustering.config import DEFAULT_CLUSTER_COUNT, DEFAULT_SCALE_FEATURES
from player_clustering.hierarchical_clustering.core.cutter import (
    ClusterGroup,
    cut_dendrogram,
)
from player_clustering.hierarchical_clustering.core.linkage import (
    DendrogramLevel,
    build_dendrogram,
    validate_cluster_target,
)
from player_clustering.models import Record, validate_feature_lengths
from player_clustering.scaling.feature_scaler import (
    FeatureStats,
    analyze_and_scale,
    build_feature_stats,
)


@dataclass
class HierarchicalClusteringConfig:
    """Configuration for clustering calculation."""

    n_clusters: int = DEFAULT_CLUSTER_COUNT  # Target number of groups
    scale: bool = DEFAULT_SCALE_FEATURES  # Cluster scaled vectors instead of raw ones

    def __post_init__(self):
        validate_cluster_target(self.n_clusters)


@dataclass
class ClusteringResult:
    """Result of clustering calculation."""

    feature_stats: Dict[int, FeatureStats]  # Stats of the raw values per dimension
    clusters: List[ClusterGroup]  # Final groups, ordered by first member
    levels: List[DendrogramLevel] = field(default_factory=list)  # Full merge history
    scaled_records: Optional[List[Record]] = None  # None when scaling is disabled


class HierarchicalClustering:
    """Records -> feature stats -> (scaled) vectors -> dendrogram -> groups."""

    def __init__(self, config: Optional[HierarchicalClusteringConfig] = None):
        self.config = config or HierarchicalClusteringConfig()

    def compute(self, records: Sequence[Record]) -> ClusteringResult:
        """
        Cluster records.

        Args:
            records: Non-empty sequence of records with equal-length features.

        Returns:
            ClusteringResult with feature stats, final groups and dendrogram levels.

        Raises:
            EmptyInputError: If ``records`` is empty.
            FeatureLengthMismatchError: If feature lengths differ.
            DegenerateFeatureError: If scaling hits a constant dimension.
            NoValidValuesError: If raw distances overflow float64.
        """
        if self.config.scale:
            scaling = analyze_and_scale(records)
            feature_stats = scaling.feature_stats
            scaled_records = scaling.scaled_records
            vectors = [record.features for record in scaled_records]
        else:
            validate_feature_lengths(records)
            feature_stats = build_feature_stats(records)
            scaled_records = None
            vectors = [record.features for record in records]

        levels = build_dendrogram(vectors, self.config.n_clusters)
        identities = [record.identity for record in records]
        clusters = cut_dendrogram(levels, identities, self.config.n_clusters)

        return ClusteringResult(
            feature_stats=feature_stats,
            clusters=clusters,
            levels=levels,
            scaled_records=scaled_records,
        )


def compute_clustering(
    records: Sequence[Record],
    config: Optional[HierarchicalClusteringConfig] = None,
) -> ClusteringResult:
    """Convenience function to compute clustering."""
    clustering = HierarchicalClustering(config)
    return clustering.compute(records)


__all__ = [
    "HierarchicalClusteringConfig",
    "ClusteringResult",
    "HierarchicalClustering",
    "compute_clustering",
]
