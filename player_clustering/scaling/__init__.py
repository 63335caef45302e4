"""Feature statistics and two-stage scaling."""

from player_clustering.scaling.feature_scaler import (
    FeatureStats,
    ScalingResult,
    analyze_and_scale,
    build_feature_stats,
    scale_dataset,
    scale_value,
)

__all__ = [
    "FeatureStats",
    "ScalingResult",
    "build_feature_stats",
    "scale_value",
    "scale_dataset",
    "analyze_and_scale",
]
