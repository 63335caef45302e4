"""
Feature scaling for distance-based clustering.

Each raw value goes through two stages:
  1. min-max normalization: (raw - min) / (max - min)
  2. standardization:       (normalized - mean) / standard_deviation

Stage 2 uses the mean and standard deviation of the *raw* values of the
dimension, not of the normalized ones. This reproduces the established
scaling of existing reports and is kept on purpose.

A dimension with zero range or zero standard deviation cannot be scaled and
raises DegenerateFeatureError instead of leaking inf/NaN into distances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from player_clustering.exceptions import (
    DegenerateFeatureError,
    EmptyDatasetError,
    MissingStatsError,
    NoValidValuesError,
)
from player_clustering.models import Record, validate_feature_lengths
from player_clustering.stats.numeric import compute_numeric_stats, filter_finite


@dataclass(frozen=True)
class FeatureStats:
    """Per-dimension statistics used for scaling."""

    min: float
    max: float
    mean: float
    standard_deviation: float


@dataclass
class ScalingResult:
    feature_stats: Dict[int, FeatureStats]
    scaled_records: List[Record]


def build_feature_stats(records: Sequence[Record]) -> Dict[int, FeatureStats]:
    """
    Compute FeatureStats for every dimension of the feature vectors.

    The number of dimensions is taken from the first record.

    Raises:
        EmptyDatasetError: If ``records`` is empty.
        NoValidValuesError: If a dimension has no finite value in any record.
    """
    if len(records) == 0:
        raise EmptyDatasetError()

    num_features = records[0].dimensions
    feature_stats: Dict[int, FeatureStats] = {}

    for feature_index in range(num_features):
        feature_values = filter_finite(
            record.features[feature_index]
            for record in records
            if feature_index < record.dimensions
        )
        if len(feature_values) == 0:
            raise NoValidValuesError(dimension=feature_index)

        stats = compute_numeric_stats(feature_values)
        feature_stats[feature_index] = FeatureStats(
            min=stats.min,
            max=stats.max,
            mean=stats.mean,
            standard_deviation=stats.standard_deviation,
        )

    return feature_stats


def scale_value(raw: float, stats: FeatureStats, dimension: Optional[int] = None) -> float:
    """
    Scale a single value with its dimension's statistics.

    Args:
        raw: Raw feature value.
        stats: Statistics of the raw values of the dimension.
        dimension: Index used in error messages only.

    Raises:
        DegenerateFeatureError: If ``stats.max == stats.min`` or
            ``stats.standard_deviation == 0``.
    """
    value_range = stats.max - stats.min
    if value_range == 0:
        raise DegenerateFeatureError(dimension, f"zero range (all values equal {stats.min})")
    if stats.standard_deviation == 0:
        raise DegenerateFeatureError(dimension, "zero standard deviation")

    normalized = (raw - stats.min) / value_range
    return (normalized - stats.mean) / stats.standard_deviation


def scale_dataset(
    records: Sequence[Record], feature_stats: Mapping[int, FeatureStats]
) -> List[Record]:
    """
    Scale every value of every record.

    Raises:
        MissingStatsError: If ``feature_stats`` lacks a dimension in use.
        DegenerateFeatureError: See ``scale_value``.
    """
    scaled = []
    for record in records:
        values = []
        for feature_index, raw in enumerate(record.features):
            stats = feature_stats.get(feature_index)
            if stats is None:
                raise MissingStatsError(feature_index)
            values.append(scale_value(raw, stats, feature_index))
        scaled.append(Record(identity=record.identity, features=tuple(values)))
    return scaled


def analyze_and_scale(records: Sequence[Record]) -> ScalingResult:
    """
    Complete scaling step: validate shapes, build stats, scale.

    This is the entry point the clustering stage consumes.
    """
    if len(records) == 0:
        raise EmptyDatasetError()
    validate_feature_lengths(records)

    feature_stats = build_feature_stats(records)
    scaled_records = scale_dataset(records, feature_stats)

    return ScalingResult(feature_stats=feature_stats, scaled_records=scaled_records)


__all__ = [
    "FeatureStats",
    "ScalingResult",
    "build_feature_stats",
    "scale_value",
    "scale_dataset",
    "analyze_and_scale",
]
