"""Descriptive statistics for numeric and categorical data."""

from player_clustering.stats.numeric import (
    NumericStats,
    analyze_numeric_column,
    compute_numeric_stats,
    filter_finite,
)
from player_clustering.stats.categorical import (
    CategoricalStats,
    FrequencyEntry,
    ModeResult,
    analyze_categorical_column,
    count_unique_values,
    create_frequency_table,
    find_mode,
)
from player_clustering.stats.dataset import (
    DatasetAnalysis,
    analyze_dataset,
    classify_column,
)

__all__ = [
    # Numeric
    "NumericStats",
    "compute_numeric_stats",
    "analyze_numeric_column",
    "filter_finite",
    # Categorical
    "CategoricalStats",
    "FrequencyEntry",
    "ModeResult",
    "count_unique_values",
    "find_mode",
    "create_frequency_table",
    "analyze_categorical_column",
    # Dataset-wide
    "DatasetAnalysis",
    "classify_column",
    "analyze_dataset",
]
