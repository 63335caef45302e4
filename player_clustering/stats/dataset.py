"""
Dataset-wide statistics over heterogeneous tabular rows.

Each column is typed as numeric or categorical and analyzed accordingly.
A column whose analysis fails is reported with a warning and left out of the
result; the remaining columns are still returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence

from player_clustering.common.utils import is_finite_number, log_warn
from player_clustering.config import (
    COLUMN_TYPE_CATEGORICAL,
    COLUMN_TYPE_NUMERIC,
    NUMERIC_COLUMN_THRESHOLD,
)
from player_clustering.exceptions import ClusteringError, EmptyInputError
from player_clustering.stats.categorical import CategoricalStats, analyze_categorical_column
from player_clustering.stats.numeric import NumericStats, analyze_numeric_column


@dataclass
class DatasetAnalysis:
    numeric_columns: Dict[str, NumericStats] = field(default_factory=dict)
    categorical_columns: Dict[str, CategoricalStats] = field(default_factory=dict)
    column_types: Dict[str, str] = field(default_factory=dict)


def classify_column(records: Sequence[Mapping[str, Any]], column_key: str) -> str:
    """
    Determine if a column is numeric or categorical.

    Missing entries are ignored. The column is numeric when at least
    ``NUMERIC_COLUMN_THRESHOLD`` percent of the remaining values are finite
    numbers; an empty column defaults to categorical.
    """
    values = [row.get(column_key) for row in records]
    values = [value for value in values if value is not None]

    if len(values) == 0:
        return COLUMN_TYPE_CATEGORICAL

    numeric_count = sum(1 for value in values if is_finite_number(value))
    numeric_percentage = (numeric_count / len(values)) * 100

    if numeric_percentage >= NUMERIC_COLUMN_THRESHOLD:
        return COLUMN_TYPE_NUMERIC
    return COLUMN_TYPE_CATEGORICAL


def analyze_dataset(records: Sequence[Mapping[str, Any]]) -> DatasetAnalysis:
    """
    Analyze all columns present on the first row.

    Args:
        records: Rows as mappings.

    Returns:
        DatasetAnalysis with per-column statistics and the type of every column.
        Columns that failed analysis still appear in ``column_types``.

    Raises:
        EmptyInputError: If ``records`` is empty.
    """
    if len(records) == 0:
        raise EmptyInputError("Cannot analyze empty dataset")

    analysis = DatasetAnalysis()

    for column in records[0].keys():
        column_type = classify_column(records, column)
        analysis.column_types[column] = column_type

        try:
            if column_type == COLUMN_TYPE_NUMERIC:
                analysis.numeric_columns[column] = analyze_numeric_column(records, column)
            else:
                analysis.categorical_columns[column] = analyze_categorical_column(records, column)
        except (ClusteringError, TypeError) as error:
            # TypeError: unhashable cell values (lists, dicts) in a categorical column
            log_warn(f"Error analyzing column '{column}': {error}")

    return analysis


__all__ = ["DatasetAnalysis", "classify_column", "analyze_dataset"]
