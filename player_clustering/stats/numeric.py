"""
Descriptive statistics for numeric data.

Only finite real numbers take part in the calculations; ``None``, booleans,
strings, NaN and infinities are dropped before anything is computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from player_clustering.common.utils import is_finite_number
from player_clustering.exceptions import (
    EmptyInputError,
    NoNumericValuesError,
    NoValidValuesError,
)


@dataclass
class NumericStats:
    """Full numeric report for one column or feature dimension."""

    count: int
    min: float
    max: float
    range: float
    mean: float
    sum: float
    median: float
    mode: Optional[float]  # First-encountered value among the most frequent
    variance: float  # Population variance (divisor = count)
    standard_deviation: float


def filter_finite(values: Iterable[Any]) -> List[float]:
    """Keep finite real numbers, in input order, as floats."""
    return [float(v) for v in values if is_finite_number(v)]


def _most_frequent_value(values: Sequence[float]) -> Optional[float]:
    """
    Return the value with the highest occurrence count.

    Ties go to the value encountered first in ``values``. For continuous data
    where every value is unique this is simply the first value.
    """
    frequency: dict[float, int] = {}
    for value in values:
        frequency[value] = frequency.get(value, 0) + 1

    mode = None
    max_freq = 0
    for value, freq in frequency.items():
        if freq > max_freq:
            max_freq = freq
            mode = value
    return mode


def compute_numeric_stats(values: Sequence[Any]) -> NumericStats:
    """
    Calculate basic statistics for numeric data.

    Args:
        values: Sequence of values; non-numeric and non-finite entries are ignored.

    Returns:
        NumericStats with count, min, max, range, mean, sum, median, mode,
        population variance and standard deviation.

    Raises:
        EmptyInputError: If ``values`` is empty.
        NoValidValuesError: If no finite number remains after filtering.

    Example:
        >>> stats = compute_numeric_stats([1, 2, 2, 3, 4])
        >>> stats.median, stats.mode, stats.variance
        (2.0, 2.0, 1.04)
    """
    values = list(values)
    if len(values) == 0:
        raise EmptyInputError("Cannot calculate statistics for empty array")

    numeric_values = filter_finite(values)
    if len(numeric_values) == 0:
        raise NoValidValuesError()

    arr = np.asarray(numeric_values, dtype=float)
    sorted_arr = np.sort(arr)

    count = int(arr.size)
    minimum = float(sorted_arr[0])
    maximum = float(sorted_arr[-1])
    total = float(arr.sum())
    mean = total / count

    # Median: average the two central values for an even count
    mid = count // 2
    if count % 2 == 0:
        median = float((sorted_arr[mid - 1] + sorted_arr[mid]) / 2)
    else:
        median = float(sorted_arr[mid])

    variance = float(np.mean((arr - mean) ** 2))

    return NumericStats(
        count=count,
        min=minimum,
        max=maximum,
        range=maximum - minimum,
        mean=mean,
        sum=total,
        median=median,
        mode=_most_frequent_value(numeric_values),
        variance=variance,
        standard_deviation=float(np.sqrt(variance)),
    )


def analyze_numeric_column(records: Sequence[Mapping[str, Any]], column_key: str) -> NumericStats:
    """
    Calculate statistics for one column of a row-oriented dataset.

    Args:
        records: Rows as mappings (e.g. ``DataFrame.to_dict("records")``).
        column_key: Column to analyze; rows without it count as missing.

    Raises:
        NoNumericValuesError: If the column holds no finite numbers.
    """
    values = filter_finite(row.get(column_key) for row in records)
    if len(values) == 0:
        raise NoNumericValuesError(column_key)
    return compute_numeric_stats(values)


__all__ = [
    "NumericStats",
    "filter_finite",
    "compute_numeric_stats",
    "analyze_numeric_column",
]
