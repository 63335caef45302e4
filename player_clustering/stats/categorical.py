"""
Descriptive statistics for categorical data.

Frequencies are counted in a plain dict, so every tie-break below falls back to
the order in which values were first encountered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Sequence, Tuple

from player_clustering.exceptions import NoValuesError


@dataclass
class FrequencyEntry:
    value: Hashable
    count: int
    percentage: float  # 100 * count / total


@dataclass
class ModeResult:
    """All values tied at the highest frequency, plus that frequency."""

    mode: List[Hashable]
    count: int


@dataclass
class CategoricalStats:
    total_count: int
    unique_count: int
    mode: List[Hashable]
    mode_count: int
    frequency_table: List[FrequencyEntry] = field(default_factory=list)


def _frequency_key(value: Hashable) -> Tuple[bool, Hashable]:
    # True == 1 == 1.0 as dict keys; booleans are counted separately
    return (isinstance(value, bool), value)


def _count_frequencies(values: Sequence[Hashable]) -> List[Tuple[Hashable, int]]:
    """(value, count) pairs in first-encounter order."""
    counts: Dict[Tuple[bool, Hashable], List[Any]] = {}
    for value in values:
        key = _frequency_key(value)
        if key in counts:
            counts[key][1] += 1
        else:
            counts[key] = [value, 1]
    return [(value, count) for value, count in counts.values()]


def count_unique_values(values: Sequence[Hashable]) -> int:
    """Number of distinct values. Booleans never coincide with numbers."""
    return len({_frequency_key(value) for value in values})


def find_mode(values: Sequence[Hashable]) -> ModeResult:
    """
    Find the most frequent value(s).

    Unlike the numeric mode this returns every value tied at the maximum
    frequency, in first-encounter order. An empty input yields ``mode=[]`` and
    ``count=0``.
    """
    frequency = _count_frequencies(values)
    max_freq = max((freq for _, freq in frequency), default=0)
    modes = [value for value, freq in frequency if freq == max_freq]
    return ModeResult(mode=modes, count=max_freq)


def create_frequency_table(values: Sequence[Hashable]) -> List[FrequencyEntry]:
    """
    Build one entry per distinct value, sorted by descending count.

    The sort is stable, so values with equal counts keep first-encounter order.
    """
    total = len(values)
    frequency = _count_frequencies(values)
    table = [
        FrequencyEntry(value=value, count=count, percentage=(count / total) * 100)
        for value, count in frequency
    ]
    return sorted(table, key=lambda entry: entry.count, reverse=True)


def analyze_categorical_column(records: Sequence[Mapping[str, Any]], column_key: str) -> CategoricalStats:
    """
    Analyze a categorical column of a row-oriented dataset.

    ``None`` entries (and rows lacking the column) are treated as missing.

    Raises:
        NoValuesError: If the column holds only missing values.
    """
    values = [row.get(column_key) for row in records]
    values = [value for value in values if value is not None]

    if len(values) == 0:
        raise NoValuesError(column_key)

    mode_result = find_mode(values)
    return CategoricalStats(
        total_count=len(values),
        unique_count=count_unique_values(values),
        mode=mode_result.mode,
        mode_count=mode_result.count,
        frequency_table=create_frequency_table(values),
    )


__all__ = [
    "FrequencyEntry",
    "ModeResult",
    "CategoricalStats",
    "count_unique_values",
    "find_mode",
    "create_frequency_table",
    "analyze_categorical_column",
]
