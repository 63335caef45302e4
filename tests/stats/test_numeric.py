"""
Tests for numeric statistics module.
"""
import math

import numpy as np
import pytest

from player_clustering.exceptions import (
    EmptyInputError,
    NoNumericValuesError,
    NoValidValuesError,
)
from player_clustering.stats.numeric import (
    NumericStats,
    analyze_numeric_column,
    compute_numeric_stats,
    filter_finite,
)


def _sample_values(length=101):
    """Generate sample values."""
    np.random.seed(42)
    return list(50.0 + np.random.randn(length) * 10.0)


def test_compute_numeric_stats_reference_scenario():
    """Test the [1, 2, 2, 3, 4] reference values."""
    stats = compute_numeric_stats([1, 2, 2, 3, 4])

    assert isinstance(stats, NumericStats)
    assert stats.count == 5
    assert stats.min == 1
    assert stats.max == 4
    assert stats.range == 3
    assert stats.sum == 12
    assert stats.mean == pytest.approx(2.4)
    assert stats.median == 2
    assert stats.mode == 2
    assert stats.variance == pytest.approx(1.04)
    assert stats.standard_deviation == pytest.approx(1.0198, abs=1e-4)


def test_compute_numeric_stats_even_count_median():
    """Test median averages the two central values for an even count."""
    stats = compute_numeric_stats([4, 1, 3, 2])

    assert stats.median == 2.5


def test_compute_numeric_stats_unsorted_odd_median():
    """Test median uses the sorted order."""
    stats = compute_numeric_stats([9, 1, 5])

    assert stats.median == 5


def test_compute_numeric_stats_mode_tie_takes_first_encountered():
    """Test numeric mode returns the first value among tied frequencies."""
    stats = compute_numeric_stats([3, 1, 1, 3, 2])

    assert stats.mode == 3


def test_compute_numeric_stats_all_unique_mode_is_first_value():
    """Test mode for continuous data with no repeats."""
    stats = compute_numeric_stats([0.5, 0.1, 0.9])

    assert stats.mode == 0.5


def test_compute_numeric_stats_filters_invalid_values():
    """Test that non-numeric, NaN, infinite and boolean entries are ignored."""
    stats = compute_numeric_stats([1, "x", None, float("nan"), float("inf"), True, 3])

    assert stats.count == 2
    assert stats.mean == 2
    assert stats.sum == 4


def test_compute_numeric_stats_accepts_numpy_scalars():
    """Test numpy scalar values are treated as numbers."""
    stats = compute_numeric_stats([np.float64(1.5), np.int64(2), np.float32(3.5)])

    assert stats.count == 3
    assert stats.max == 3.5


def test_compute_numeric_stats_empty_input():
    """Test empty input raises EmptyInputError."""
    with pytest.raises(EmptyInputError, match="empty array"):
        compute_numeric_stats([])


def test_compute_numeric_stats_no_valid_values():
    """Test input without finite numbers raises NoValidValuesError."""
    with pytest.raises(NoValidValuesError, match="No valid numeric values"):
        compute_numeric_stats(["a", None, float("nan")])


def test_compute_numeric_stats_errors_are_value_errors():
    """Test pipeline errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        compute_numeric_stats([])


def test_compute_numeric_stats_properties_hold():
    """Test ordering and variance properties on random data."""
    values = _sample_values()
    stats = compute_numeric_stats(values)

    assert stats.min <= stats.median <= stats.max
    assert stats.variance >= 0
    assert stats.standard_deviation == pytest.approx(math.sqrt(stats.variance))
    assert stats.variance == pytest.approx(np.var(values))
    assert stats.median == pytest.approx(np.median(values))


def test_compute_numeric_stats_mode_frequency_is_maximal():
    """Test the numeric mode is among the most frequent values."""
    values = [5, 7, 7, 5, 9, 7]
    stats = compute_numeric_stats(values)

    mode_freq = values.count(stats.mode)
    assert all(mode_freq >= values.count(v) for v in values)


def test_compute_numeric_stats_single_value():
    """Test a single value gives zero variance."""
    stats = compute_numeric_stats([7])

    assert stats.min == stats.max == stats.median == stats.mean == 7
    assert stats.range == 0
    assert stats.variance == 0
    assert stats.standard_deviation == 0


def test_filter_finite_preserves_order():
    """Test filter_finite keeps order and converts to float."""
    assert filter_finite([3, "a", 1.5, None, 2]) == [3.0, 1.5, 2.0]


def test_analyze_numeric_column():
    """Test column analysis over mapping rows."""
    rows = [
        {"name": "a", "points": 10},
        {"name": "b", "points": "n/a"},
        {"name": "c", "points": 30},
        {"name": "d"},
    ]

    stats = analyze_numeric_column(rows, "points")

    assert stats.count == 2
    assert stats.mean == 20


def test_analyze_numeric_column_without_numbers():
    """Test NoNumericValuesError names the column."""
    rows = [{"team": "red"}, {"team": "blue"}]

    with pytest.raises(NoNumericValuesError, match="column 'team'") as excinfo:
        analyze_numeric_column(rows, "team")

    assert excinfo.value.column == "team"
