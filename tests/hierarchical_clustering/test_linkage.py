"""
Tests for linkage module.
"""
import itertools
import math

import numpy as np
import pytest

from player_clustering.exceptions import (
    EmptyInputError,
    FeatureLengthMismatchError,
    InvalidClusterTargetError,
    NoValidValuesError,
)
from player_clustering.hierarchical_clustering.core.linkage import (
    DendrogramLevel,
    build_dendrogram,
    euclidean_distance,
    pairwise_distances,
    validate_cluster_target,
)

# dark_blue, navy_blue, off_white, purple
COLOR_VECTORS = [
    [20, 20, 80],
    [22, 22, 90],
    [250, 255, 253],
    [100, 54, 255],
]


def _sample_vectors(n=30, dims=3):
    """Generate sample vectors."""
    np.random.seed(42)
    return np.random.randn(n, dims).tolist()


def _single_linkage_distance(vectors, a, b):
    return min(euclidean_distance(vectors[i], vectors[j]) for i in a for j in b)


def test_euclidean_distance():
    """Test Euclidean distance."""
    assert euclidean_distance([0, 0], [3, 4]) == 5.0
    assert euclidean_distance([1, 2, 3], [1, 2, 3]) == 0.0
    assert euclidean_distance(COLOR_VECTORS[0], COLOR_VECTORS[1]) == pytest.approx(
        math.sqrt(108)
    )


def test_pairwise_distances_symmetric():
    """Test distance matrix is symmetric with a zero diagonal."""
    matrix = pairwise_distances(np.asarray(COLOR_VECTORS, dtype=float))

    assert matrix.shape == (4, 4)
    assert np.array_equal(matrix, matrix.T)
    assert np.all(np.diag(matrix) == 0)
    assert matrix[1, 3] == pytest.approx(185.29, abs=0.01)


def test_validate_cluster_target():
    """Test cluster target validation."""
    assert validate_cluster_target(3) == 3
    assert validate_cluster_target(np.int64(2)) == 2
    for bad in (0, -1, 2.5, "3", None, True):
        with pytest.raises(InvalidClusterTargetError):
            validate_cluster_target(bad)


def test_build_dendrogram_color_scenario():
    """Test merge order and final partition for the colour example."""
    levels = build_dendrogram(COLOR_VECTORS, min_clusters=2)

    assert [level.n_clusters for level in levels] == [4, 3, 2]
    assert levels[0].clusters == ((0,), (1,), (2,), (3,))
    assert levels[0].merge_distance is None
    assert levels[0].merged is None

    # dark_blue + navy_blue first
    assert levels[1].clusters == ((0, 1), (2,), (3,))
    assert levels[1].merge_distance == pytest.approx(10.39, abs=0.01)
    assert levels[1].merged == (0, 1)

    # purple joins through navy_blue before off_white
    assert levels[2].clusters == ((0, 1, 3), (2,))
    assert levels[2].merge_distance == pytest.approx(185.29, abs=0.01)
    assert levels[2].merged == (0, 2)


def test_build_dendrogram_to_single_cluster():
    """Test merging down to one cluster."""
    levels = build_dendrogram(COLOR_VECTORS, min_clusters=1)

    assert levels[-1].clusters == ((0, 1, 2, 3),)
    # off_white joins last via its nearest member (purple)
    assert levels[-1].merge_distance == pytest.approx(250.8, abs=0.1)


def test_build_dendrogram_target_at_or_above_record_count():
    """Test target >= n short-circuits to the singleton level."""
    for target in (4, 10):
        levels = build_dendrogram(COLOR_VECTORS, min_clusters=target)
        assert len(levels) == 1
        assert levels[0].clusters == ((0,), (1,), (2,), (3,))


def test_build_dendrogram_invalid_target():
    """Test invalid targets raise InvalidClusterTargetError."""
    with pytest.raises(InvalidClusterTargetError):
        build_dendrogram(COLOR_VECTORS, min_clusters=0)
    with pytest.raises(InvalidClusterTargetError):
        build_dendrogram(COLOR_VECTORS, min_clusters=1.5)


def test_build_dendrogram_empty():
    """Test empty input raises EmptyInputError."""
    with pytest.raises(EmptyInputError):
        build_dendrogram([], min_clusters=1)


def test_build_dendrogram_length_mismatch():
    """Test vectors of different length are rejected."""
    with pytest.raises(FeatureLengthMismatchError):
        build_dendrogram([[1.0, 2.0], [1.0]], min_clusters=1)


def test_build_dendrogram_non_finite():
    """Test NaN in vectors is rejected."""
    with pytest.raises(NoValidValuesError, match="non-finite"):
        build_dendrogram([[1.0], [float("nan")]], min_clusters=1)


def test_build_dendrogram_single_record():
    """Test one record yields one singleton level."""
    levels = build_dendrogram([[1.0, 2.0]], min_clusters=1)

    assert len(levels) == 1
    assert levels[0].clusters == ((0,),)


def test_build_dendrogram_tie_break_lowest_pair_first():
    """Test equal distances merge the lowest position pair first."""
    # Points on a line with unit gaps: every neighbouring pair is at distance 1
    vectors = [[0.0], [1.0], [2.0], [3.0]]

    levels = build_dendrogram(vectors, min_clusters=1)

    assert levels[1].clusters == ((0, 1), (2,), (3,))
    assert levels[1].merged == (0, 1)
    assert levels[2].clusters == ((0, 1, 2), (3,))
    assert levels[3].clusters == ((0, 1, 2, 3),)


def test_build_dendrogram_tie_break_is_reproducible():
    """Test repeated runs produce identical levels."""
    vectors = [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0], [5.0, 5.0]]

    first = build_dendrogram(vectors, min_clusters=1)
    second = build_dendrogram(vectors, min_clusters=1)

    assert first == second
    # Square corners: (0,1), (0,2) and (1,3) all tie at 1.0; (0,1) is lowest
    assert first[1].clusters == ((0, 1), (2,), (3,), (4,))


def test_build_dendrogram_levels_partition_all_records():
    """Test every level is a partition of all indices."""
    vectors = _sample_vectors()
    levels = build_dendrogram(vectors, min_clusters=1)

    for level in levels:
        members = list(itertools.chain.from_iterable(level.clusters))
        assert sorted(members) == list(range(len(vectors)))
        assert all(len(cluster) > 0 for cluster in level.clusters)


def test_build_dendrogram_count_decreases_by_one():
    """Test cluster count drops by exactly one per level."""
    levels = build_dendrogram(_sample_vectors(), min_clusters=3)

    counts = [level.n_clusters for level in levels]
    assert counts == list(range(30, 2, -1))


def test_build_dendrogram_merge_distances_non_decreasing():
    """Test the ultrametric property of single linkage."""
    levels = build_dendrogram(_sample_vectors(), min_clusters=1)

    distances = [level.merge_distance for level in levels[1:]]
    assert all(b >= a for a, b in zip(distances, distances[1:]))


def test_build_dendrogram_merge_distance_is_single_linkage():
    """Test recorded distances equal the brute-force single-linkage distance."""
    vectors = _sample_vectors(n=12)
    levels = build_dendrogram(vectors, min_clusters=1)

    for previous, level in zip(levels, levels[1:]):
        i, j = level.merged
        expected = _single_linkage_distance(
            vectors, previous.clusters[i], previous.clusters[j]
        )
        assert level.merge_distance == pytest.approx(expected)


def test_build_dendrogram_clusters_ordered_by_lowest_member():
    """Test clusters stay ordered by their first record index."""
    levels = build_dendrogram(_sample_vectors(), min_clusters=1)

    for level in levels:
        firsts = [cluster[0] for cluster in level.clusters]
        assert firsts == sorted(firsts)
        assert all(list(cluster) == sorted(cluster) for cluster in level.clusters)


def test_dendrogram_level_defaults():
    """Test DendrogramLevel defaults."""
    level = DendrogramLevel(clusters=((0,), (1,)))

    assert level.n_clusters == 2
    assert level.merge_distance is None
    assert level.merged is None


def test_euclidean_distance_rows_against_vector():
    """Test a matrix of rows yields one distance per row."""
    distances = euclidean_distance(np.array([[0.0, 0.0], [3.0, 4.0], [6.0, 8.0]]), [0.0, 0.0])

    np.testing.assert_allclose(distances, [0.0, 5.0, 10.0])


def test_build_dendrogram_distance_overflow():
    """Test finite coordinates whose distances overflow are rejected."""
    with pytest.raises(NoValidValuesError, match="Pairwise distance overflow"):
        build_dendrogram([[1e200], [-1e200], [3e200]], min_clusters=1)


def test_build_dendrogram_large_coordinates_keep_all_records():
    """Test large but representable distances still partition every record."""
    vectors = [[1e150], [2e150], [1e151]]
    levels = build_dendrogram(vectors, min_clusters=1)

    for level in levels:
        assert sorted(itertools.chain.from_iterable(level.clusters)) == [0, 1, 2]
    assert levels[1].clusters == ((0, 1), (2,))
    assert levels[-1].clusters == ((0, 1, 2),)
