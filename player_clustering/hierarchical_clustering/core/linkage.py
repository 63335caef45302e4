"""
Agglomerative single-linkage clustering with Euclidean distance.

Starts from one singleton cluster per vector and repeatedly merges the two
closest clusters, where the distance between clusters is the minimum distance
between any pair of their members. Every intermediate partition is kept as a
DendrogramLevel, from n clusters down to the requested target.

Key design decisions:
  - Clusters are kept ordered by their lowest member index. A merge of the
    clusters at positions i < j stores the union at position i and drops j,
    which preserves that ordering.
  - Ties between equally close pairs go to the lexicographically lowest
    (i, j) position pair, so results are reproducible.
  - The cluster distance matrix is updated in place with the single-linkage
    rule d(A+B, C) = min(d(A, C), d(B, C)) instead of re-scanning members.

Notes:
  - O(n^2) memory and O(n^3) time in total. Intended for hundreds to low
    thousands of records.
  - Single linkage is an ultrametric: merge distances never decrease.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from player_clustering.exceptions import (
    EmptyInputError,
    FeatureLengthMismatchError,
    InvalidClusterTargetError,
    NoValidValuesError,
)


@dataclass(frozen=True)
class DendrogramLevel:
    """A partition of all record indices at one stage of the merge sequence."""

    clusters: Tuple[Tuple[int, ...], ...]  # Ordered by lowest member index
    merge_distance: Optional[float] = None  # None for the all-singleton level
    merged: Optional[Tuple[int, int]] = None  # Positions merged in the previous level

    @property
    def n_clusters(self) -> int:
        return len(self.clusters)


def validate_cluster_target(target) -> int:
    """Return ``target`` as int or raise InvalidClusterTargetError."""
    if isinstance(target, bool) or not isinstance(target, numbers.Integral):
        raise InvalidClusterTargetError(target)
    if target < 1:
        raise InvalidClusterTargetError(target)
    return int(target)


def euclidean_distance(a, b):
    """
    sqrt(sum((a_i - b_i)^2)) over the last axis.

    Broadcasts like numpy, so ``a`` may be a matrix of row vectors; a float is
    returned for two plain vectors, an array of row distances otherwise.
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    distance = np.sqrt(np.sum(diff ** 2, axis=-1))
    return float(distance) if np.ndim(distance) == 0 else distance


def pairwise_distances(vectors: np.ndarray) -> np.ndarray:
    """
    Full Euclidean distance matrix.

    Computed one row at a time to keep memory at O(n^2) rather than
    O(n^2 * D). The result is exactly symmetric with zeros on the diagonal.
    Squares that overflow float64 come out as inf rather than warning.
    """
    n = vectors.shape[0]
    distances = np.zeros((n, n), dtype=float)
    with np.errstate(over="ignore"):
        for i in range(n):
            distances[i] = euclidean_distance(vectors, vectors[i])
    return distances


def _to_matrix(vectors) -> np.ndarray:
    """Convert input vectors to a 2-D float array, validating shape and values."""
    rows = [np.asarray(vector, dtype=float) for vector in vectors]
    if len(rows) == 0:
        raise EmptyInputError("Cannot cluster an empty set of vectors")

    expected = rows[0].size
    for index, row in enumerate(rows):
        if row.ndim != 1 or row.size != expected:
            raise FeatureLengthMismatchError(str(index), expected, row.size)

    matrix = np.vstack(rows) if expected > 0 else np.zeros((len(rows), 0))
    if not np.all(np.isfinite(matrix)):
        raise NoValidValuesError("Feature vectors contain non-finite values")
    return matrix


def _closest_pair(distances: np.ndarray) -> Tuple[int, int, float]:
    """
    Locate the minimum entry above the diagonal.

    ``np.triu_indices`` enumerates pairs in row-major order and ``np.argmin``
    returns the first minimum, so ties go to the lowest (i, j) pair and i < j
    always holds.
    """
    rows, cols = np.triu_indices(distances.shape[0], k=1)
    upper = distances[rows, cols]
    position = int(np.argmin(upper))
    return int(rows[position]), int(cols[position]), float(upper[position])


def _snapshot(clusters: List[List[int]]) -> Tuple[Tuple[int, ...], ...]:
    return tuple(tuple(members) for members in clusters)


def build_dendrogram(vectors, min_clusters: int) -> List[DendrogramLevel]:
    """
    Run agglomerative single-linkage clustering.

    Args:
        vectors: Sequence of equal-length numeric vectors (one per record).
        min_clusters: Target cluster count at which merging stops.

    Returns:
        Levels ordered from n clusters down to ``min(min_clusters, n)``.
        Level 0 is the all-singleton partition; a target >= n returns only it.

    Raises:
        InvalidClusterTargetError: If ``min_clusters`` is not a positive integer.
        EmptyInputError: If ``vectors`` is empty.
        FeatureLengthMismatchError: If vectors differ in length.
        NoValidValuesError: If a vector holds NaN or infinite values, or a
            pairwise distance overflows float64.

    Example:
        >>> levels = build_dendrogram([[0.0], [1.0], [10.0]], min_clusters=2)
        >>> levels[-1].clusters
        ((0, 1), (2,))
    """
    target = validate_cluster_target(min_clusters)
    matrix = _to_matrix(vectors)
    n = matrix.shape[0]

    clusters: List[List[int]] = [[index] for index in range(n)]
    distances = pairwise_distances(matrix)
    if not np.all(np.isfinite(distances)):
        raise NoValidValuesError("Pairwise distance overflow: feature values are too large")
    np.fill_diagonal(distances, np.inf)

    levels = [DendrogramLevel(clusters=_snapshot(clusters))]

    while len(clusters) > target:
        i, j, merge_distance = _closest_pair(distances)

        # Merge j into i (i < j); the union keeps i's lowest member
        clusters[i] = sorted(clusters[i] + clusters[j])
        del clusters[j]

        merged_row = np.minimum(distances[i], distances[j])
        distances[i, :] = merged_row
        distances[:, i] = merged_row
        distances[i, i] = np.inf
        distances = np.delete(np.delete(distances, j, axis=0), j, axis=1)

        levels.append(
            DendrogramLevel(
                clusters=_snapshot(clusters),
                merge_distance=merge_distance,
                merged=(i, j),
            )
        )

    return levels


__all__ = [
    "DendrogramLevel",
    "validate_cluster_target",
    "euclidean_distance",
    "pairwise_distances",
    "build_dendrogram",
]
