"""
Error taxonomy for the statistics, scaling and clustering pipeline.

Every error derives from ``ClusteringError`` which is a ``ValueError``, so
callers that already guard input validation with ``ValueError`` keep working.
"""

from typing import Optional


class ClusteringError(ValueError):
    """Base class for all pipeline errors."""


class EmptyInputError(ClusteringError):
    """No records or values were supplied at all."""


class EmptyDatasetError(EmptyInputError):
    """Feature statistics were requested for a dataset without records."""

    def __init__(self, message: str = "Cannot create feature stats for empty dataset"):
        super().__init__(message)


class NoValidValuesError(ClusteringError):
    """Values are present but none of them is a finite number."""

    def __init__(self, message: Optional[str] = None, dimension: Optional[int] = None):
        self.dimension = dimension
        if message is None:
            if dimension is None:
                message = "No valid numeric values found"
            else:
                message = f"No valid numeric values found for feature {dimension}"
        super().__init__(message)


class NoNumericValuesError(NoValidValuesError):
    """A named column holds no numeric values."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"No numeric values found in column '{column}'")


class NoValuesError(ClusteringError):
    """A named column holds only missing values."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"No values found in column '{column}'")


class FeatureLengthMismatchError(ClusteringError):
    """Records in one working set have feature vectors of different length."""

    def __init__(self, identity: str, expected: int, actual: int):
        self.identity = identity
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Record '{identity}' has {actual} features, expected {expected}"
        )


class DegenerateFeatureError(ClusteringError):
    """A feature has zero range or zero standard deviation and cannot be scaled."""

    def __init__(self, dimension: Optional[int], reason: str):
        self.dimension = dimension
        self.reason = reason
        label = "feature" if dimension is None else f"feature {dimension}"
        super().__init__(f"Cannot scale {label}: {reason}")


class MissingStatsError(ClusteringError):
    """Scaling was requested for a dimension without precomputed statistics."""

    def __init__(self, dimension: int):
        self.dimension = dimension
        super().__init__(f"No statistics found for feature {dimension}")


class InvalidClusterTargetError(ClusteringError):
    """Target cluster count is not a positive integer."""

    def __init__(self, target):
        self.target = target
        super().__init__(f"Cluster target must be a positive integer, got {target!r}")


__all__ = [
    "ClusteringError",
    "EmptyInputError",
    "EmptyDatasetError",
    "NoValidValuesError",
    "NoNumericValuesError",
    "NoValuesError",
    "FeatureLengthMismatchError",
    "DegenerateFeatureError",
    "MissingStatsError",
    "InvalidClusterTargetError",
]
