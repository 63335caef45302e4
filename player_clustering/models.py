"""
Shared record type for the clustering pipeline.

Untyped tabular rows are converted into ``Record`` at the loading boundary;
everything downstream of the loader works on records only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from player_clustering.exceptions import EmptyInputError, FeatureLengthMismatchError


@dataclass(frozen=True)
class Record:
    """An entity label plus its ordered numeric feature vector."""

    identity: str
    features: Tuple[float, ...]

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        if not isinstance(self.features, tuple):
            object.__setattr__(self, "features", tuple(self.features))

    @property
    def dimensions(self) -> int:
        return len(self.features)


def validate_feature_lengths(records: Sequence[Record]) -> int:
    """
    Check that all records share the feature length of the first one.

    Returns:
        The common feature length.

    Raises:
        EmptyInputError: If ``records`` is empty.
        FeatureLengthMismatchError: On the first record with a different length.
    """
    if len(records) == 0:
        raise EmptyInputError("Cannot cluster an empty record set")

    expected = records[0].dimensions
    for record in records:
        if record.dimensions != expected:
            raise FeatureLengthMismatchError(record.identity, expected, record.dimensions)
    return expected


__all__ = ["Record", "validate_feature_lengths"]
