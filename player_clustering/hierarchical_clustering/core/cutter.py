"""Cut a dendrogram at a cluster count and map indices back to identities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from player_clustering.exceptions import EmptyInputError
from player_clustering.hierarchical_clustering.core.linkage import (
    DendrogramLevel,
    validate_cluster_target,
)


@dataclass(frozen=True)
class ClusterGroup:
    group_index: int
    members: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.members)


def select_level(levels: Sequence[DendrogramLevel], n_clusters: int) -> DendrogramLevel:
    """
    Pick the level with exactly ``n_clusters`` clusters.

    When ``n_clusters`` exceeds the number of records the all-singleton level
    is returned. When the dendrogram was not built down to ``n_clusters`` the
    closest (last) level is returned.
    """
    target = validate_cluster_target(n_clusters)
    if len(levels) == 0:
        raise EmptyInputError("Cannot cut an empty dendrogram")

    for level in levels:
        if level.n_clusters == target:
            return level
    if target > levels[0].n_clusters:
        return levels[0]
    return levels[-1]


def cut_dendrogram(
    levels: Sequence[DendrogramLevel],
    identities: Sequence[str],
    n_clusters: int,
) -> List[ClusterGroup]:
    """
    Map the members of the selected level to record identities.

    Args:
        levels: Output of ``build_dendrogram``.
        identities: Record identities, aligned with the clustered vectors.
        n_clusters: Requested number of groups.

    Returns:
        Groups in level order (ordered by each group's first record).
    """
    level = select_level(levels, n_clusters)
    return [
        ClusterGroup(
            group_index=group_index,
            members=tuple(identities[member] for member in members),
        )
        for group_index, members in enumerate(level.clusters)
    ]


__all__ = ["ClusterGroup", "select_level", "cut_dendrogram"]
