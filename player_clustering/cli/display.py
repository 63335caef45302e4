"""
Display utilities for the player clustering CLI.

This module provides formatted display functions for configuration, dataset
statistics, feature statistics, merge history and the final groups.
"""

from typing import Mapping, Optional, Sequence

from colorama import Fore, Style

from player_clustering.common.utils import color_text, format_number
from player_clustering.hierarchical_clustering.core.cutter import ClusterGroup
from player_clustering.hierarchical_clustering.core.linkage import DendrogramLevel
from player_clustering.scaling.feature_scaler import FeatureStats
from player_clustering.stats.dataset import DatasetAnalysis


def _banner(title: str) -> None:
    print("\n" + color_text("=" * 80, Fore.CYAN, Style.BRIGHT))
    print(color_text(title, Fore.CYAN, Style.BRIGHT))
    print(color_text("=" * 80, Fore.CYAN, Style.BRIGHT))


def display_configuration(
    input_path: str,
    n_records: int,
    feature_names: Sequence[str],
    n_clusters: int,
    scale: bool,
) -> None:
    """
    Display configuration information.

    Args:
        input_path: Source file
        n_records: Number of records loaded
        feature_names: Feature columns in vector order
        n_clusters: Requested number of groups
        scale: Whether features are scaled before clustering
    """
    _banner("PLAYER CLUSTERING")
    print(color_text("Configuration:", Fore.WHITE))
    print(color_text(f"  Input: {input_path}", Fore.WHITE))
    print(color_text(f"  Records: {n_records}", Fore.WHITE))
    print(color_text(f"  Features: {', '.join(feature_names)}", Fore.WHITE))
    print(color_text(f"  Clusters: {n_clusters}", Fore.WHITE))
    print(color_text(f"  Scaling: {'min-max + standardize' if scale else 'none'}", Fore.WHITE))
    print(color_text("=" * 80, Fore.CYAN, Style.BRIGHT))


def display_dataset_analysis(analysis: DatasetAnalysis, top: int = 5) -> None:
    """Display numeric and categorical column statistics."""
    _banner("DATASET ANALYSIS")
    types = ", ".join(f"{column}={kind}" for column, kind in analysis.column_types.items())
    print(color_text(f"Column types: {types}", Fore.WHITE))

    print(color_text("\nNumeric columns:", Fore.MAGENTA, Style.BRIGHT))
    for column, stats in analysis.numeric_columns.items():
        print(color_text(f"\n{column}:", Fore.CYAN))
        print(f"  Count: {stats.count}")
        print(f"  Range: {format_number(stats.min)} - {format_number(stats.max)} ({format_number(stats.range)})")
        print(f"  Mean: {stats.mean:.2f}")
        print(f"  Median: {stats.median:.2f}")
        print(f"  Mode: {format_number(stats.mode)}")
        print(f"  Std Dev: {stats.standard_deviation:.2f}")
        print(f"  Variance: {stats.variance:.2f}")

    print(color_text("\nCategorical columns:", Fore.MAGENTA, Style.BRIGHT))
    for column, stats in analysis.categorical_columns.items():
        print(color_text(f"\n{column}:", Fore.CYAN))
        print(f"  Total count: {stats.total_count}")
        print(f"  Unique values: {stats.unique_count}")
        modes = ", ".join(str(value) for value in stats.mode)
        print(f"  Mode: {modes} (count: {stats.mode_count})")
        print(f"  Top {top} values:")
        for entry in stats.frequency_table[:top]:
            print(f"    {entry.value}: {entry.count} ({entry.percentage:.1f}%)")


def display_feature_stats(
    feature_stats: Mapping[int, FeatureStats],
    feature_names: Optional[Sequence[str]] = None,
) -> None:
    """Display the per-dimension statistics used for scaling."""
    _banner("FEATURE STATISTICS")
    for index, stats in sorted(feature_stats.items()):
        name = feature_names[index] if feature_names else f"feature {index}"
        print(
            color_text(f"  {name}: ", Fore.CYAN)
            + f"min={format_number(stats.min)} max={format_number(stats.max)} "
            + f"mean={stats.mean:.4f} std={stats.standard_deviation:.4f}"
        )


def display_merge_history(levels: Sequence[DendrogramLevel], identities: Sequence[str]) -> None:
    """Display each merge step with its single-linkage distance."""
    _banner("MERGE HISTORY")
    for step, level in enumerate(levels[1:], start=1):
        i, _ = level.merged
        members = ", ".join(identities[member] for member in level.clusters[i])
        print(
            color_text(f"  Step {step}: ", Fore.YELLOW)
            + f"{level.n_clusters} clusters, distance {level.merge_distance:.4f} -> [{members}]"
        )


def display_clusters(clusters: Sequence[ClusterGroup]) -> None:
    """Display the final groups with their members."""
    _banner("CLUSTERS")
    for group in clusters:
        print(
            color_text(f"Group {group.group_index + 1}", Fore.GREEN, Style.BRIGHT)
            + color_text(f" ({group.size} members)", Fore.WHITE)
        )
        for member in group.members:
            print(f"  - {member}")


__all__ = [
    "display_configuration",
    "display_dataset_analysis",
    "display_feature_stats",
    "display_merge_history",
    "display_clusters",
]
