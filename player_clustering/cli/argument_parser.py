"""
Command-line argument parser for player clustering.

This module provides the main argument parser for the clustering CLI,
defining all command-line options and their default values.
"""

import argparse
from typing import List, Optional

from player_clustering.config import (
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_IDENTITY_COLUMN,
    DEFAULT_TOP_VALUES,
)


def _positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return parsed


def _column_list(value: str) -> List[str]:
    """argparse type for comma separated column names."""
    columns = [column.strip() for column in value.split(",") if column.strip()]
    if not columns:
        raise argparse.ArgumentTypeError("expected at least one column name")
    return columns


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for player clustering."""
    parser = argparse.ArgumentParser(
        description="Player Clustering: single-linkage hierarchical grouping of players",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Data options
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to a CSV or Excel file with one row per player",
    )
    parser.add_argument(
        "--sheet",
        type=str,
        default=None,
        help="Excel sheet name (default: first sheet)",
    )
    parser.add_argument(
        "--identity-column",
        type=str,
        default=DEFAULT_IDENTITY_COLUMN,
        dest="identity_column",
        help=f"Column holding the player label (default: {DEFAULT_IDENTITY_COLUMN})",
    )
    parser.add_argument(
        "--features",
        type=_column_list,
        default=None,
        help="Comma separated feature columns (default: all numeric columns)",
    )

    # Clustering parameters
    parser.add_argument(
        "--clusters",
        "--teams",
        type=_positive_int,
        default=DEFAULT_CLUSTER_COUNT,
        dest="clusters",
        help=f"Number of groups to form (default: {DEFAULT_CLUSTER_COUNT})",
    )
    parser.add_argument(
        "--no-scale",
        action="store_true",
        dest="no_scale",
        help="Cluster raw feature values instead of scaled ones",
    )

    # Display options
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Print descriptive statistics for every column before clustering",
    )
    parser.add_argument(
        "--top",
        type=_positive_int,
        default=DEFAULT_TOP_VALUES,
        help=f"Frequency rows shown per categorical column (default: {DEFAULT_TOP_VALUES})",
    )
    parser.add_argument(
        "--show-merges",
        action="store_true",
        dest="show_merges",
        help="Print the merge history of the dendrogram",
    )

    return parser.parse_args(argv)


__all__ = ["parse_args"]
