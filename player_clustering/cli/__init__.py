"""Command-line interface: argument parsing, table loading and display."""

from player_clustering.cli.argument_parser import parse_args
from player_clustering.cli.data_loader import (
    frame_to_rows,
    get_table_info,
    read_table,
    records_from_frame,
    resolve_feature_columns,
)
from player_clustering.cli.display import (
    display_clusters,
    display_configuration,
    display_dataset_analysis,
    display_feature_stats,
    display_merge_history,
)

__all__ = [
    "parse_args",
    "read_table",
    "get_table_info",
    "frame_to_rows",
    "resolve_feature_columns",
    "records_from_frame",
    "display_configuration",
    "display_dataset_analysis",
    "display_feature_stats",
    "display_clusters",
    "display_merge_history",
]
