"""
Player Clustering Main Program

Groups players from a spreadsheet into similarity-based teams:
- Loads a CSV / Excel table
- Optionally prints descriptive statistics for every column
- Scales the selected numeric features
- Builds a single-linkage hierarchical clustering and cuts it into groups
"""

import sys
from typing import List, Optional

from player_clustering.common.utils import configure_windows_stdio

# Fix encoding issues on Windows for interactive CLI runs only
configure_windows_stdio()

from colorama import init as colorama_init

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
from player_clustering.common.utils import (
    log_data,
    log_error,
    log_progress,
    log_success,
)
from player_clustering.exceptions import ClusteringError
from player_clustering.hierarchical_clustering import (
    HierarchicalClusteringConfig,
    compute_clustering,
)
from player_clustering.stats.dataset import analyze_dataset

colorama_init(autoreset=True)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function for player clustering.

    Orchestrates the complete workflow:
    1. Parse command-line arguments
    2. Load the table and convert rows to records
    3. Optionally analyze every column
    4. Cluster and display the groups

    Returns:
        Process exit code (0 on success, 1 on failure).
    """
    args = parse_args(argv)

    try:
        log_progress(f"Loading {args.input}...")
        info = get_table_info(args.input)
        for sheet in info["sheets"]:
            log_data(f"  Sheet '{sheet['name']}': {sheet['rows']} rows x {sheet['cols']} cols")

        df = read_table(args.input, sheet=args.sheet)

        if args.analyze:
            display_dataset_analysis(analyze_dataset(frame_to_rows(df)), top=args.top)

        feature_names = resolve_feature_columns(df, args.identity_column, args.features)
        records = records_from_frame(df, args.identity_column, feature_names)

        config = HierarchicalClusteringConfig(n_clusters=args.clusters, scale=not args.no_scale)
        display_configuration(
            input_path=args.input,
            n_records=len(records),
            feature_names=feature_names,
            n_clusters=config.n_clusters,
            scale=config.scale,
        )

        log_progress("Computing clustering...")
        result = compute_clustering(records, config)
    except (ClusteringError, FileNotFoundError, ValueError) as e:
        log_error(f"Error: {e}")
        return 1

    display_feature_stats(result.feature_stats, feature_names)
    if args.show_merges:
        display_merge_history(result.levels, [record.identity for record in records])
    display_clusters(result.clusters)
    log_success(f"Formed {len(result.clusters)} groups from {len(records)} players.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
