"""
Table loading for the clustering CLI.

Reads CSV / Excel files with pandas and converts rows into the two shapes the
core accepts: schema-free mapping rows (for dataset statistics) and typed
``Record`` objects (for clustering). Nothing below this module sees pandas.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from player_clustering.common.utils import is_finite_number, log_warn
from player_clustering.config import SUPPORTED_TABLE_EXTENSIONS
from player_clustering.models import Record


def _resolve_path(path: Union[str, Path]) -> Path:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if file_path.suffix.lower() not in SUPPORTED_TABLE_EXTENSIONS:
        raise ValueError(
            f"Unsupported file type '{file_path.suffix}'. "
            f"Supported: {', '.join(SUPPORTED_TABLE_EXTENSIONS)}"
        )
    return file_path


def read_table(path: Union[str, Path], sheet: Optional[str] = None) -> pd.DataFrame:
    """
    Read a CSV or Excel file into a DataFrame.

    Args:
        path: File path (.csv, .xlsx or .xls)
        sheet: Excel sheet name; the first sheet is used when omitted.
            Ignored for CSV files.

    Returns:
        DataFrame with one row per entity.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: For unsupported extensions or unknown sheet names.
    """
    file_path = _resolve_path(path)

    if file_path.suffix.lower() == ".csv":
        return pd.read_csv(file_path)

    with pd.ExcelFile(file_path) as workbook:
        sheet_names = workbook.sheet_names
        sheet_to_read = sheet or sheet_names[0]
        if sheet_to_read not in sheet_names:
            raise ValueError(
                f"Sheet '{sheet_to_read}' not found. Available sheets: {', '.join(sheet_names)}"
            )
        return workbook.parse(sheet_to_read)


def get_table_info(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Get information about a table file (sheets and their dimensions).

    Returns:
        Dictionary with ``sheet_names`` and ``sheets`` (name, rows, cols).
        A CSV file is reported as a single sheet named after the file.
    """
    file_path = _resolve_path(path)

    if file_path.suffix.lower() == ".csv":
        frames = {file_path.stem: pd.read_csv(file_path)}
    else:
        frames = pd.read_excel(file_path, sheet_name=None)

    sheets = [
        {"name": name, "rows": int(frame.shape[0]), "cols": int(frame.shape[1])}
        for name, frame in frames.items()
    ]
    return {"sheet_names": list(frames.keys()), "sheets": sheets}


def frame_to_rows(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a DataFrame to mapping rows, with missing cells as None."""
    if df is None or df.empty:
        return []
    cleaned = df.astype(object).where(pd.notna(df), None)
    return cleaned.to_dict("records")


def resolve_feature_columns(
    df: pd.DataFrame,
    identity_column: str,
    feature_columns: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Return the ordered feature columns to cluster on.

    Defaults to every numeric (non-boolean) column other than the identity
    column, in table order.

    Raises:
        ValueError: If a named column is missing or no feature column exists.
    """
    if feature_columns is None:
        feature_columns = [
            column
            for column in df.columns
            if column != identity_column
            and pd.api.types.is_numeric_dtype(df[column])
            and not pd.api.types.is_bool_dtype(df[column])
        ]
    else:
        missing = [column for column in feature_columns if column not in df.columns]
        if missing:
            raise ValueError(f"Feature columns not found: {', '.join(missing)}")

    if len(feature_columns) == 0:
        raise ValueError("No numeric feature columns found")
    return list(feature_columns)


def records_from_frame(
    df: pd.DataFrame,
    identity_column: str,
    feature_columns: Optional[Sequence[str]] = None,
) -> List[Record]:
    """
    Build typed records from a DataFrame.

    Args:
        df: Source table.
        identity_column: Column used as the record identity.
        feature_columns: Ordered feature columns; defaults to every numeric
            column other than the identity column, in table order.

    Returns:
        One Record per row. Rows with a missing or non-numeric feature value
        are skipped with a warning.

    Raises:
        ValueError: If a named column is missing or no feature column exists.
    """
    if identity_column not in df.columns:
        raise ValueError(
            f"Identity column '{identity_column}' not found. "
            f"Available columns: {', '.join(map(str, df.columns))}"
        )

    feature_columns = resolve_feature_columns(df, identity_column, feature_columns)

    records = []
    for row in frame_to_rows(df):
        identity = row.get(identity_column)
        values = [row.get(column) for column in feature_columns]
        if not all(is_finite_number(value) for value in values):
            log_warn(f"Skipping '{identity}': missing or non-numeric feature value")
            continue
        records.append(
            Record(identity=str(identity), features=tuple(float(value) for value in values))
        )

    return records


__all__ = [
    "read_table",
    "get_table_info",
    "frame_to_rows",
    "resolve_feature_columns",
    "records_from_frame",
]
