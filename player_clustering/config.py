"""
Configuration constants for all components.

Organized by component:
1. Statistics Configuration
2. Clustering Configuration
3. CLI / Data Loading Configuration
"""

# ============================================================================
# STATISTICS CONFIGURATION
# ============================================================================

# A column is numeric when at least this share (percent) of its
# non-missing values are finite numbers
NUMERIC_COLUMN_THRESHOLD = 80.0

COLUMN_TYPE_NUMERIC = "numeric"
COLUMN_TYPE_CATEGORICAL = "categorical"


# ============================================================================
# CLUSTERING CONFIGURATION
# ============================================================================

DEFAULT_CLUSTER_COUNT = 3  # Target number of groups (e.g. teams)
DEFAULT_SCALE_FEATURES = True  # Apply min-max + standardization before clustering


# ============================================================================
# CLI / DATA LOADING CONFIGURATION
# ============================================================================

DEFAULT_IDENTITY_COLUMN = "name"  # Column holding the entity label
DEFAULT_TOP_VALUES = 5  # Frequency table rows shown per categorical column
SUPPORTED_TABLE_EXTENSIONS = (".csv", ".xlsx", ".xls")
