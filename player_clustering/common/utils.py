"""
Common utility functions for all components.

This module provides utilities organized into the following categories:
- System: Platform-specific configuration
- Data: Value inspection shared by statistics and loading
- CLI/UI: Text formatting and logging
"""

import io
import math
import numbers
import os
import sys
from typing import Any, Optional

from colorama import Fore, Style

# ============================================================================
# SYSTEM UTILITIES
# ============================================================================

def configure_windows_stdio() -> None:
    """
    Configure Windows stdio encoding for UTF-8 support.

    Only applies to interactive CLI runs, not during pytest.

    Note:
        - Only runs on Windows (win32 platform)
        - Skips configuration during pytest runs
        - Only configures if stdout/stderr have buffer attribute
    """
    if sys.platform != "win32":
        return
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return
    if not hasattr(sys.stdout, "buffer") or isinstance(sys.stdout, io.TextIOWrapper):
        return
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8", errors="replace")


# ============================================================================
# DATA UTILITIES
# ============================================================================

def is_finite_number(value: Any) -> bool:
    """
    Return True for real, finite numbers.

    Booleans are rejected even though ``bool`` subclasses ``int``; numpy scalars
    are accepted.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


# ============================================================================
# CLI/UI UTILITIES
# ============================================================================

# --- Text Formatting ---

def color_text(text: str, color: str = Fore.WHITE, style: str = Style.NORMAL) -> str:
    """
    Applies color and style to text using colorama.

    Args:
        text: Text to format
        color: Colorama Fore color (default: Fore.WHITE)
        style: Colorama Style (default: Style.NORMAL)

    Returns:
        Formatted text string with color and style codes
    """
    return f"{style}{color}{text}{Style.RESET_ALL}"


def format_number(value: Optional[float], precision: int = 2) -> str:
    """
    Formats statistics with fixed precision; integers are printed as-is.

    Args:
        value: Numeric value to format
        precision: Digits after the decimal point for non-integral values

    Returns:
        Formatted string, or "N/A" if value is missing or not finite
    """
    if value is None or not is_finite_number(value):
        return "N/A"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{precision}f}"


# --- Logging Functions ---
# Organized by severity level and purpose

# Standard severity levels
def log_success(message: str) -> None:
    """Print success message with green color."""
    print(color_text(message, Fore.GREEN))


def log_error(message: str) -> None:
    """Print error message with red color and bright style."""
    print(color_text(message, Fore.RED, Style.BRIGHT))


def log_warn(message: str) -> None:
    """Print warning message with yellow color."""
    print(color_text(message, Fore.YELLOW))


# Domain-specific logging
def log_data(message: str) -> None:
    """Print data-related message with cyan color."""
    print(color_text(message, Fore.CYAN))


def log_progress(message: str) -> None:
    """Print progress update message with yellow color."""
    print(color_text(message, Fore.YELLOW))
