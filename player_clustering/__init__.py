"""
Player clustering package.

Groups entities described by numeric feature vectors into similarity-based
clusters with a deterministic pipeline:
statistics -> feature scaling -> single-linkage hierarchical clustering -> cut.
"""

from . import config

__all__ = ["config"]
