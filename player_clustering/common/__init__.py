"""Shared helpers (console formatting and logging)."""
