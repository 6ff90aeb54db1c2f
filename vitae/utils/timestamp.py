"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time as a compact sortable string (e.g. 20261019_142530)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
