"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Text processing
- Logger setup
- Timestamps
"""

from vitae.utils.text_processing import is_blank, join_present
from vitae.utils.timestamp import now

__all__ = ["is_blank", "join_present", "now"]
