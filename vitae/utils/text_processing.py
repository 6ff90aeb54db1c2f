"""
Text processing utilities for formatting and display.
"""

import re
from typing import Iterable, Optional


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    return value is None or not value.strip()


def join_present(values: Iterable[Optional[str]], separator: str) -> str:
    """
    Join the non-empty values with a separator.

    Separators only ever appear between two present values, never leading or
    trailing.

    Example:
        >>> join_present(["a@b.com", "", None, "Berlin"], " | ")
        'a@b.com | Berlin'
    """
    return separator.join(value for value in values if value)


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        pattern = r'\n\s*\n(\s*\n)*'
    else:
        pattern = r'\n\s*\n(\s*\n)+'

    # max_consecutive=1 means "\n\n" which is 1 blank line
    replacement = '\n' * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)
