"""
Skill-Line Classifier

Turns free-text skill entries into display lines. A line of the form
"Category: item, item" becomes a labeled line; anything else stays a plain line.
Classification never fails.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from vitae.contexts.templating.resume_data_structure import SkillGroup

# Label is everything before the first colon; text starts at the first non-space after it
SKILL_CATEGORY_REGEX = re.compile(r"^([^:]+):\s*(.+)$")


@dataclass(frozen=True)
class SkillLine:
    """
    One display line of the skills section.

    Attributes:
        text: Line text (the part after the colon for labeled lines)
        label: Category label, None for plain lines
    """

    text: str
    label: Optional[str] = None

    @property
    def is_labeled(self) -> bool:
        return self.label is not None


def normalize_skill_items(items: Union[str, Sequence[str], None]) -> str:
    """
    Collapse a skill group's items into one string.

    Args:
        items: A free-text string, or a sequence of strings

    Returns:
        Sequences joined with ", ", strings unchanged, "" for None
    """
    if items is None:
        return ""
    if isinstance(items, str):
        return items
    return ", ".join(items)


def classify_skill_line(line: str) -> SkillLine:
    """
    Classify a single skill line.

    Example:
        >>> classify_skill_line("Languages: Python, Go, Rust")
        SkillLine(text='Python, Go, Rust', label='Languages')
        >>> classify_skill_line("Loves hiking")
        SkillLine(text='Loves hiking', label=None)
    """
    match = SKILL_CATEGORY_REGEX.match(line)
    if match:
        return SkillLine(text=match.group(2), label=match.group(1))
    return SkillLine(text=line)


def classify_skill_items(items: Union[str, Sequence[str], None]) -> List[SkillLine]:
    """
    Classify one skill group's items into display lines.

    Lines are split on newlines, whitespace-only lines are dropped and the
    remaining lines keep their original order.

    Args:
        items: A free-text string, or a sequence of strings

    Returns:
        List of SkillLine, labeled where the line matched "Category: items"
    """
    text = normalize_skill_items(items)
    return [classify_skill_line(line) for line in text.split("\n") if line.strip()]


def classify_skill_groups(groups: Iterable[SkillGroup]) -> List[SkillLine]:
    """Classify all groups in order and concatenate their lines."""
    lines: List[SkillLine] = []
    for group in groups:
        lines.extend(classify_skill_items(group.items))
    return lines
