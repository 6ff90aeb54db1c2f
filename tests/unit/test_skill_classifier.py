"""Unit tests for the skill-line classifier."""

import pytest

from vitae.contexts.templating.resume_data_structure import SkillGroup
from vitae.contexts.templating.skill_classifier import (
    SkillLine,
    classify_skill_groups,
    classify_skill_items,
    classify_skill_line,
    normalize_skill_items,
)


@pytest.mark.unit
def test_labeled_line():
    """Test that "Category: items" becomes a labeled line."""
    line = classify_skill_line("Languages: Python, Go, Rust")

    assert line == SkillLine(text="Python, Go, Rust", label="Languages")
    assert line.is_labeled


@pytest.mark.unit
def test_plain_line():
    """Test that a line without a colon stays a plain line."""
    line = classify_skill_line("Loves hiking")

    assert line == SkillLine(text="Loves hiking")
    assert not line.is_labeled


@pytest.mark.unit
def test_label_stops_at_first_colon():
    """Test that everything after the first colon belongs to the text."""
    line = classify_skill_line("Tools: vim: the good parts")

    assert line.label == "Tools"
    assert line.text == "vim: the good parts"


@pytest.mark.unit
@pytest.mark.parametrize("text", [": leading colon", "Trailing colon:", "no colon at all"])
def test_lines_without_label_or_text_are_plain(text):
    """Test that lines lacking a label or text after the colon degrade to plain lines."""
    line = classify_skill_line(text)

    assert line.label is None
    assert line.text == text


@pytest.mark.unit
def test_blank_lines_dropped_and_order_kept():
    """Test that whitespace-only lines are discarded and order is preserved."""
    lines = classify_skill_items("Frontend: React\n   \n\nBackend: Django\nGit")

    assert [line.label for line in lines] == ["Frontend", "Backend", None]
    assert [line.text for line in lines] == ["React", "Django", "Git"]


@pytest.mark.unit
def test_sequence_equivalent_to_joined_string():
    """Test that classifying a sequence equals classifying its ", " join."""
    items = ["Python", "Go", "Rust"]

    assert normalize_skill_items(items) == "Python, Go, Rust"
    assert classify_skill_items(items) == classify_skill_items(", ".join(items))


@pytest.mark.unit
def test_sequence_with_embedded_newlines():
    """Test that newlines inside sequence elements still split lines after joining."""
    items = ["Languages: Python", "Go\nTools: Docker"]

    assert classify_skill_items(items) == classify_skill_items("Languages: Python, Go\nTools: Docker")
    assert classify_skill_items(items) == [
        SkillLine(text="Python, Go", label="Languages"),
        SkillLine(text="Docker", label="Tools"),
    ]


@pytest.mark.unit
def test_none_and_empty_items():
    """Test that missing items classify to no lines."""
    assert classify_skill_items(None) == []
    assert classify_skill_items("") == []
    assert classify_skill_items([]) == []


@pytest.mark.unit
def test_groups_concatenated_in_order():
    """Test that multiple groups are processed in order and concatenated."""
    groups = [
        SkillGroup(items="Languages: Python\nCloud: AWS"),
        SkillGroup(items=("Teamwork", "Mentoring")),
    ]

    lines = classify_skill_groups(groups)

    assert [line.text for line in lines] == ["Python", "AWS", "Teamwork, Mentoring"]
