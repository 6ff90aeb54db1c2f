"""
Integration tests for Markdown and plain-text serialization.
Tests: ResumeData -> template variant -> Document -> text export.
"""

from pathlib import Path

import pytest

from vitae.contexts.rendering.text_renderer import render_markdown, render_plaintext
from vitae.contexts.templating.registries import select
from vitae.contexts.templating.resume_data_structure import ResumeData, load_resume_data
from vitae.contexts.templating.variants import VARIANTS

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def resume_data():
    return load_resume_data(FIXTURES_PATH / "sample_resume.yaml")


@pytest.mark.integration
def test_classic_markdown(resume_data):
    markdown = render_markdown(select(resume_data, "classic"))

    assert markdown.startswith("# ADA LOVELACE\n")
    assert "ada@example.com | +44 20 7946 0018 | London, UK" in markdown
    assert "[LinkedIn](https://linkedin.com/in/ada) | [GitHub](https://github.com/ada)" in markdown
    assert "## PROFESSIONAL SUMMARY" in markdown
    assert "### Lead Engineer — Analytical Engines Ltd\n_Jan 2021 - Present_" in markdown
    assert "- Designed the mill and the store" in markdown
    assert "**Technologies:** Punch cards, Mill, Store" in markdown
    assert "- **Languages:** Python, Go, Rust" in markdown
    assert "- Loves hiking" in markdown
    assert "**GPA:** 3.9" in markdown


@pytest.mark.integration
def test_creative_markdown_tags(resume_data):
    markdown = render_markdown(select(resume_data, "creative"))

    assert "`Punch cards` `Mill` `Store`" in markdown
    assert "## ✨ ABOUT ME" in markdown
    assert "✉ ada@example.com" in markdown


@pytest.mark.integration
def test_technical_plaintext(resume_data):
    text = render_plaintext(select(resume_data, "technical"))

    assert text.startswith("developer@resume:~$\nAda Lovelace\n📧 ada@example.com\n")
    assert "$ cat about.txt\n" + "=" * len("$ cat about.txt") in text
    assert "> # Languages: Python, Go, Rust" in text
    assert "> Designed the mill and the store" in text
    assert "🔗 LinkedIn: https://linkedin.com/in/ada" in text
    assert "📦 Bernoulli Numbers" in text
    assert "// Tech Stack: Punch cards, Mill, Store" in text
    assert text.endswith("// End of resume\n")


@pytest.mark.integration
def test_chronological_plaintext_linearized(resume_data):
    """Test that two-column documents list the main column before the sidebar."""
    text = render_plaintext(select(resume_data, "chronological"))

    assert text.index("PROFESSIONAL EXPERIENCE") < text.index("LANGUAGES")
    assert "• English\n• French" in text
    assert "Guide — Science Museum" in text


@pytest.mark.integration
@pytest.mark.parametrize("name", sorted(VARIANTS))
@pytest.mark.parametrize("serializer", [render_markdown, render_plaintext])
def test_text_output_shape(name, serializer, resume_data):
    """Test that text exports are deterministic and never contain runs of blank lines."""
    text = serializer(select(resume_data, name))

    assert text == serializer(select(resume_data, name))
    assert "\n\n\n" not in text
    assert text.endswith("\n") and not text.endswith("\n\n")


@pytest.mark.integration
@pytest.mark.parametrize("serializer", [render_markdown, render_plaintext])
def test_empty_record(serializer):
    assert serializer(select(ResumeData(), "classic")) == "\n"
