"""
Integration tests for HTML serialization of rendered documents.
Tests: ResumeData -> template variant -> Document -> HTML page.
"""

from pathlib import Path

import pytest

from vitae.contexts.rendering.exceptions import DocumentRenderError
from vitae.contexts.rendering.html_renderer import HtmlRenderer, group_sections, render_html
from vitae.contexts.templating.document_tree import Section
from vitae.contexts.templating.registries import select
from vitae.contexts.templating.resume_data_structure import ResumeData, load_resume_data
from vitae.contexts.templating.variants import VARIANTS

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def resume_data():
    return load_resume_data(FIXTURES_PATH / "sample_resume.yaml")


@pytest.mark.integration
@pytest.mark.parametrize("name", sorted(VARIANTS))
def test_every_variant_renders_html(name, resume_data):
    """Test that each variant serializes to a complete page."""
    html = render_html(select(resume_data, name))

    assert html.startswith("<!DOCTYPE html>")
    assert f"template-{name}" in html
    assert "Engineer focused on analytical engines" in html
    assert "Designed the mill and the store" in html
    assert "Python, Go, Rust" in html
    assert html.rstrip().endswith("</html>")


@pytest.mark.integration
@pytest.mark.parametrize("name", sorted(VARIANTS))
def test_html_is_deterministic(name, resume_data):
    assert render_html(select(resume_data, name)) == render_html(select(resume_data, name))


@pytest.mark.integration
@pytest.mark.parametrize("name", sorted(VARIANTS))
def test_empty_record_renders_page(name):
    html = render_html(select(ResumeData(), name))

    assert "<header" not in html
    assert "<section" not in html


@pytest.mark.integration
def test_content_is_escaped():
    """Test that record text cannot inject markup."""
    record = ResumeData.from_dict(
        {"personalInfo": {"fullName": "<b>Ada</b>"}, "summary": "<script>alert(1)</script>"}
    )

    html = render_html(select(record, "classic"))

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "&lt;B&gt;ADA&lt;/B&gt;" in html


@pytest.mark.integration
def test_theme_tokens_become_css_properties(resume_data):
    html = render_html(select(resume_data, "technical"))

    assert "--background: #0d1117;" in html
    assert "--prompt-color: #7ee787;" in html
    assert "--page-width: 210mm;" in html
    assert "// End of resume" in html


@pytest.mark.integration
def test_link_separators_only_between_present_links():
    """Test that separators never lead or trail a link list."""
    record = ResumeData.from_dict(
        {
            "personalInfo": {
                "fullName": "Ada",
                "linkedin": "https://linkedin.com/in/ada",
                "website": "https://ada.dev",
            }
        }
    )

    html = render_html(select(record, "chronological"))

    assert html.count('<span class="sep">') == 1
    assert '<p class="links"><span class="sep">' not in html
    assert '<span class="sep"> | </span></p>' not in html


@pytest.mark.integration
def test_contact_separator_skips_missing_items():
    record = ResumeData.from_dict({"personalInfo": {"fullName": "Ada", "location": "London"}})

    html = render_html(select(record, "modern"))

    assert '<span class="sep">' not in html
    assert "London" in html


@pytest.mark.integration
def test_modern_avatar_initial_without_image(resume_data):
    html = render_html(select(resume_data, "modern"))

    assert '<span class="initial">A</span>' in html
    assert "<img" not in html


@pytest.mark.integration
def test_modern_avatar_image_falls_back_in_browser():
    """Test that a linked image carries an onerror fallback to the initial badge."""
    record = ResumeData.from_dict(
        {"personalInfo": {"fullName": "Ada", "profileImage": "https://example.com/ada.png"}}
    )

    html = render_html(select(record, "modern"))

    assert 'src="https://example.com/ada.png"' in html
    assert "onerror=" in html
    assert '<span class="initial" style="display: none;">A</span>' in html


@pytest.mark.integration
def test_embedded_image_failure_shows_initial():
    """Test that an image that cannot be loaded is replaced by the initial badge."""
    record = ResumeData.from_dict(
        {"personalInfo": {"fullName": "Ada", "profileImage": "https://example.com/ada.png"}}
    )

    html = render_html(select(record, "modern"), embed_images=True, image_loader=lambda src: None)

    assert "<img" not in html
    assert '<span class="initial">A</span>' in html


@pytest.mark.integration
def test_embedded_image_inlined():
    record = ResumeData.from_dict(
        {"personalInfo": {"fullName": "Ada", "profileImage": "https://example.com/ada.png"}}
    )
    data_uri = "data:image/png;base64,iVBORw0KGgo="

    html = render_html(select(record, "modern"), embed_images=True, image_loader=lambda src: data_uri)

    assert f'src="{data_uri}"' in html
    assert "example.com/ada.png" not in html


@pytest.mark.integration
def test_executive_grid_and_sidebar_layouts(resume_data):
    executive = render_html(select(resume_data, "executive"))
    chronological = render_html(select(resume_data, "chronological"))

    assert executive.count('<div class="row-grid">') == 1
    assert '<aside class="sidebar">' in chronological
    assert '<aside class="sidebar">' not in executive


@pytest.mark.integration
def test_group_sections():
    sections = [
        Section(kind="summary", title="S"),
        Section(kind="skills", title="K", group="grid"),
        Section(kind="education", title="E", group="grid"),
        Section(kind="certifications", title="C"),
    ]

    rows = group_sections(sections)

    assert [[section.kind for section in row] for row in rows] == [
        ["summary"],
        ["skills", "education"],
        ["certifications"],
    ]


@pytest.mark.integration
def test_missing_templates_directory(tmp_path, resume_data):
    renderer = HtmlRenderer(templates_path=tmp_path)

    with pytest.raises(DocumentRenderError):
        renderer.render(select(resume_data, "classic"))


@pytest.mark.integration
def test_template_errors_are_wrapped(tmp_path, resume_data):
    """Test that a broken page template surfaces as DocumentRenderError."""
    (tmp_path / "document.html.jinja").write_text("{{ document.no_such_attribute }}")
    renderer = HtmlRenderer(templates_path=tmp_path)

    with pytest.raises(DocumentRenderError) as exc_info:
        renderer.render(select(resume_data, "classic"))

    assert exc_info.value.template_name == "classic"
    assert exc_info.value.original_error is not None


@pytest.mark.integration
def test_renderer_caches_templates(resume_data):
    renderer = HtmlRenderer()

    renderer.render(select(resume_data, "classic"))

    assert renderer.is_cached("document.html.jinja")
    renderer.clear_cache()
    assert not renderer.is_cached("document.html.jinja")
