"""Unit tests for ThemeRegistry and theme overrides."""

import pytest

from vitae.contexts.templating.document_tree import PageGeometry, Theme
from vitae.contexts.templating.exceptions import ThemeConfigError
from vitae.contexts.templating.themes import ThemeRegistry, apply_theme_overrides
from vitae.contexts.templating.variants import VARIANTS


@pytest.mark.unit
def test_theme_registry_init():
    """Test ThemeRegistry initialization."""
    registry = ThemeRegistry()
    assert registry.config_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_every_variant_has_a_theme():
    """Test that each template variant has a theme block."""
    registry = ThemeRegistry()

    assert sorted(registry.available_themes()) == sorted(VARIANTS)
    for name in VARIANTS:
        assert isinstance(registry.get_theme(name), Theme)


@pytest.mark.unit
def test_defaults_merged_under_variant():
    """Test that variant blocks are merged over the shared defaults."""
    registry = ThemeRegistry()

    classic = registry.get_theme("classic")
    technical = registry.get_theme("technical")

    assert classic.background == "#ffffff"
    assert technical.background == "#0d1117"
    assert technical.bullet_marker == ">"
    assert registry.get_theme("minimal").bullet_marker == "–"
    assert registry.get_theme("executive").header_rule == "double"


@pytest.mark.unit
def test_geometry_is_a4():
    registry = ThemeRegistry()

    geometry = registry.get_geometry("modern")

    assert geometry == PageGeometry(width_mm=210, min_height_mm=297, padding_mm=19)
    assert registry.get_geometry("classic").padding_mm == 20


@pytest.mark.unit
def test_config_caching():
    """Test that merged configs are cached."""
    registry = ThemeRegistry()

    registry.get_config("creative")
    assert registry.is_cached("creative")

    registry.clear_cache()
    assert not registry.is_cached("creative")


@pytest.mark.unit
def test_unknown_theme_raises():
    registry = ThemeRegistry()

    with pytest.raises(ThemeConfigError) as exc_info:
        registry.get_theme("nonexistent")

    assert "nonexistent" in str(exc_info.value)


@pytest.mark.unit
def test_missing_config_file_raises(tmp_path):
    registry = ThemeRegistry(config_path=tmp_path / "missing.yaml")

    with pytest.raises(ThemeConfigError):
        registry.get_theme("classic")


@pytest.mark.unit
def test_invalid_tokens_raise(tmp_path):
    """Test that a theme block with unknown keys is reported, not silently ignored."""
    config_path = tmp_path / "themes.yaml"
    config_path.write_text("broken:\n  font_family: Arial\n  sparkle: true\n")

    with pytest.raises(ThemeConfigError):
        ThemeRegistry(config_path=config_path).get_theme("broken")


@pytest.mark.unit
def test_apply_theme_overrides():
    """Test overrides replace fields and merge tokens."""
    theme = ThemeRegistry().get_theme("modern")

    overridden = apply_theme_overrides(
        theme, {"accent_color": "#0f766e", "tokens": {"link_color": "#0f766e"}}
    )

    assert overridden.accent_color == "#0f766e"
    assert overridden.tokens["link_color"] == "#0f766e"
    assert overridden.tokens["avatar_background"] == theme.tokens["avatar_background"]
    assert theme.accent_color == "#6366f1"


@pytest.mark.unit
def test_apply_theme_overrides_unknown_field():
    theme = ThemeRegistry().get_theme("modern")

    with pytest.raises(ValueError):
        apply_theme_overrides(theme, {"sparkle": True})


@pytest.mark.unit
def test_themes_do_not_share_tokens():
    """Test that mutating one theme's tokens leaves later themes untouched."""
    registry = ThemeRegistry()

    first = registry.get_theme("modern")
    first.tokens["avatar_background"] = "#000000"

    second = registry.get_theme("modern")
    assert second.tokens["avatar_background"] != "#000000"
    assert second.tokens is not first.tokens
