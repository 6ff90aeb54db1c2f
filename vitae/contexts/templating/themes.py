"""
Theme Configuration for Template Variants

Loads per-variant typography, color and page tokens from themes.yaml and turns them
into Theme / PageGeometry instances. Each variant's block is merged over the shared
`defaults` block, so a variant only lists what differs.

Examples:
    >>> registry = ThemeRegistry()
    >>> registry.get_theme("technical").background
    '#0d1117'

    # Override tokens for a one-off render (later keys win)
    >>> theme = apply_theme_overrides(registry.get_theme("modern"), {"accent_color": "#0f766e"})
"""

import copy
import dataclasses
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vitae.contexts.templating.document_tree import PageGeometry, Theme
from vitae.contexts.templating.exceptions import ThemeConfigError

load_dotenv()
THEMES_PATH = Path(
    os.getenv("VITAE_THEMES_PATH", Path(__file__).parent / "config" / "themes.yaml")
)

DEFAULTS_KEY = "defaults"


class ThemeRegistry:
    """
    Registry for loading and caching theme tokens.

    The YAML file is read once on first use; resolved themes are cached by
    template name.
    """

    def __init__(self, config_path: Path = None):
        """
        Initialize the theme registry.

        Args:
            config_path: Path to the theme YAML. Defaults to VITAE_THEMES_PATH from
                         environment, or the packaged themes.yaml
        """
        if config_path is None:
            config_path = THEMES_PATH

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None
        self._cache: Dict[str, Dict[str, Any]] = {}

    def _load_config(self) -> Dict[str, Any]:
        if self._config is None:
            if not self.config_path.exists():
                raise ThemeConfigError("Theme config file not found", config_path=self.config_path)
            self._config = OmegaConf.to_container(OmegaConf.load(self.config_path), resolve=True)
        return self._config

    def get_config(self, template_name: str) -> Dict[str, Any]:
        """
        Get the merged token dict for a template.

        Args:
            template_name: Template identifier (e.g., 'modern')

        Returns:
            Dict of defaults merged with the template's own tokens

        Raises:
            ThemeConfigError: If the template has no theme block
        """
        if template_name in self._cache:
            return self._cache[template_name]

        config = self._load_config()
        if template_name not in config:
            raise ThemeConfigError(
                "No theme defined for template",
                template_name=template_name,
                config_path=self.config_path,
            )

        merged = OmegaConf.merge(config.get(DEFAULTS_KEY, {}), config[template_name])
        merged_dict = OmegaConf.to_container(merged, resolve=True)

        self._cache[template_name] = merged_dict
        return merged_dict

    def get_theme(self, template_name: str) -> Theme:
        """Build the Theme for a template (a fresh instance on every call)."""
        config = copy.deepcopy(self.get_config(template_name))
        config.pop("page", None)
        try:
            return Theme(**config)
        except TypeError as e:
            raise ThemeConfigError(
                f"Invalid theme tokens: {e}",
                template_name=template_name,
                config_path=self.config_path,
            ) from e

    def get_geometry(self, template_name: str) -> PageGeometry:
        """Build the PageGeometry for a template."""
        page = self.get_config(template_name).get("page", {})
        return PageGeometry(**page)

    def available_themes(self) -> list:
        return [name for name in self._load_config() if name != DEFAULTS_KEY]

    def clear_cache(self):
        """Clear the theme cache and force the YAML to be re-read."""
        self._cache.clear()
        self._config = None

    def is_cached(self, template_name: str) -> bool:
        return template_name in self._cache


def apply_theme_overrides(theme: Theme, overrides: Mapping[str, Any]) -> Theme:
    """
    Return a copy of a theme with overrides applied.

    Top-level keys replace Theme fields; a `tokens` mapping is merged into the
    existing tokens rather than replacing them.

    Args:
        theme: Base theme
        overrides: Field overrides, e.g. {"accent_color": "#0f766e", "tokens": {...}}

    Returns:
        New Theme instance

    Raises:
        ValueError: If an override names a field Theme does not have
    """
    known = {f.name for f in dataclasses.fields(Theme)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown theme fields: {sorted(unknown)}. Available fields: {sorted(known)}")

    changes = dict(overrides)
    if "tokens" in changes:
        changes["tokens"] = {**theme.tokens, **changes["tokens"]}

    return dataclasses.replace(theme, **changes)
