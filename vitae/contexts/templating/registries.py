"""
Templating Registries

Registry for the template variants and the selector that dispatches a resume
record to one of them.
"""

import time
from typing import Dict, List, Optional, Type

from vitae.contexts.templating.document_tree import Document
from vitae.contexts.templating.logger import log_render_result, log_render_start
from vitae.contexts.templating.resume_data_structure import ResumeData
from vitae.contexts.templating.themes import ThemeRegistry
from vitae.contexts.templating.variants import VARIANTS, TemplateVariant

DEFAULT_TEMPLATE = "classic"


class TemplateRegistry:
    """
    Registry for looking up and caching template variants.

    Variants are stateless, so one instance per name is created on first use and
    reused. Every lookup resolves unknown or missing names to the classic variant;
    the same fallback covers legacy records stored without a template preference.
    """

    def __init__(
        self,
        variants: Dict[str, Type[TemplateVariant]] = None,
        theme_registry: ThemeRegistry = None,
    ):
        """
        Initialize the template registry.

        Args:
            variants: Identifier -> variant class mapping. Defaults to all eight
                      packaged variants
            theme_registry: Theme registry shared by every variant. Defaults to one
                            reading VITAE_THEMES_PATH
        """
        self.variants = dict(VARIANTS if variants is None else variants)
        self.theme_registry = theme_registry or ThemeRegistry()
        self._cache: Dict[str, TemplateVariant] = {}

    def resolve_template_name(self, template_name: Optional[str]) -> str:
        """
        Map a requested name onto a registered identifier.

        Matching is exact; anything else (including None) resolves to classic.
        """
        if template_name in self.variants:
            return template_name
        return DEFAULT_TEMPLATE

    def get_variant(self, template_name: Optional[str]) -> TemplateVariant:
        """
        Get a variant by name, instantiating and caching it if necessary.

        Args:
            template_name: Requested template identifier (may be None or unknown)

        Returns:
            TemplateVariant instance for the resolved name
        """
        name = self.resolve_template_name(template_name)

        if name in self._cache:
            return self._cache[name]

        variant = self.variants[name](theme_registry=self.theme_registry)
        self._cache[name] = variant
        return variant

    def select(
        self, resume_data: Optional[ResumeData], template_name: Optional[str] = None
    ) -> Optional[Document]:
        """
        Render a resume record with the requested template.

        Args:
            resume_data: Record to render. None produces no document
            template_name: Template identifier. Unknown or missing names fall back
                           to classic without raising

        Returns:
            Rendered Document, or None when there is no record

        Example:
            >>> registry = TemplateRegistry()
            >>> document = registry.select(resume_data, "modern")
            >>> document.template
            'modern'
        """
        if resume_data is None:
            return None

        variant = self.get_variant(template_name)
        log_render_start(template_name, variant.name)

        start = time.perf_counter()
        document = variant.render(resume_data)
        log_render_result(document, time.perf_counter() - start)
        return document

    def available_templates(self) -> List[str]:
        return list(self.variants)

    def template_display_name(self, template_name: Optional[str]) -> str:
        """Human-readable name of the variant a name resolves to."""
        return self.variants[self.resolve_template_name(template_name)].display_name

    def clear_cache(self):
        """Clear the variant cache and the shared theme cache."""
        self._cache.clear()
        self.theme_registry.clear_cache()

    def is_cached(self, template_name: str) -> bool:
        return template_name in self._cache


_default_registry: Optional[TemplateRegistry] = None


def get_default_registry() -> TemplateRegistry:
    """Module-level registry used by select()."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def select(
    resume_data: Optional[ResumeData], template_name: Optional[str] = None
) -> Optional[Document]:
    """
    Render a resume record with the requested template.

    Shortcut for get_default_registry().select(...); see TemplateRegistry.select.
    """
    return get_default_registry().select(resume_data, template_name)
