"""
HTML Document Renderer

Serializes a Document into a standalone HTML page with Jinja2. Page geometry and
theme tokens become CSS; the document tree supplies every word of content, so the
HTML templates contain no data interpretation of their own.

Examples:
    >>> document = select(resume_data, "modern")
    >>> html = render_html(document)

    # Inline the profile picture so the page works offline
    >>> html = render_html(document, embed_images=True)
"""

import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from vitae.contexts.rendering.exceptions import DocumentRenderError
from vitae.contexts.rendering.images import load_profile_image
from vitae.contexts.rendering.logger import log_serialization_result
from vitae.contexts.templating.document_tree import Document, Section

load_dotenv()
HTML_TEMPLATES_PATH = Path(
    os.getenv("VITAE_HTML_TEMPLATES_PATH", Path(__file__).parent / "templates")
)

DOCUMENT_TEMPLATE = "document.html.jinja"

ImageLoader = Callable[[str], Optional[str]]


def group_sections(sections: List[Section]) -> List[List[Section]]:
    """
    Split sections into rows; consecutive sections sharing a group form one row.

    Example:
        Sections [summary, skills(grid), education(grid)] give
        [[summary], [skills, education]]
    """
    rows: List[List[Section]] = []
    for section in sections:
        if rows and section.group and rows[-1][-1].group == section.group:
            rows[-1].append(section)
        else:
            rows.append([section])
    return rows


class HtmlRenderer:
    """
    Renders documents with the page templates in VITAE_HTML_TEMPLATES_PATH.

    Templates are autoescaped; StrictUndefined turns a misspelled attribute in a
    template into an error instead of an empty string.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the HTML renderer.

        Args:
            templates_path: Directory holding document.html.jinja and its partials.
                            Defaults to VITAE_HTML_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = HTML_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=select_autoescape(["html", "html.jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, name: str = DOCUMENT_TEMPLATE) -> Template:
        """
        Get a page template, loading and caching it if necessary.

        Raises:
            DocumentRenderError: If the template file doesn't exist
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise DocumentRenderError(
                f"HTML template not found at {self.templates_path / name}", original_error=e
            ) from e

        self._cache[name] = template
        return template

    def render(
        self,
        document: Document,
        embed_images: bool = False,
        image_loader: ImageLoader = None,
    ) -> str:
        """
        Serialize a document to a standalone HTML page.

        Args:
            document: Document produced by a template variant
            embed_images: Inline the profile image as a data URI. When it cannot be
                          loaded the initial badge is rendered instead
            image_loader: Callable resolving an image source to a data URI or None.
                          Defaults to load_profile_image

        Returns:
            HTML page

        Raises:
            DocumentRenderError: If a page template fails to render
        """
        start = time.perf_counter()
        template = self.get_template()

        try:
            html = template.render(
                document=document,
                header=document.header,
                theme=document.theme,
                geometry=document.geometry,
                main_rows=group_sections(document.main),
                sidebar_rows=group_sections(document.sidebar),
                avatar_src=self._avatar_src(document, embed_images, image_loader),
            )
        except TemplateError as e:
            raise DocumentRenderError(
                "Failed to render HTML document",
                template_name=document.template,
                template_path=self.templates_path / DOCUMENT_TEMPLATE,
                original_error=e,
            ) from e

        log_serialization_result(document, "html", html, time.perf_counter() - start)
        return html

    @staticmethod
    def _avatar_src(
        document: Document, embed_images: bool, image_loader: Optional[ImageLoader]
    ) -> Optional[str]:
        """Image source for the avatar badge, None to show the initial only."""
        if document.header is None or document.header.avatar is None:
            return None

        image = document.header.avatar.image
        if not image or not embed_images:
            return image

        return (image_loader or load_profile_image)(image)

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache


_default_renderer: Optional[HtmlRenderer] = None


def render_html(
    document: Document, embed_images: bool = False, image_loader: ImageLoader = None
) -> str:
    """Serialize a document to HTML with the shared renderer; see HtmlRenderer.render."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = HtmlRenderer()
    return _default_renderer.render(document, embed_images=embed_images, image_loader=image_loader)
