"""
Rendering Context

Responsibilities:
- Serializes document trees to standalone HTML pages
- Serializes document trees to Markdown and plain text for export collaborators
- Resolves profile images for embedding, degrading to the initial badge on failure

Owns: Document serialization, HTML page templates, profile image loading
Never: Decides which sections render or how they are laid out
"""

from vitae.contexts.rendering.html_renderer import HtmlRenderer, render_html
from vitae.contexts.rendering.images import load_profile_image
from vitae.contexts.rendering.renderer import RenderResult, render_resume
from vitae.contexts.rendering.text_renderer import render_markdown, render_plaintext

__all__ = [
    # Orchestration
    "render_resume",
    "RenderResult",
    # Serializers
    "HtmlRenderer",
    "render_html",
    "render_markdown",
    "render_plaintext",
    "load_profile_image",
]
