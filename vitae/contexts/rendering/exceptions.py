"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class DocumentRenderError(Exception):
    """
    Exception raised when serializing a document to HTML fails.

    Attributes:
        message: Error description
        template_name: Variant that produced the document
        template_path: Path to the HTML template being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Variant: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
