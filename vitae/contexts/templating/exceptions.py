"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Optional


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when a resume file cannot be read as a resume record.

    This is raised when the file is not valid YAML/JSON, or when its root is not a
    mapping (e.g., a YAML list or a bare string). Missing or malformed fields inside a record are never errors.
    """

    pass


class ThemeConfigError(Exception):
    """
    Exception raised when theme configuration is missing or incomplete.

    Attributes:
        message: Error description
        template_name: Template whose theme could not be resolved
        config_path: Path to the theme configuration file
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.config_path = config_path

        parts = [message]

        if template_name:
            parts.append(f"Template: {template_name}")

        if config_path:
            parts.append(f"Theme config: {config_path}")

        super().__init__("\n".join(parts))
