"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_render_start(requested_name, resolved_name: str) -> None:
    """Log which variant a render request resolved to."""
    _log_debug(f"Render requested with template {requested_name!r}, using '{resolved_name}'")


def log_render_result(document, elapsed_time: float) -> None:
    """
    Log the shape of a rendered document.

    Args:
        document: Document produced by a template variant
        elapsed_time: Time taken
    """
    kinds = ", ".join(document.section_kinds) or "no sections"
    header = "with header" if document.header else "without header"
    _log_debug(
        f"Rendered '{document.template}' ({document.layout} layout, {header}): "
        f"{kinds} ({elapsed_time * 1000:.1f}ms)"
    )
