"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import sys
from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, output_format: str = "html", console_sink=sys.stdout, console_level: str = "INFO"
) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        output_format: Serialization format, recorded in the provenance header
        console_sink: Stream for console output
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, output_format="markdown")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Output format": output_format},
        console_sink=console_sink,
        console_level=console_level,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_serialization_result(document, output_format: str, output: str, elapsed_time: float) -> None:
    """
    Log the outcome of serializing a document.

    Args:
        document: Serialized Document
        output_format: "html", "markdown" or "text"
        output: Serialized text
        elapsed_time: Time taken
    """
    _log_debug(
        f"Serialized '{document.template}' to {output_format}: "
        f"{len(output)} characters ({elapsed_time * 1000:.1f}ms)"
    )


def log_image_fallback(src: str, reason: str) -> None:
    """Log a profile image that could not be loaded (the initial badge is shown instead)."""
    _log_debug(f"Profile image unavailable, using initial badge: {src[:80]} ({reason})")
