"""
Resume Rendering Orchestration

Loads a resume record, lays it out with the requested template variant and
serializes the document, with a timestamped log directory per run.
"""

import os
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

from vitae.contexts.rendering.exceptions import DocumentRenderError
from vitae.contexts.rendering.html_renderer import render_html
from vitae.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    _log_info,
    _log_success,
    setup_rendering_logger,
)
from vitae.contexts.rendering.text_renderer import render_markdown, render_plaintext
from vitae.contexts.templating.exceptions import InvalidResumeStructureError
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.resume_data_structure import load_resume_data
from vitae.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))

# Output format -> file extension
OUTPUT_FORMATS = {
    "html": ".html",
    "markdown": ".md",
    "text": ".txt",
}


@dataclass
class RenderResult:
    """
    Result of rendering a resume file.

    Attributes:
        success: Whether rendering succeeded
        template: Template variant actually used (after fallback)
        output_format: Serialization format
        content: Serialized document ("" if failed)
        output_path: File the content was written to (None if not written)
        log_file: Log file of this run
        errors: Error messages
    """

    success: bool
    template: Optional[str] = None
    output_format: str = "html"
    content: str = ""
    output_path: Optional[Path] = None
    log_file: Optional[Path] = None
    errors: List[str] = field(default_factory=list)


def serialize_document(document, output_format: str, embed_images: bool = False) -> str:
    """
    Serialize a document in one of OUTPUT_FORMATS.

    Raises:
        ValueError: If output_format is not supported
    """
    if output_format == "html":
        return render_html(document, embed_images=embed_images)
    if output_format == "markdown":
        return render_markdown(document)
    if output_format == "text":
        return render_plaintext(document)
    raise ValueError(
        f"Unsupported output format: '{output_format}'. Available formats: {list(OUTPUT_FORMATS)}"
    )


def render_resume(
    resume_path: Union[str, Path],
    template_name: Optional[str] = None,
    output_format: str = "html",
    output_path: Optional[Path] = None,
    embed_images: bool = False,
    verbose: bool = False,
    registry: TemplateRegistry = None,
    logs_path: Optional[Path] = None,
) -> RenderResult:
    """
    Render a resume file with logging and optional output file.

    The template is the explicitly requested one, else the record's stored
    preference; unknown or missing names use the classic template.

    Args:
        resume_path: YAML or JSON resume record
        template_name: Template identifier (default: the record's stored template)
        output_format: "html", "markdown" or "text"
        output_path: Write the result here (default: only return it)
        embed_images: Inline the profile image in HTML output
        verbose: Show INFO messages on the console (default: warnings only)
        registry: Template registry (default: a fresh one)
        logs_path: Parent of the per-run log directory (default: VITAE_LOGS_PATH)

    Returns:
        RenderResult with the serialized document or error messages

    Raises:
        ValueError: If output_format is not supported
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output format: '{output_format}'. Available formats: {list(OUTPUT_FORMATS)}"
        )

    resume_path = Path(resume_path)
    if not resume_path.exists():
        return RenderResult(
            success=False, output_format=output_format, errors=[f"Resume file not found: {resume_path}"]
        )

    log_dir = (logs_path or LOGS_PATH) / f"render_{now()}"
    log_file = setup_rendering_logger(
        log_dir,
        output_format=output_format,
        console_sink=sys.stderr,
        console_level="INFO" if verbose else "WARNING",
    )
    result = RenderResult(success=False, output_format=output_format, log_file=log_file)

    _log_info(f"Rendering {resume_path}")

    try:
        resume_data = load_resume_data(resume_path)
    except InvalidResumeStructureError as e:
        _log_error(f"Invalid resume file: {e}")
        result.errors.append(str(e))
        return result

    if registry is None:
        registry = TemplateRegistry()

    requested = template_name or resume_data.template
    start = time.perf_counter()
    document = registry.select(resume_data, requested)
    result.template = document.template
    _log_info(f"Template: {document.template} ({document.display_name})")

    try:
        result.content = serialize_document(document, output_format, embed_images=embed_images)
    except DocumentRenderError as e:
        _log_error(f"Serialization failed: {e.message}")
        result.errors.append(str(e))
        return result

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.content, encoding="utf-8")
        result.output_path = output_path
        _log_info(f"Output saved to: {output_path}")

    result.success = True
    _log_success(f"Rendered {resume_path.name} ({time.perf_counter() - start:.2f}s)")
    _log_debug(f"  Sections: {', '.join(document.section_kinds) or 'none'}")
    return result
