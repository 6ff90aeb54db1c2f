#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders a resume record (YAML or JSON) with one of the template variants and
serializes it to HTML, Markdown or plain text.

Commands:
    render    - Render a resume file
    templates - List available templates

Examples:\n

    render_resume.py render data/resume.yaml                          # Record's stored template, HTML to stdout

    render_resume.py render data/resume.yaml -t modern -o out.html    # Modern template, saved to file

    render_resume.py render data/resume.yaml -t technical -f markdown # Markdown export

    render_resume.py templates                                        # List templates
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vitae.contexts.rendering import render_resume
from vitae.contexts.rendering.renderer import OUTPUT_FORMATS
from vitae.contexts.templating import TemplateRegistry

app = typer.Typer(
    help="Render resume records with one of the template variants",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    resume_file: Annotated[
        Path,
        typer.Argument(
            help="Resume record (YAML or JSON)",
        ),
    ],
    template: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Template name (default: the record's stored template, else classic)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help=f"Output format: {', '.join(OUTPUT_FORMATS)}",
        ),
    ] = "html",
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: print to stdout)",
        ),
    ] = None,
    embed_images: Annotated[
        bool,
        typer.Option(
            "--embed-images",
            help="Inline the profile image in HTML output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show progress messages on stderr",
        ),
    ] = False,
):
    """
    Render a resume file.

    Unknown template names fall back to the classic (ATS-friendly) template.

    Examples:\n

        $ render_resume.py render resume.yaml                        # Print HTML

        $ render_resume.py render resume.yaml -t minimal -f text     # Plain text

        $ render_resume.py render resume.yaml -o out/resume.html     # Save to file
    """
    if output_format not in OUTPUT_FORMATS:
        typer.secho(
            f"Error: unsupported format '{output_format}'. Available: {', '.join(OUTPUT_FORMATS)}\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    result = render_resume(
        resume_path=resume_file,
        template_name=template,
        output_format=output_format,
        output_path=output,
        embed_images=embed_images,
        verbose=verbose,
    )

    if not result.success:
        for error in result.errors:
            typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if result.output_path is None:
        typer.echo(result.content, nl=False)
        return

    typer.secho(f"✓ Rendered with '{result.template}' template", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {result.output_path}")
    if verbose and result.log_file:
        typer.echo(f"  Log: {result.log_file}")


@app.command("templates")
def templates_command():
    """
    List available templates.

    Examples:\n

        $ render_resume.py templates
    """
    registry = TemplateRegistry()
    typer.secho("\nAvailable templates:", fg=typer.colors.BLUE, bold=True)
    for name in registry.available_templates():
        typer.echo(f"  {name:<15} {registry.template_display_name(name)}")
    typer.echo("")


if __name__ == "__main__":
    app()
