#!/usr/bin/env python3
"""
Resume / Cover Letter Rendering CLI

Lays out unmarked resume or cover letter text and writes it to PDF.

Commands:
    render   - Lay out a text file and write the PDF
    inspect  - Show the inferred header and the role of every body line
    validate - Check a written PDF against a fresh layout of its source text

Examples:\n

    render_document.py render resume.txt                           # Render with defaults

    render_document.py render resume.txt -o out/resume.pdf         # Explicit output path

    render_document.py render letter.txt -p page_letter -p spacing_compact

    render_document.py render resume.txt --validate                # Render, then read back

    render_document.py inspect resume.txt                          # Show line roles

    render_document.py validate out/resume.pdf resume.txt          # Validate existing PDF
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quire.contexts.layout.config import LayoutConfig, load_layout_config
from quire.contexts.layout.engine import layout_document
from quire.contexts.layout.exceptions import InvalidLayoutConfigError
from quire.contexts.rendering.pdf_writer import default_log_dir, render_document
from quire.contexts.rendering.validator import validate_render
from quire.contexts.structuring.classifier import classify_document
from quire.contexts.structuring.header import RawDocument, extract_header
from quire.utils.timestamp import today

load_dotenv()
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

ROLE_COLORS = {
    "section_header": typer.colors.BLUE,
    "subsection": typer.colors.CYAN,
    "job_title_date": typer.colors.MAGENTA,
    "bullet": typer.colors.GREEN,
}


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def read_input(input_file: Path) -> str:
    if not input_file.exists():
        typer.secho(f"Error: Input file not found: {input_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return input_file.read_text(encoding="utf-8")


def resolve_config(config_file: Optional[Path], presets: Optional[List[str]]) -> LayoutConfig:
    try:
        return load_layout_config(config_path=config_file, presets=presets or None)
    except (InvalidLayoutConfigError, ValueError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


PresetsOption = Annotated[
    Optional[List[str]],
    typer.Option(
        "--preset",
        "-p",
        help="Layout preset to apply, in order (e.g. page_letter, spacing_compact)",
    ),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="YAML file of layout overrides (keys must match the defaults)",
    ),
]


app = typer.Typer(
    help="Lay out unmarked resume and cover letter text as a paginated PDF",
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
    input_file: Annotated[Path, typer.Argument(help="UTF-8 text file to render")],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output PDF path (default: RESULTS_PATH/<today>/<input stem>.pdf)",
        ),
    ] = None,
    presets: PresetsOption = None,
    config_file: ConfigOption = None,
    validate: Annotated[
        bool,
        typer.Option("--validate", help="Read the PDF back and check pages and headings"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo debug logging (page breaks, line roles)"),
    ] = False,
):
    """
    Render a text file to PDF.

    Examples:\n

        $ render_document.py render resume.txt

        $ render_document.py render resume.txt --preset page_letter --validate
    """
    text = read_input(input_file)
    config = resolve_config(config_file, presets)
    output = output or RESULTS_PATH / today() / f"{input_file.stem}.pdf"

    typer.secho(f"\nRendering: {input_file.name}", fg=typer.colors.BLUE, bold=True)
    if presets:
        typer.echo(f"Presets: {', '.join(presets)}")
    typer.echo("")

    log_dir = default_log_dir("render")
    result = render_document(text, output, config=config, log_dir=log_dir, verbose=verbose)

    typer.echo("")
    typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {result.page_count}")
    typer.echo(f"  Sections: {result.section_count}")
    typer.echo(f"  PDF: {display_path(result.pdf_path)}")

    exit_code = 0
    if validate:
        validation = validate_render(result.pdf_path, result.document, verbose=verbose)
        exit_code = _report_validation(validation)

    typer.echo(f"  Log: {display_path(log_dir / 'render.log')}")
    typer.echo("")
    raise typer.Exit(code=exit_code)


@app.command("inspect")
def inspect_command(
    input_file: Annotated[Path, typer.Argument(help="UTF-8 text file to inspect")],
):
    """
    Show how a text file would be structured: header, then one role per body line.

    Examples:\n

        $ render_document.py inspect resume.txt
    """
    raw = RawDocument.from_text(read_input(input_file))
    header = extract_header(raw)

    typer.secho("\n=== Header ===", bold=True)
    typer.echo(f"  Name: {header.name or '(none)'}")
    typer.echo(f"  Contact: {header.contact_line() or '(none)'}")

    body = classify_document(raw, header)
    typer.secho(f"\n=== Body ({len(body)} lines) ===", bold=True)
    for line in body:
        role = line.role.value
        label = typer.style(f"{role:<15}", fg=ROLE_COLORS.get(role))
        typer.echo(f"  {line.index + 1:>4}  {label} {line.text}")
    typer.echo("")


@app.command("validate")
def validate_command(
    pdf_file: Annotated[Path, typer.Argument(help="PDF written by 'render'")],
    input_file: Annotated[Path, typer.Argument(help="Text file the PDF was rendered from")],
    presets: PresetsOption = None,
    config_file: ConfigOption = None,
):
    """
    Validate a PDF against a fresh layout of its source text.

    Use the same presets/config that were used to render it.

    Examples:\n

        $ render_document.py validate outs/results/2025-11-14/resume.pdf resume.txt
    """
    if not pdf_file.exists():
        typer.secho(f"Error: PDF not found: {pdf_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    text = read_input(input_file)
    config = resolve_config(config_file, presets)

    typer.secho(f"\nValidating: {pdf_file.name}", fg=typer.colors.BLUE, bold=True)
    document = layout_document(text, config=config)
    result = validate_render(pdf_file, document, verbose=True)
    exit_code = _report_validation(result)
    typer.echo("")
    raise typer.Exit(code=exit_code)


def _report_validation(result) -> int:
    if result.is_valid:
        typer.secho("\n✓ Validation passed", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Page count: {result.page_count}")
        return 0

    typer.secho("\n✗ Validation failed", fg=typer.colors.RED, bold=True)
    typer.echo(f"  Page count: {result.page_count} (expected {result.expected_page_count})")
    for issue in result.issues:
        typer.secho(f"  - {issue}", fg=typer.colors.RED)
    return 1


if __name__ == "__main__":
    app()
