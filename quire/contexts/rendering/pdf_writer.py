"""
PDF output for laid-out documents.

Draws a PagedDocument onto a ReportLab canvas and saves it. Layout coordinates
are millimetres measured down from the top edge; ReportLab works in points
measured up from the bottom edge, so every y is flipped on the way out.
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from quire.contexts.layout.config import LayoutConfig
from quire.contexts.layout.document import PagedDocument, PlacedFragment, PlacedRule
from quire.contexts.layout.engine import layout_document
from quire.contexts.layout.fragments import Alignment
from quire.contexts.rendering.logger import (
    _log_debug,
    log_render_result,
    log_render_start,
    setup_rendering_logger,
)
from quire.contexts.rendering.measurement import TextMeasurer
from quire.utils.timestamp import now

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass
class RenderResult:
    """
    Result of rendering a document to PDF.

    Attributes:
        pdf_path: Path to the written PDF
        page_count: Number of pages written
        section_count: Number of section headings rendered
        fragment_count: Number of text fragments placed
        document: The PagedDocument that was written
        log_dir: Directory containing render logs (None if logging was not set up)
    """

    pdf_path: Path
    page_count: int
    section_count: int
    fragment_count: int
    document: Optional[PagedDocument] = None
    log_dir: Optional[Path] = None


def _draw_fragment(pdf: canvas.Canvas, placed: PlacedFragment, config: LayoutConfig) -> None:
    fragment = placed.fragment
    x = placed.x * mm
    y = (config.page.height - placed.y) * mm

    pdf.setFont(config.fonts.font_for(fragment.bold), fragment.font_size_pt)
    if fragment.align is Alignment.CENTERED:
        pdf.drawCentredString(x, y, fragment.text)
    elif fragment.align is Alignment.RIGHT_ALIGNED:
        pdf.drawRightString(x, y, fragment.text)
    else:
        pdf.drawString(x, y, fragment.text)


def _draw_rule(pdf: canvas.Canvas, placed: PlacedRule, config: LayoutConfig) -> None:
    y = (config.page.height - placed.y) * mm
    pdf.setLineWidth(placed.rule.thickness * mm)
    pdf.line(placed.x_start * mm, y, placed.x_end * mm, y)


def write_pdf(document: PagedDocument, output_path: Path, config: LayoutConfig) -> Path:
    """
    Write a PagedDocument to a PDF file.

    Parent directories are created as needed. Errors from ReportLab or the
    filesystem propagate unchanged.

    Args:
        document: Laid-out document
        output_path: Destination PDF path
        config: Layout configuration used to produce the document

    Returns:
        Path to the written PDF
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    pdf = canvas.Canvas(
        str(output_path), pagesize=(config.page.width * mm, config.page.height * mm)
    )
    pdf.setTitle(output_path.stem)

    for page in document.pages:
        for placed in page.fragments:
            _draw_fragment(pdf, placed, config)
        for rule in page.rules:
            _draw_rule(pdf, rule, config)
        pdf.showPage()

    pdf.save()
    return output_path


def render_document(
    text: str,
    output_path: Path,
    config: Optional[LayoutConfig] = None,
    measurer: Optional[TextMeasurer] = None,
    log_dir: Optional[Path] = None,
    verbose: bool = False,
) -> RenderResult:
    """
    Lay out text and write it to PDF.

    Orchestration function that wraps layout_document() and write_pdf() with
    session logging. When log_dir is None, no log sinks are configured and the
    caller's loguru setup is used as-is.

    Args:
        text: Newline-separated resume or cover letter text
        output_path: Destination PDF path
        config: Layout configuration (default: LayoutConfig.default())
        measurer: Text measurer (default: ReportLab metrics)
        log_dir: Directory for render.log (None = don't configure logging)
        verbose: Echo DEBUG logging to the console (only with log_dir)

    Returns:
        RenderResult describing the written PDF
    """
    config = config or LayoutConfig.default()
    output_path = Path(output_path)
    document_name = output_path.stem

    if log_dir is not None:
        log_dir = Path(log_dir)
        setup_rendering_logger(
            log_dir,
            page_size=f"{config.page.width} x {config.page.height} mm",
            verbose=verbose,
        )

    log_render_start(document_name, len(text.splitlines()), output_path)
    start_time = time.time()

    document = layout_document(text, config=config, measurer=measurer)
    pdf_path = write_pdf(document, output_path, config)

    result = RenderResult(
        pdf_path=pdf_path,
        page_count=document.page_count,
        section_count=len(document.headings),
        fragment_count=len(document.fragments),
        document=document,
        log_dir=log_dir,
    )
    log_render_result(document_name, result, time.time() - start_time)

    if log_dir is not None:
        pdf_symlink = log_dir / pdf_path.name
        if not pdf_symlink.exists():
            pdf_symlink.symlink_to(pdf_path.resolve())
        _log_debug(f"Linked {pdf_symlink} -> {pdf_path}")

    return result


def default_log_dir(prefix: str = "render") -> Path:
    """Timestamped session directory under LOGS_PATH, e.g. outs/logs/render_20251114_123456."""
    return LOGS_PATH / f"{prefix}_{now()}"
