"""
Layout engine: raw text in, PagedDocument out.

Runs the whole pipeline (header extraction, line classification, block
formatting, pagination) as a pure function of the input text and the layout
configuration. Identical inputs always produce identical documents.
"""

from typing import List, Optional

from quire.contexts.layout.config import LayoutConfig
from quire.contexts.layout.document import PagedDocument
from quire.contexts.layout.formatter import BlockFormatter
from quire.contexts.layout.fragments import LayoutBlock
from quire.contexts.layout.logger import (
    log_classification,
    log_header,
    log_layout_result,
    log_layout_start,
)
from quire.contexts.layout.paginator import paginate_blocks
from quire.contexts.rendering.measurement import ReportLabMeasurer, TextMeasurer
from quire.contexts.structuring.classifier import classify_document, count_roles
from quire.contexts.structuring.header import RawDocument, extract_header


def layout_blocks(
    text: str,
    config: Optional[LayoutConfig] = None,
    measurer: Optional[TextMeasurer] = None,
) -> List[LayoutBlock]:
    """
    Format a document into blocks without paginating.

    Args:
        text: Newline-separated document text
        config: Layout configuration (default: LayoutConfig.default())
        measurer: Text measurer (default: ReportLab metrics for config.fonts)

    Returns:
        Header blocks followed by one block per body line, in document order
    """
    config = config or LayoutConfig.default()
    measurer = measurer or ReportLabMeasurer(config.fonts)

    raw = RawDocument.from_text(text)
    log_layout_start(len(raw), config.page.width, config.page.height)

    header = extract_header(raw)
    log_header(header.name, header.contact_parts)

    body = classify_document(raw, header)
    log_classification(count_roles(body))

    formatter = BlockFormatter(config, measurer)
    blocks = formatter.format_header(header)
    blocks.extend(formatter.format_line(line) for line in body)
    return blocks


def layout_document(
    text: str,
    config: Optional[LayoutConfig] = None,
    measurer: Optional[TextMeasurer] = None,
) -> PagedDocument:
    """
    Lay out a resume or cover letter into pages.

    Args:
        text: Newline-separated document text (may be empty)
        config: Layout configuration (default: LayoutConfig.default())
        measurer: Text measurer (default: ReportLab metrics for config.fonts)

    Returns:
        PagedDocument with at least one page

    Example:
        >>> document = layout_document("Jane Doe\\njane@example.com\\n\\nSUMMARY\\nBuilds things.")
        >>> document.section_headings
        ('SUMMARY',)
    """
    config = config or LayoutConfig.default()
    blocks = layout_blocks(text, config=config, measurer=measurer)
    document = paginate_blocks(blocks, config)
    log_layout_result(document)
    return document
