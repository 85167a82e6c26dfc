"""
Layout context logger.

Provides logging interface for layout context with automatic [layout] prefix.
Layout runs inside a render session, so sinks are configured by the rendering
context (setup_rendering_logger); this module only emits.
"""

from typing import Dict

from loguru import logger

CONTEXT_PREFIX = "[layout]"


# Wrapper functions with automatic [layout] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [layout] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level layout-specific logging helpers


def log_layout_start(line_count: int, page_width: float, page_height: float) -> None:
    _log_debug(f"Laying out {line_count} lines on {page_width} x {page_height} mm pages")


def log_header(name: str, contact_parts: tuple) -> None:
    """Log what the header extractor found; a missing contact line is worth a warning."""
    if not name:
        _log_warning("No name line found (empty document)")
        return
    _log_debug(f"  Name: {name}")
    if contact_parts:
        _log_debug(f"  Contact: {len(contact_parts)} part(s)")
    else:
        _log_debug("  Contact: none (no divider drawn)")


def log_classification(role_counts: Dict) -> None:
    """Log body line counts per role at debug level."""
    summary = ", ".join(f"{role.value}={count}" for role, count in role_counts.items())
    _log_debug(f"  Classified body lines: {summary or 'none'}")


def log_page_break(page_index: int, y_position: float, space_needed: float) -> None:
    _log_debug(
        f"  Page break -> page {page_index + 1} "
        f"(y={y_position:.1f} mm, needed {space_needed:.1f} mm)"
    )


def log_layout_result(document) -> None:
    """
    Log the finished layout.

    Args:
        document: PagedDocument from layout_document()
    """
    _log_debug(
        f"Layout complete: {document.page_count} page(s), "
        f"{len(document.fragments)} fragments, {len(document.headings)} section headings"
    )
