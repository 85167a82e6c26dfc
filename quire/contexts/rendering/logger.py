"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from quire.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, page_size: Optional[str] = None, verbose: bool = False
) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        page_size: Page size recorded in the provenance header (e.g. "210 x 297 mm")
        verbose: Echo DEBUG records (page breaks, line roles) to the console

    Returns:
        Path to log file

    Example:
        from quire.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, page_size="210 x 297 mm")
    """
    extra = {"Page size": page_size} if page_size else None
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance=extra,
        console_level="DEBUG" if verbose else "INFO",
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


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(document_name: str, line_count: int, output_path: Path) -> None:
    """Log start of rendering with context."""
    _log_info(f"Starting render: {document_name}")
    _log_debug(f"  Lines: {line_count}")
    _log_debug(f"  Output: {output_path}")


def log_render_result(document_name: str, result, elapsed_time: float) -> None:
    """
    Log rendering result.

    Args:
        document_name: Document identifier (usually the input file stem)
        result: RenderResult from render_document()
        elapsed_time: Time taken to lay out and write the PDF
    """
    _log_success(
        f"{document_name}: {result.page_count} page(s), "
        f"{result.section_count} section(s) ({elapsed_time:.2f}s)"
    )
    _log_info(f"PDF saved to: {result.pdf_path}")


def log_validation_start(pdf_path: Path, heading_count: int) -> None:
    _log_info(f"Validating {pdf_path.name}")
    _log_debug(f"  Expecting {heading_count} section heading(s)")


def log_validation_result(result, verbose: bool = False) -> None:
    """
    Log validation result with issues.

    Args:
        result: ValidationResult from validate_render()
        verbose: Show every issue instead of the first few
    """
    if result.is_valid:
        _log_success(f"Validation passed: {result.page_count} page(s)")
        return

    _log_error(f"Validation failed: {len(result.issues)} issue(s)")
    issue_limit = len(result.issues) if verbose else 5
    for i, issue in enumerate(result.issues[:issue_limit], 1):
        _log_error(f"  Issue {i}: {issue}")
    if len(result.issues) > issue_limit:
        _log_error(f"  ... and {len(result.issues) - issue_limit} more issues")
