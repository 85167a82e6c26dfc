"""
Render validation: read a written PDF back and compare it to its layout.

Checks that the PDF has the page count the paginator produced and that every
section heading can be found on the page it was placed on. Heading text is
matched after normalization (lowercase alphanumerics only), so font encoding
quirks in the extracted text don't cause false failures.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from quire.contexts.layout.document import PagedDocument
from quire.contexts.rendering.logger import log_validation_result, log_validation_start
from quire.utils.pdf_processing import PDFDocument, find_line


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    # Document-level
    PAGE_COUNT_MISMATCH = "Page count mismatch: {actual} (expected {intended})"

    # Heading-level
    HEADING_NOT_FOUND = "'{heading}': not found in PDF (expected on page {intended})"
    HEADING_DISPLACED = "'{heading}': found on page {actual} (expected page {intended})"


@dataclass
class ValidationResult:
    """
    Result of render validation.

    Attributes:
        pdf_path: PDF that was checked
        expected_page_count: Page count of the PagedDocument
        actual_page_count: Page count read from the PDF
        issues: Formatted issue messages (empty when valid)
    """

    pdf_path: Path
    expected_page_count: int
    actual_page_count: int
    issues: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.issues) == 0

    @property
    def page_count(self) -> int:
        """Actual page count from PDF."""
        return self.actual_page_count


def _heading_issue(heading: str, intended: int, actual: Optional[int]) -> Optional[str]:
    if actual is None:
        return IssueTemplates.HEADING_NOT_FOUND.format(heading=heading, intended=intended)
    if actual != intended:
        return IssueTemplates.HEADING_DISPLACED.format(
            heading=heading, actual=actual, intended=intended
        )
    return None


def validate_render(
    pdf_path: Path, document: PagedDocument, verbose: bool = False
) -> ValidationResult:
    """
    Validate a written PDF against the PagedDocument that produced it.

    Args:
        pdf_path: Path to the PDF written by write_pdf()
        document: The laid-out document
        verbose: Log every issue instead of the first few

    Returns:
        ValidationResult with any issues found

    Raises:
        FileNotFoundError: If pdf_path does not exist
    """
    pdf_path = Path(pdf_path)
    pdf = PDFDocument(pdf_path)
    log_validation_start(pdf_path, len(document.headings))

    issues: List[str] = []
    if pdf.page_count != document.page_count:
        issues.append(
            IssueTemplates.PAGE_COUNT_MISMATCH.format(
                actual=pdf.page_count, intended=document.page_count
            )
        )

    for heading in document.headings:
        intended = heading.fragment.page_index + 1
        lines = pdf.get_lines(intended)
        if find_line(heading.fragment.text, lines) is not None:
            actual = intended
        else:
            actual = pdf.find_page(heading.fragment.text)
        issue = _heading_issue(heading.fragment.text, intended, actual)
        if issue:
            issues.append(issue)

    result = ValidationResult(
        pdf_path=pdf_path,
        expected_page_count=document.page_count,
        actual_page_count=pdf.page_count,
        issues=issues,
    )
    log_validation_result(result, verbose=verbose)
    return result
