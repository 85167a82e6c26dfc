"""
PDF read-back utilities for checking rendered output.

Main class:
    PDFDocument: Parsed PDF with per-page text lines and search.

Helper functions:
    page_count: Quick page count without full extraction.
    normalize_for_matching: Text normalization for fuzzy matching.
    cluster_by_y_tolerance: Y-coordinate clustering for line detection.
    find_line: Find a line in a list of lines by normalized exact match.
"""

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except (OSError, PdfReadError):
        return None


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def cluster_by_y_tolerance(chars: List, tolerance: float = 3.0) -> List[List]:
    """
    Group characters into lines by Y-coordinate proximity.

    Handles baseline shifts between bold and regular text (a job title and its
    right-aligned date) that would otherwise split one line in two.
    """
    if not chars:
        return []

    sorted_chars = sorted(chars, key=lambda c: c["top"])

    lines = []
    current_line = [sorted_chars[0]]
    current_y = sorted_chars[0]["top"]

    for char in sorted_chars[1:]:
        if abs(char["top"] - current_y) <= tolerance:
            current_line.append(char)
        else:
            lines.append(current_line)
            current_line = [char]
            current_y = char["top"]

    if current_line:
        lines.append(current_line)

    return lines


def find_line(text: str, lines: List[str]) -> Optional[int]:
    """Find index of a line using normalized exact match, or None."""
    text_norm = normalize_for_matching(text)

    for i, line in enumerate(lines):
        # Exact match so "SKILLS" does not match "Technical Skills: Python"
        if text_norm == normalize_for_matching(line):
            return i

    return None


class PDFDocument:
    """
    Parsed PDF with per-page line extraction.

    Page data is lazily loaded and cached on first access.

    Args:
        pdf_path: Path to PDF file
        y_tolerance: Max Y-distance (points) to group characters as same line.

    Example:
        >>> pdf = PDFDocument(Path("resume.pdf"))
        >>> for line in pdf.get_lines(page=1):
        ...     print(line)
    """

    def __init__(self, pdf_path: Union[str, Path], y_tolerance: float = 3.0):
        pdf_path = Path(pdf_path)
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF not found: {pdf_path}")

        self.pdf_path = pdf_path
        self.y_tolerance = y_tolerance
        self._pages_cache: Optional[Dict[int, List[str]]] = None
        self._page_count: Optional[int] = None

    @property
    def page_count(self) -> int:
        if self._page_count is None:
            self._page_count = page_count(self.pdf_path) or 0
        return self._page_count

    def _extract_pages(self) -> Dict[int, List[str]]:
        """
        Extract text lines from all pages.

        Returns:
            Dict mapping page_num (1-indexed) to its text lines, top to bottom.
        """
        pages_data: Dict[int, List[str]] = {}

        with pdfplumber.open(self.pdf_path) as pdf:
            for page_num, page in enumerate(pdf.pages, start=1):
                pages_data[page_num] = self._chars_to_lines(page.chars)

        return pages_data

    def _chars_to_lines(self, chars: List) -> List[str]:
        line_clusters = cluster_by_y_tolerance(chars, tolerance=self.y_tolerance)

        text_lines = []
        for char_objs in line_clusters:
            char_objs.sort(key=lambda c: c["x0"])
            text_lines.append("".join(c["text"] for c in char_objs))

        return text_lines

    def _ensure_loaded(self) -> None:
        if self._pages_cache is None:
            self._pages_cache = self._extract_pages()

    def get_lines(self, page: int) -> List[str]:
        """
        Get text lines for a specific page.

        Args:
            page: Page number (1-indexed)

        Returns:
            List of text lines, top-to-bottom order. Empty list if the page doesn't exist.
        """
        self._ensure_loaded()
        return list(self._pages_cache.get(page, []))

    def find_page(self, text: str) -> Optional[int]:
        """First page (1-indexed) holding a line equal to text after normalization, or None."""
        for page_num in self.iter_pages():
            if find_line(text, self.get_lines(page_num)) is not None:
                return page_num
        return None

    def contains(self, text: str) -> bool:
        """True if text appears anywhere in the document (normalized substring match)."""
        text_norm = normalize_for_matching(text)
        return any(
            text_norm in normalize_for_matching(line)
            for page_num in self.iter_pages()
            for line in self.get_lines(page_num)
        )

    def iter_pages(self) -> Iterator[int]:
        """Iterate over page numbers (1-indexed)."""
        self._ensure_loaded()
        return iter(sorted(self._pages_cache.keys()))
