"""
Text measurement backends.

The layout engine never measures text itself; it depends on a TextMeasurer for
rendered widths and for word-boundary wrapping. ReportLabMeasurer uses the real
font metrics of the PDF backend. FixedWidthMeasurer gives every character the
same width so wrapping is predictable in tests.

All widths are in millimetres; font sizes are in points.
"""

import textwrap
from abc import ABC, abstractmethod
from typing import List

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics

from quire.contexts.layout.config import FontConfig


class TextMeasurer(ABC):
    """
    Abstract base for text measurement.

    Subclasses must implement:
    - text_width(): rendered width of a string
    - split_to_width(): greedy word wrap so each line fits max_width
    """

    @abstractmethod
    def text_width(self, text: str, font_size: float, bold: bool = False) -> float:
        """Rendered width of text in mm."""
        pass

    @abstractmethod
    def split_to_width(
        self, text: str, font_size: float, max_width: float, bold: bool = False
    ) -> List[str]:
        """
        Wrap text at word boundaries.

        Returns:
            Non-empty list of lines; [""] for empty text. A single word wider
            than max_width is kept whole on its own line.
        """
        pass


class ReportLabMeasurer(TextMeasurer):
    """Measures with ReportLab font metrics for the configured fonts."""

    def __init__(self, fonts: FontConfig):
        self.fonts = fonts

    def text_width(self, text: str, font_size: float, bold: bool = False) -> float:
        return pdfmetrics.stringWidth(text, self.fonts.font_for(bold), font_size) / mm

    def split_to_width(
        self, text: str, font_size: float, max_width: float, bold: bool = False
    ) -> List[str]:
        lines = simpleSplit(text, self.fonts.font_for(bold), font_size, max_width * mm)
        return lines or [""]


class FixedWidthMeasurer(TextMeasurer):
    """
    Deterministic measurer: every character is `char_width * font_size` mm wide.

    Args:
        char_width: Width of one character per point of font size (mm/pt).
                    The default roughly matches Helvetica's average glyph.
        bold_factor: Multiplier applied to bold text widths
    """

    def __init__(self, char_width: float = 0.18, bold_factor: float = 1.0):
        self.char_width = char_width
        self.bold_factor = bold_factor

    def _char_width(self, font_size: float, bold: bool) -> float:
        width = self.char_width * font_size
        return width * self.bold_factor if bold else width

    def text_width(self, text: str, font_size: float, bold: bool = False) -> float:
        return len(text) * self._char_width(font_size, bold)

    def split_to_width(
        self, text: str, font_size: float, max_width: float, bold: bool = False
    ) -> List[str]:
        max_chars = max(1, int(max_width / self._char_width(font_size, bold)))
        lines = textwrap.wrap(text, width=max_chars, break_long_words=False)
        return lines or [""]
