"""
QUIRE - Quick Unmarked-text Inference for Resume Export

Turns loosely structured generated text (a resume or cover letter with no
markup) into a paginated, professionally formatted PDF.

Architecture:
- Structuring Context: Header extraction and line-role classification
- Layout Context: Typographic formatting and pagination
- Rendering Context: Text measurement, PDF output and read-back validation
"""

__version__ = "0.1.0"
