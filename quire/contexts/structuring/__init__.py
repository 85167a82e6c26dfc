"""
Structuring Context

Responsibilities:
- Splits raw generated text into an immutable RawDocument
- Extracts the name/contact header block
- Classifies every body line into a semantic LineRole

Owns: Structural inference from unmarked text
Never: Measures text, positions fragments or decides page breaks
"""

from quire.contexts.structuring.classifier import (
    ClassifiedLine,
    LineRole,
    classify_document,
    classify_line,
)
from quire.contexts.structuring.header import (
    HeaderBlock,
    RawDocument,
    extract_contact_parts,
    extract_header,
)

__all__ = [
    # Input and header
    "RawDocument",
    "HeaderBlock",
    "extract_header",
    "extract_contact_parts",
    # Classification
    "LineRole",
    "ClassifiedLine",
    "classify_line",
    "classify_document",
]
