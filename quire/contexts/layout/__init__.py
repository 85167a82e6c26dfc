"""
Layout Context

Responsibilities:
- Holds page geometry, fonts and per-role typographic metrics
- Formats classified lines into blocks of layout operations
- Paginates the operation stream and emits the positioned PagedDocument

Owns: Typographic rules, vertical cursor, page breaks
Never: Writes files or decides what role a line plays

The engine (layout_document, layout_blocks) lives in
quire.contexts.layout.engine and is imported from there.
"""

from quire.contexts.layout.config import LayoutConfig, load_layout_config
from quire.contexts.layout.document import PagedDocument
from quire.contexts.layout.exceptions import InvalidLayoutConfigError

__all__ = [
    "LayoutConfig",
    "load_layout_config",
    "InvalidLayoutConfigError",
    "PagedDocument",
]
