"""
Pagination: a left-to-right reduction of layout ops over an explicit Cursor.

The Cursor is an immutable accumulator. Each step returns a new Cursor; the
only side effects go to the DocumentEmitter. This keeps the paginator testable
in isolation by feeding it a fixed op sequence.
"""

from dataclasses import dataclass
from typing import Iterable

from quire.contexts.layout.config import LayoutConfig, PageGeometry
from quire.contexts.layout.document import DocumentEmitter, PagedDocument
from quire.contexts.layout.fragments import (
    Advance,
    Alignment,
    Draw,
    LayoutBlock,
    LayoutOp,
    Place,
    Reserve,
    StyledFragment,
)
from quire.contexts.layout.logger import log_page_break


@dataclass(frozen=True)
class Cursor:
    """Vertical position (mm from the top edge) and current page index."""

    y_position: float
    page_index: int = 0


class Paginator:
    """
    Decides page breaks and resolves fragment positions.

    Args:
        config: Layout configuration (page geometry and bullet indent)
    """

    def __init__(self, config: LayoutConfig):
        self.page: PageGeometry = config.page
        self.indent = config.styles.bullet.text_indent

    def start(self) -> Cursor:
        return Cursor(y_position=self.page.margin_top, page_index=0)

    def fits(self, cursor: Cursor, space_needed: float) -> bool:
        """True if `space_needed` below the cursor stays above the bottom break line."""
        return cursor.y_position + space_needed <= self.page.break_line

    def resolve_x(self, fragment: StyledFragment) -> float:
        """Resolve a fragment's alignment to its x anchor."""
        if fragment.align is Alignment.CENTERED:
            return self.page.center_x
        if fragment.align is Alignment.RIGHT_ALIGNED:
            return self.page.right_edge
        return self.page.margin_left + fragment.indent_level * self.indent + fragment.offset

    def step(self, cursor: Cursor, op: LayoutOp, emitter: DocumentEmitter) -> Cursor:
        """
        Apply one op and return the next cursor.

        Raises:
            ValueError: On a negative advance (the cursor never moves up within a page)
        """
        if isinstance(op, Reserve):
            if self.fits(cursor, op.space):
                return cursor
            page_index = emitter.new_page()
            log_page_break(page_index, cursor.y_position, op.space)
            return Cursor(y_position=self.page.margin_top, page_index=page_index)

        if isinstance(op, Advance):
            if op.dy < 0:
                raise ValueError(f"Cursor cannot move up within a page (advance {op.dy})")
            return Cursor(y_position=cursor.y_position + op.dy, page_index=cursor.page_index)

        if isinstance(op, Place):
            emitter.place(op.fragment, x=self.resolve_x(op.fragment), y=cursor.y_position)
            return cursor

        if isinstance(op, Draw):
            emitter.draw(op.rule, y=cursor.y_position + op.rule.offset)
            return cursor

        raise TypeError(f"Unknown layout op: {op!r}")

    def run(self, ops: Iterable[LayoutOp], emitter: DocumentEmitter) -> Cursor:
        """Reduce an op sequence into the emitter; returns the final cursor."""
        cursor = self.start()
        for op in ops:
            cursor = self.step(cursor, op, emitter)
        return cursor


def paginate(ops: Iterable[LayoutOp], config: LayoutConfig) -> PagedDocument:
    """
    Paginate a flat op sequence into a PagedDocument.

    Args:
        ops: Layout operations in emission order
        config: Layout configuration

    Returns:
        PagedDocument with at least one page
    """
    emitter = DocumentEmitter()
    Paginator(config).run(ops, emitter)
    return emitter.finish()


def paginate_blocks(blocks: Iterable[LayoutBlock], config: LayoutConfig) -> PagedDocument:
    """Paginate formatted blocks in order."""
    return paginate((op for block in blocks for op in block.ops), config)
