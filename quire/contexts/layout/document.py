"""
Paged document model and the emitter that accumulates it.

The DocumentEmitter is append-only: the paginator opens pages and places
fragments and rules at resolved coordinates, then finish() hands back an
immutable PagedDocument for writing to PDF.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from quire.contexts.layout.fragments import Rule, RuleKind, StyledFragment


@dataclass(frozen=True)
class PlacedFragment:
    """A fragment resolved to page coordinates (mm, y measured from the top edge)."""

    fragment: StyledFragment
    page_index: int
    x: float
    y: float

    @property
    def text(self) -> str:
        return self.fragment.text


@dataclass(frozen=True)
class PlacedRule:
    """A rule resolved to page coordinates."""

    rule: Rule
    page_index: int
    x_start: float
    x_end: float
    y: float

    @property
    def kind(self) -> RuleKind:
        return self.rule.kind

    @property
    def width(self) -> float:
        return self.x_end - self.x_start


@dataclass(frozen=True)
class Page:
    index: int
    fragments: Tuple[PlacedFragment, ...] = ()
    rules: Tuple[PlacedRule, ...] = ()


@dataclass(frozen=True)
class SectionHeading:
    """A rendered section heading and the underline drawn beneath it."""

    fragment: PlacedFragment
    underline: PlacedRule


@dataclass(frozen=True)
class PagedDocument:
    """
    Finished multi-page layout, ready to be written out.

    Attributes:
        pages: Pages in order (always at least one)
        headings: Section headings paired with their underlines, in order
    """

    pages: Tuple[Page, ...]
    headings: Tuple[SectionHeading, ...] = ()

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def fragments(self) -> Tuple[PlacedFragment, ...]:
        """All placed fragments across pages, in emission order."""
        return tuple(f for page in self.pages for f in page.fragments)

    @property
    def rules(self) -> Tuple[PlacedRule, ...]:
        return tuple(r for page in self.pages for r in page.rules)

    @property
    def section_headings(self) -> Tuple[str, ...]:
        return tuple(heading.fragment.text for heading in self.headings)


@dataclass
class _PageBuffer:
    index: int
    fragments: List[PlacedFragment] = field(default_factory=list)
    rules: List[PlacedRule] = field(default_factory=list)

    def freeze(self) -> Page:
        return Page(self.index, tuple(self.fragments), tuple(self.rules))


class DocumentEmitter:
    """
    Accumulates positioned fragments and rules into pages.

    Starts with one open page. Section headings are recorded by pairing each
    underline with the fragment placed immediately before it.

    Example:
        >>> emitter = DocumentEmitter()
        >>> emitter.place(fragment, x=18.0, y=18.0)
        >>> emitter.new_page()
        >>> document = emitter.finish()
    """

    def __init__(self):
        self._pages: List[_PageBuffer] = [_PageBuffer(index=0)]
        self._headings: List[SectionHeading] = []
        self._last_fragment: Optional[PlacedFragment] = None

    @property
    def page_index(self) -> int:
        return self._pages[-1].index

    def new_page(self) -> int:
        """Open a new page and return its index."""
        self._pages.append(_PageBuffer(index=len(self._pages)))
        return self.page_index

    def place(self, fragment: StyledFragment, x: float, y: float) -> PlacedFragment:
        placed = PlacedFragment(fragment=fragment, page_index=self.page_index, x=x, y=y)
        self._pages[-1].fragments.append(placed)
        self._last_fragment = placed
        return placed

    def draw(self, rule: Rule, y: float) -> PlacedRule:
        placed = PlacedRule(
            rule=rule, page_index=self.page_index, x_start=rule.x_start, x_end=rule.x_end, y=y
        )
        self._pages[-1].rules.append(placed)
        if rule.kind is RuleKind.UNDERLINE and self._last_fragment is not None:
            self._headings.append(SectionHeading(self._last_fragment, placed))
        return placed

    def finish(self) -> PagedDocument:
        return PagedDocument(
            pages=tuple(page.freeze() for page in self._pages),
            headings=tuple(self._headings),
        )
