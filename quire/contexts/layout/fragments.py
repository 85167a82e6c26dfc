"""
Layout primitives: styled fragments, rules and the operations a block emits.

The formatter turns each classified line into a LayoutBlock, a tuple of
LayoutOps. The paginator reduces the op stream; it never looks at line text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from quire.contexts.structuring.classifier import LineRole


class Alignment(Enum):
    """Horizontal anchor a fragment is resolved against."""

    LEFT = "left"
    CENTERED = "centered"
    RIGHT_ALIGNED = "right_aligned"


class RuleKind(Enum):
    """Purpose of a drawn horizontal line."""

    UNDERLINE = "underline"
    DIVIDER = "divider"


@dataclass(frozen=True)
class StyledFragment:
    """
    Unit of styled text emitted by the formatter.

    Attributes:
        text: Text to draw
        font_size_pt: Font size in points
        bold: Bold weight if True
        align: LEFT anchors at the left margin, CENTERED at the page centre,
               RIGHT_ALIGNED ends at the right margin
        indent_level: 0 for the margin, 1 for bullet body text
        offset: Extra horizontal shift (mm) from the LEFT anchor
    """

    text: str
    font_size_pt: float
    bold: bool = False
    align: Alignment = Alignment.LEFT
    indent_level: int = 0
    offset: float = 0.0


@dataclass(frozen=True)
class Rule:
    """Horizontal line drawn `offset` below the cursor, from x_start to x_end."""

    kind: RuleKind
    x_start: float
    x_end: float
    offset: float = 0.0
    thickness: float = 0.5

    @property
    def length(self) -> float:
        return self.x_end - self.x_start


# =============================================================================
# Layout operations
# =============================================================================


@dataclass(frozen=True)
class Reserve:
    """Ask for `space` of headroom; break the page if it is not available."""

    space: float


@dataclass(frozen=True)
class Advance:
    """Move the cursor down by `dy`."""

    dy: float


@dataclass(frozen=True)
class Place:
    """Emit a fragment at the current cursor position."""

    fragment: StyledFragment


@dataclass(frozen=True)
class Draw:
    """Emit a rule relative to the current cursor position."""

    rule: Rule


LayoutOp = Union[Reserve, Advance, Place, Draw]


@dataclass(frozen=True)
class LayoutBlock:
    """
    Ops produced for one source line (or the name/contact header).

    Attributes:
        role: LineRole of the source line, None for header blocks
        ops: Operations in emission order
        source_index: RawDocument line index the block came from
        label: Block label for diagnostics ("name", "contact" or the role value)
    """

    role: Optional[LineRole]
    ops: Tuple[LayoutOp, ...]
    source_index: int = -1
    label: str = ""

    @property
    def fragments(self) -> Tuple[StyledFragment, ...]:
        return tuple(op.fragment for op in self.ops if isinstance(op, Place))
