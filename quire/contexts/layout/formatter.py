"""
Block formatting: one typographic rule per LineRole.

Each rule turns a classified line into a LayoutBlock of ops (reserve headroom,
place fragments, draw rules, advance the cursor). Wrapping goes through the
injected TextMeasurer; the formatter never knows about pages.
"""

from typing import Callable, Dict, List, Optional

from quire.contexts.layout.config import LayoutConfig
from quire.contexts.layout.fragments import (
    Advance,
    Alignment,
    Draw,
    LayoutBlock,
    LayoutOp,
    Place,
    Reserve,
    Rule,
    RuleKind,
    StyledFragment,
)
from quire.contexts.rendering.measurement import TextMeasurer
from quire.contexts.structuring.classifier import ClassifiedLine, LineRole
from quire.contexts.structuring.header import HeaderBlock
from quire.contexts.structuring.line_patterns import BULLET_MARKERS, BodyLinePatterns


def split_job_title(line: str) -> tuple:
    """
    Split a job line into (title, date) around its trailing date group.

    The date is the last parenthesised group that ends the line and holds a
    year range ("2019 - 2021", "Mar 2020 - Present") or just "present"; a lone
    year or any other group stays in the title.

    Returns:
        (title, date) with the date including its parentheses, or (line, None)

    Example:
        >>> split_job_title("Senior Engineer, Acme Corp (Remote) (2021 - Present)")
        ('Senior Engineer, Acme Corp (Remote)', '(2021 - Present)')
    """
    match = BodyLinePatterns.TRAILING_DATE.search(line)
    if not match:
        return line, None
    return line[: match.start()].strip(), f"({match.group(1)})"


def strip_bullet_marker(line: str) -> str:
    """Drop the leading bullet glyph and the whitespace after it."""
    if line.startswith(BULLET_MARKERS):
        return line[1:].strip()
    return line


class BlockFormatter:
    """
    Formats header and body lines into LayoutBlocks.

    Args:
        config: Layout configuration (geometry, fonts, per-role styles)
        measurer: Text measurement backend used for widths and wrapping
    """

    def __init__(self, config: LayoutConfig, measurer: TextMeasurer):
        self.config = config
        self.styles = config.styles
        self.page = config.page
        self.measurer = measurer
        self._rules: Dict[LineRole, Callable[[str], List[LayoutOp]]] = {
            LineRole.SECTION_HEADER: self._section_header,
            LineRole.SUBSECTION: self._subsection,
            LineRole.JOB_TITLE_DATE: self._job_title_date,
            LineRole.BULLET: self._bullet,
            LineRole.PARAGRAPH: self._paragraph,
            LineRole.BLANK: self._blank,
        }

    # =========================================================================
    # Header
    # =========================================================================

    def format_header(self, header: HeaderBlock) -> List[LayoutBlock]:
        """
        Format the name and contact line.

        The name is centered and upper-cased. The contact line (when present) is
        centered beneath it with a full-width divider separating header and body.
        """
        if not header.has_name:
            return []

        name_style = self.styles.name
        blocks = [
            LayoutBlock(
                role=None,
                label="name",
                source_index=min(header.line_indices),
                ops=(
                    Reserve(name_style.space_needed),
                    Place(
                        StyledFragment(
                            header.name.upper(),
                            name_style.font_size,
                            bold=True,
                            align=Alignment.CENTERED,
                        )
                    ),
                    Advance(name_style.advance),
                ),
            )
        ]

        if header.has_contact:
            contact = self.styles.contact
            divider = Rule(
                kind=RuleKind.DIVIDER,
                x_start=self.page.margin_left,
                x_end=self.page.right_edge,
                thickness=contact.divider_thickness,
            )
            blocks.append(
                LayoutBlock(
                    role=None,
                    label="contact",
                    source_index=max(header.line_indices),
                    ops=(
                        Place(
                            StyledFragment(
                                header.contact_line(contact.separator),
                                contact.font_size,
                                align=Alignment.CENTERED,
                            )
                        ),
                        Advance(contact.advance),
                        Draw(divider),
                        Advance(contact.divider_gap),
                    ),
                )
            )

        return blocks

    # =========================================================================
    # Body
    # =========================================================================

    def format_line(self, line: ClassifiedLine) -> LayoutBlock:
        ops = self._rules[line.role](line.text)
        return LayoutBlock(
            role=line.role, ops=tuple(ops), source_index=line.index, label=line.role.value
        )

    def _section_header(self, text: str) -> List[LayoutOp]:
        style = self.styles.section_header
        display = text.upper()
        width = self.measurer.text_width(display, style.font_size, bold=True)
        underline = Rule(
            kind=RuleKind.UNDERLINE,
            x_start=self.page.margin_left,
            x_end=self.page.margin_left + width,
            offset=style.underline_offset,
            thickness=style.underline_thickness,
        )
        return [
            Reserve(style.space_needed),
            Advance(style.padding_before),
            Place(StyledFragment(display, style.font_size, bold=True)),
            Draw(underline),
            Advance(style.advance),
        ]

    def _subsection(self, text: str) -> List[LayoutOp]:
        style = self.styles.subsection
        colon = text.index(":")
        label = text[: colon + 1]
        content = text[colon + 1 :].strip()

        label_width = self.measurer.text_width(label, style.label_font_size, bold=True)
        wrap_width = self.page.content_width - label_width - style.wrap_gap
        lines = self.measurer.split_to_width(content, style.font_size, wrap_width)

        ops: List[LayoutOp] = [
            Reserve(style.space_needed),
            Place(StyledFragment(label, style.label_font_size, bold=True)),
            Place(StyledFragment(lines[0], style.font_size, offset=label_width + style.label_gap)),
            Advance(style.advance),
        ]
        for continuation in lines[1:]:
            ops += [
                Reserve(style.continuation_space_needed),
                Place(StyledFragment(continuation, style.font_size)),
                Advance(style.advance),
            ]
        return ops

    def _job_title_date(self, text: str) -> List[LayoutOp]:
        style = self.styles.job_title_date
        title, date = split_job_title(text)

        ops: List[LayoutOp] = [Reserve(style.space_needed), Advance(style.padding_before)]

        if date is None:
            ops += [
                Place(StyledFragment(text, style.font_size, bold=True)),
                Advance(style.padding_after),
            ]
            return ops

        date_width = self.measurer.text_width(date, style.date_font_size)
        title_width = self.page.content_width - date_width - style.date_gap
        title_lines = self.measurer.split_to_width(title, style.font_size, title_width, bold=True)

        ops += [
            Place(StyledFragment(title_lines[0], style.font_size, bold=True)),
            Place(StyledFragment(date, style.date_font_size, align=Alignment.RIGHT_ALIGNED)),
        ]
        if len(title_lines) > 1:
            ops.append(Advance(style.advance))
            for continuation in title_lines[1:]:
                ops += [
                    Place(StyledFragment(continuation, style.font_size, bold=True)),
                    Advance(style.advance),
                ]
        ops.append(Advance(style.padding_after))
        return ops

    def _bullet(self, text: str) -> List[LayoutOp]:
        style = self.styles.bullet
        body = strip_bullet_marker(text)
        wrap_width = self.page.content_width - style.wrap_inset
        lines = self.measurer.split_to_width(body, style.font_size, wrap_width)

        ops: List[LayoutOp] = [
            Reserve(style.space_needed),
            Place(StyledFragment(style.glyph, style.font_size, offset=style.glyph_offset)),
        ]
        last = len(lines) - 1
        for i, line in enumerate(lines):
            if i > 0:
                ops.append(Reserve(style.continuation_space_needed))
            ops += [
                Place(StyledFragment(line, style.font_size, indent_level=1)),
                Advance(style.final_advance if i == last else style.advance),
            ]
        return ops

    def _paragraph(self, text: str) -> List[LayoutOp]:
        style = self.styles.paragraph
        lines = self.measurer.split_to_width(text, style.font_size, self.page.content_width)

        ops: List[LayoutOp] = [Reserve(style.space_needed)]
        for line in lines:
            ops += [
                Reserve(style.continuation_space_needed),
                Place(StyledFragment(line, style.font_size)),
                Advance(style.advance),
            ]
        return ops

    def _blank(self, text: Optional[str] = None) -> List[LayoutOp]:
        return [Advance(self.styles.blank.advance)]
