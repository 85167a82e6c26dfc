"""
Line classification for unmarked resume and cover letter text.

Assigns each body line exactly one LineRole. The categories overlap (an
all-caps job line is also a candidate heading), so classification walks an
ordered tuple of named predicates and the first match wins. The order of
LINE_RULES is the tie-break policy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence, Tuple

from quire.contexts.structuring.header import HeaderBlock, RawDocument
from quire.contexts.structuring.line_patterns import (
    BULLET_MARKERS,
    SECTION_LEXICON,
    BodyLinePatterns,
    has_four_digit_run,
    is_header_leftover,
    subsection_label,
)


class LineRole(Enum):
    """Semantic role of a body line."""

    SECTION_HEADER = "section_header"
    SUBSECTION = "subsection"
    JOB_TITLE_DATE = "job_title_date"
    BULLET = "bullet"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


@dataclass(frozen=True)
class ClassifiedLine:
    """A body line with its position in the RawDocument and its role."""

    index: int
    text: str
    role: LineRole


# =============================================================================
# Predicates (each takes a trimmed, non-blank line)
# =============================================================================


def is_section_header(line: str) -> bool:
    """Lexicon match in any casing, or a date-free all-caps line."""
    if line.upper() in SECTION_LEXICON:
        return True
    return (
        line.isupper()
        and len(line) > 3
        and "|" not in line
        and "•" not in line
        and not has_four_digit_run(line)
    )


def is_subsection(line: str) -> bool:
    """Capitalised short label, colon, then inline content."""
    return subsection_label(line) is not None


def is_job_title_date(line: str) -> bool:
    """Capitalised phrase followed by a parenthesised year or 'present'."""
    return BodyLinePatterns.JOB_TITLE.search(line) is not None


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_MARKERS)


LINE_RULES: Tuple[Tuple[LineRole, Callable[[str], bool]], ...] = (
    (LineRole.SECTION_HEADER, is_section_header),
    (LineRole.SUBSECTION, is_subsection),
    (LineRole.JOB_TITLE_DATE, is_job_title_date),
    (LineRole.BULLET, is_bullet),
)


def classify_line(line: str) -> LineRole:
    """
    Classify a single line.

    Args:
        line: Raw line (surrounding whitespace is ignored)

    Returns:
        LineRole for the line; BLANK if empty after trimming, PARAGRAPH if no rule matches

    Example:
        >>> classify_line("Programming Languages: Go, Rust")
        <LineRole.SUBSECTION: 'subsection'>
        >>> classify_line("MARCH 2020 CONTRACT")
        <LineRole.PARAGRAPH: 'paragraph'>
    """
    trimmed = line.strip()
    if not trimmed:
        return LineRole.BLANK

    for role, predicate in LINE_RULES:
        if predicate(trimmed):
            return role

    return LineRole.PARAGRAPH


def classify_document(raw: RawDocument, header: HeaderBlock) -> List[ClassifiedLine]:
    """
    Classify every body line of a document.

    Lines consumed by the header are skipped by index. Until the first real body
    line appears, leftover contact lines (a second email line, a bare GitHub URL)
    are skipped too; once a body line is seen the header is considered consumed
    and every later line is classified. Blank lines are always kept so their
    vertical gap is preserved.

    Args:
        raw: Document lines
        header: Header extracted from the same document

    Returns:
        ClassifiedLine per body line, in document order
    """
    classified: List[ClassifiedLine] = []
    header_consumed = False

    for index, line in enumerate(raw.lines):
        trimmed = line.strip()
        role = classify_line(trimmed)

        if role is LineRole.BLANK:
            classified.append(ClassifiedLine(index, trimmed, role))
            continue

        if index in header.line_indices:
            continue

        if not header_consumed:
            if is_header_leftover(trimmed):
                continue
            header_consumed = True

        classified.append(ClassifiedLine(index, trimmed, role))

    return classified


def count_roles(lines: Sequence[ClassifiedLine]) -> dict:
    """Count classified lines per role (roles with zero lines omitted)."""
    counts: dict = {}
    for line in lines:
        counts[line.role] = counts.get(line.role, 0) + 1
    return counts
