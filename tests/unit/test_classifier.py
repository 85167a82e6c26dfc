"""Unit tests for line classification."""

import pytest

from quire.contexts.structuring.classifier import (
    LINE_RULES,
    LineRole,
    classify_document,
    classify_line,
    count_roles,
)
from quire.contexts.structuring.header import RawDocument, extract_header
from quire.contexts.structuring.line_patterns import SECTION_LEXICON


@pytest.mark.unit
@pytest.mark.parametrize("name", sorted(SECTION_LEXICON))
def test_lexicon_lines_are_headers_in_any_casing(name):
    """Lexicon names classify as section headers whatever casing the source used."""
    assert classify_line(name) == LineRole.SECTION_HEADER
    assert classify_line(name.lower()) == LineRole.SECTION_HEADER
    assert classify_line(name.title()) == LineRole.SECTION_HEADER


@pytest.mark.unit
def test_all_caps_line_is_header():
    assert classify_line("TECHNICAL LEADERSHIP") == LineRole.SECTION_HEADER
    assert classify_line("  VOLUNTEER WORK  ") == LineRole.SECTION_HEADER


@pytest.mark.unit
@pytest.mark.parametrize("line", ["MARCH 2024", "MARCH 2020 CONTRACT", "Q3 2023 REVIEW"])
def test_four_digit_run_blocks_all_caps_header(line):
    """All-caps lines carrying a year are never section headers."""
    assert classify_line(line) != LineRole.SECTION_HEADER
    assert classify_line(line) == LineRole.PARAGRAPH


@pytest.mark.unit
def test_all_caps_guards():
    """Short lines and lines with a pipe or bullet glyph are not all-caps headers."""
    assert classify_line("USA") == LineRole.PARAGRAPH
    assert classify_line("PYTHON | SQL | GO") == LineRole.PARAGRAPH
    assert classify_line("•  AWARDS") == LineRole.BULLET
    # No cased characters at all
    assert classify_line("----") == LineRole.BULLET


@pytest.mark.unit
def test_all_caps_parenthetical_without_year_is_header():
    """A date-free all-caps line is a header even if it looks like a job line."""
    assert classify_line("ACME CORP (CONTRACT)") == LineRole.SECTION_HEADER


@pytest.mark.unit
def test_subsection():
    assert classify_line("Programming Languages: Go, Rust, TypeScript") == LineRole.SUBSECTION
    assert classify_line("Tools & Platforms: Docker, AWS") == LineRole.SUBSECTION


@pytest.mark.unit
def test_subsection_requires_content_and_short_label():
    # Nothing after the colon
    assert classify_line("Languages:") == LineRole.PARAGRAPH

    long_label = " ".join(["Word"] * 11)
    assert len(long_label) >= 50
    assert classify_line(f"{long_label}: content") == LineRole.PARAGRAPH


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "Senior Engineer, Acme Corp (Remote) (2021 - Present)",
        "Data Analyst, Initech (2018 - 2020)",
        "Intern (present)",
        "Intern (PRESENT)",
    ],
)
def test_job_title_date(line):
    assert classify_line(line) == LineRole.JOB_TITLE_DATE


@pytest.mark.unit
def test_bullets():
    assert classify_line("• Built data pipelines") == LineRole.BULLET
    assert classify_line("- Reduced costs by 30%") == LineRole.BULLET
    assert classify_line("   - indented dash") == LineRole.BULLET


@pytest.mark.unit
def test_blank_and_paragraph():
    assert classify_line("") == LineRole.BLANK
    assert classify_line("   \t ") == LineRole.BLANK
    assert classify_line("I am writing to apply for the role.") == LineRole.PARAGRAPH


@pytest.mark.unit
def test_rule_order_is_explicit():
    """Tie-break order: header, subsection, job line, bullet."""
    assert [role for role, _ in LINE_RULES] == [
        LineRole.SECTION_HEADER,
        LineRole.SUBSECTION,
        LineRole.JOB_TITLE_DATE,
        LineRole.BULLET,
    ]


@pytest.mark.unit
def test_classify_document_skips_header_and_leftovers():
    text = "\n".join(
        [
            "Jane Doe",
            "jane@example.com | (555) 123-4567",
            "GitHub: github.com/janedoe",
            "",
            "SUMMARY",
            "Builds things.",
            "Reach me by email any time.",
        ]
    )
    raw = RawDocument.from_text(text)
    body = classify_document(raw, extract_header(raw))

    assert [line.index for line in body] == [3, 4, 5, 6]
    assert [line.role for line in body] == [
        LineRole.BLANK,
        LineRole.SECTION_HEADER,
        LineRole.PARAGRAPH,
        LineRole.PARAGRAPH,
    ]


@pytest.mark.unit
def test_classify_document_keeps_words_containing_git():
    """Only contact markers are skipped; 'digital' is ordinary body text."""
    raw = RawDocument.from_text("Jane Doe\njane@example.com\nDigital marketing lead")
    body = classify_document(raw, extract_header(raw))

    assert [line.text for line in body] == ["Digital marketing lead"]


@pytest.mark.unit
def test_classify_document_name_only_header():
    raw = RawDocument.from_text("Jane Doe\nWORK EXPERIENCE\n- Shipped it")
    body = classify_document(raw, extract_header(raw))

    assert [line.role for line in body] == [LineRole.SECTION_HEADER, LineRole.BULLET]


@pytest.mark.unit
def test_count_roles():
    raw = RawDocument.from_text("Jane Doe\n\nSKILLS\n- a\n- b\n")
    counts = count_roles(classify_document(raw, extract_header(raw)))

    assert counts[LineRole.BULLET] == 2
    assert counts[LineRole.SECTION_HEADER] == 1
    assert counts[LineRole.BLANK] == 2
    assert LineRole.PARAGRAPH not in counts
