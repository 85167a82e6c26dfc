"""Unit tests for header extraction."""

import pytest

from quire.contexts.structuring.header import (
    CONTACT_SEPARATOR,
    HeaderBlock,
    RawDocument,
    extract_contact_parts,
    extract_header,
)


@pytest.mark.unit
def test_raw_document_from_text():
    raw = RawDocument.from_text("Jane Doe\r\njane@example.com\n\nSUMMARY")
    assert raw.lines == ("Jane Doe", "jane@example.com", "", "SUMMARY")
    assert len(raw) == 4


@pytest.mark.unit
def test_raw_document_empty():
    assert RawDocument.from_text("").lines == ()


@pytest.mark.unit
def test_jane_doe_header():
    raw = RawDocument.from_text(
        "Jane Doe\njane@example.com | (555) 123-4567 | linkedin.com/in/janedoe"
    )
    header = extract_header(raw)

    assert header.name == "Jane Doe"
    assert header.contact_parts == (
        "jane@example.com",
        "(555) 123-4567",
        "linkedin.com/in/janedoe",
    )
    assert header.contact_line() == CONTACT_SEPARATOR.join(header.contact_parts)
    assert header.line_indices == frozenset({0, 1})


@pytest.mark.unit
def test_contact_parts_follow_fixed_order():
    """Email, phone, LinkedIn, GitHub, regardless of source order."""
    parts = extract_contact_parts(
        "github.com/jdoe | linkedin.com/in/jdoe | 555.123.4567 | Email: jane@example.com"
    )
    assert parts == ("jane@example.com", "555.123.4567", "linkedin.com/in/jdoe", "github.com/jdoe")


@pytest.mark.unit
@pytest.mark.parametrize(
    "phone", ["(555) 123-4567", "555-123-4567", "555.123.4567", "555 123 4567"]
)
def test_phone_separator_styles(phone):
    assert extract_contact_parts(f"jane@example.com | {phone}") == ("jane@example.com", phone)


@pytest.mark.unit
def test_linkedin_label_reference():
    parts = extract_contact_parts("jane@example.com | LinkedIn: Jane Doe")
    assert parts == ("jane@example.com", "Jane Doe")


@pytest.mark.unit
def test_contact_parts_deduplicated():
    parts = extract_contact_parts("jane@example.com | jane@example.com")
    assert parts == ("jane@example.com",)


@pytest.mark.unit
def test_leading_blank_lines_are_ignored():
    raw = RawDocument.from_text("\n\n  Jane Doe  \n\n jane@example.com")
    header = extract_header(raw)

    assert header.name == "Jane Doe"
    assert header.line_indices == frozenset({2, 4})


@pytest.mark.unit
def test_name_only_when_second_line_is_not_contact():
    raw = RawDocument.from_text("Jane Doe\nSoftware engineer with ten years of experience")
    header = extract_header(raw)

    assert header.has_name
    assert not header.has_contact
    assert header.line_indices == frozenset({0})


@pytest.mark.unit
def test_contact_line_without_extractable_parts():
    """The line is consumed by the header but nothing is rendered for it."""
    raw = RawDocument.from_text("Jane Doe\nEmail available on request")
    header = extract_header(raw)

    assert header.contact_parts == ()
    assert not header.has_contact
    assert header.line_indices == frozenset({0, 1})


@pytest.mark.unit
def test_empty_document_has_no_header():
    header = extract_header(RawDocument.from_text("   \n\n"))
    assert header == HeaderBlock()
    assert not header.has_name
