"""Unit tests for the block formatter (fixed-width measurement)."""

import pytest

from quire.contexts.layout.config import LayoutConfig
from quire.contexts.layout.formatter import BlockFormatter, split_job_title, strip_bullet_marker
from quire.contexts.layout.fragments import Advance, Alignment, Draw, Reserve, RuleKind
from quire.contexts.rendering.measurement import FixedWidthMeasurer
from quire.contexts.structuring.classifier import ClassifiedLine, LineRole
from quire.contexts.structuring.header import HeaderBlock


@pytest.fixture
def measurer():
    return FixedWidthMeasurer(char_width=0.18)


@pytest.fixture
def formatter(measurer):
    return BlockFormatter(LayoutConfig.default(), measurer)


def _line(text, role):
    return ClassifiedLine(index=0, text=text, role=role)


def _advances(block):
    return [op.dy for op in block.ops if isinstance(op, Advance)]


def _reserves(block):
    return [op.space for op in block.ops if isinstance(op, Reserve)]


# =============================================================================
# Helpers
# =============================================================================


@pytest.mark.unit
def test_split_job_title_takes_last_parenthetical():
    title, date = split_job_title("Senior Engineer, Acme Corp (Remote) (2021 - Present)")
    assert title == "Senior Engineer, Acme Corp (Remote)"
    assert date == "(2021 - Present)"


@pytest.mark.unit
def test_split_job_title_without_trailing_date():
    line = "Engineer (2019 - 2021) at Initech"
    assert split_job_title(line) == (line, None)
    assert split_job_title("Engineer (Remote)") == ("Engineer (Remote)", None)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "BSc Computer Science, State University (2018)",
        "Organizer, Hackathon (Team of 2500)",
        "Engineer, Initech (Building 2020)",
    ],
)
def test_split_job_title_needs_range_or_present(line):
    assert split_job_title(line) == (line, None)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, date",
    [
        ("Data Analyst, Initech (2018 - 2020)", "(2018 - 2020)"),
        ("Data Analyst, Initech (2018–2020)", "(2018–2020)"),
        ("Engineer, Acme (Mar 2020 - Sept. 2021)", "(Mar 2020 - Sept. 2021)"),
        ("Engineer, Acme (January 2022 — present)", "(January 2022 — present)"),
        ("Intern, Acme (Present)", "(Present)"),
    ],
)
def test_split_job_title_date_forms(line, date):
    assert split_job_title(line)[1] == date


@pytest.mark.unit
def test_strip_bullet_marker():
    assert strip_bullet_marker("•   Led the team") == "Led the team"
    assert strip_bullet_marker("-Shipped") == "Shipped"
    assert strip_bullet_marker("Plain") == "Plain"


# =============================================================================
# Header
# =============================================================================


@pytest.mark.unit
def test_header_blocks(formatter):
    header = HeaderBlock(
        name="Jane Doe",
        contact_parts=("jane@example.com", "(555) 123-4567"),
        line_indices=frozenset({0, 1}),
    )
    name_block, contact_block = formatter.format_header(header)

    (name,) = name_block.fragments
    assert name.text == "JANE DOE"
    assert name.bold and name.font_size_pt == 24.0
    assert name.align is Alignment.CENTERED
    assert _reserves(name_block) == [15.0]
    assert _advances(name_block) == [10.0]

    (contact,) = contact_block.fragments
    assert contact.text == "jane@example.com  •  (555) 123-4567"
    assert contact.font_size_pt == 9.0
    assert _advances(contact_block) == [8.0, 8.0]

    (divider,) = [op.rule for op in contact_block.ops if isinstance(op, Draw)]
    assert divider.kind is RuleKind.DIVIDER
    assert divider.x_start == 18.0
    assert divider.x_end == 192.0
    assert divider.thickness == 0.8


@pytest.mark.unit
def test_header_without_contact_draws_no_divider(formatter):
    blocks = formatter.format_header(HeaderBlock(name="Jane Doe", line_indices=frozenset({0})))
    assert len(blocks) == 1
    assert not any(isinstance(op, Draw) for op in blocks[0].ops)


@pytest.mark.unit
def test_empty_header(formatter):
    assert formatter.format_header(HeaderBlock()) == []


# =============================================================================
# Body roles
# =============================================================================


@pytest.mark.unit
def test_section_header(formatter, measurer):
    block = formatter.format_line(_line("Work Experience", LineRole.SECTION_HEADER))

    (heading,) = block.fragments
    assert heading.text == "WORK EXPERIENCE"
    assert heading.bold and heading.font_size_pt == 13.0

    (underline,) = [op.rule for op in block.ops if isinstance(op, Draw)]
    assert underline.kind is RuleKind.UNDERLINE
    assert underline.offset == 1.0
    assert underline.thickness == 0.6
    assert underline.length == pytest.approx(measurer.text_width("WORK EXPERIENCE", 13.0, bold=True))

    assert _reserves(block) == [20.0]
    assert _advances(block) == [4.0, 8.0]


@pytest.mark.unit
def test_subsection(formatter, measurer):
    block = formatter.format_line(
        _line("Programming Languages: Go, Rust, TypeScript", LineRole.SUBSECTION)
    )

    label, content = block.fragments
    assert label.text == "Programming Languages:"
    assert label.bold and label.font_size_pt == 10.0
    assert content.text == "Go, Rust, TypeScript"
    assert not content.bold and content.font_size_pt == 9.5
    assert content.offset == pytest.approx(measurer.text_width(label.text, 10.0, bold=True) + 1.0)
    assert _advances(block) == [5.0]


@pytest.mark.unit
def test_subsection_continuation_returns_to_margin(formatter):
    content = ", ".join(f"Skill{i}" for i in range(40))
    block = formatter.format_line(_line(f"Tools: {content}", LineRole.SUBSECTION))

    fragments = block.fragments
    assert len(fragments) > 2
    assert all(f.offset == 0.0 and f.indent_level == 0 for f in fragments[2:])
    assert _reserves(block) == [10.0] + [6.0] * (len(fragments) - 2)
    assert " ".join(f.text for f in fragments[1:]) == content


@pytest.mark.unit
def test_job_title_date(formatter):
    block = formatter.format_line(
        _line("Senior Engineer, Acme Corp (Remote) (2021 - Present)", LineRole.JOB_TITLE_DATE)
    )

    title, date = block.fragments
    assert title.text == "Senior Engineer, Acme Corp (Remote)"
    assert title.bold and title.font_size_pt == 11.0
    assert date.text == "(2021 - Present)"
    assert date.align is Alignment.RIGHT_ALIGNED
    assert not date.bold and date.font_size_pt == 10.0
    assert _reserves(block) == [15.0]
    assert _advances(block) == [2.0, 6.0]


@pytest.mark.unit
def test_job_title_wraps_beside_date(formatter):
    title = " ".join(["Principal Platform Engineer"] * 4)
    block = formatter.format_line(_line(f"{title} (2019 - 2023)", LineRole.JOB_TITLE_DATE))

    first, date, *rest = block.fragments
    assert date.text == "(2019 - 2023)"
    assert rest and all(f.bold for f in rest)
    assert " ".join([first.text] + [f.text for f in rest]) == title
    assert _advances(block) == [2.0] + [5.0] * (len(rest) + 1) + [6.0]


@pytest.mark.unit
def test_job_title_without_date_falls_back(formatter):
    block = formatter.format_line(_line("Lead Engineer, Initech", LineRole.JOB_TITLE_DATE))

    (only,) = block.fragments
    assert only.text == "Lead Engineer, Initech"
    assert only.bold
    assert _advances(block) == [2.0, 6.0]


@pytest.mark.unit
def test_job_title_with_non_date_group_stays_whole(formatter):
    line = "Organizer, Hackathon (Team of 2500)"
    block = formatter.format_line(_line(line, LineRole.JOB_TITLE_DATE))

    (only,) = block.fragments
    assert only.text == line
    assert only.bold and only.font_size_pt == 11.0
    assert only.align is not Alignment.RIGHT_ALIGNED


@pytest.mark.unit
def test_bullet(formatter):
    block = formatter.format_line(_line("• Led a team of five", LineRole.BULLET))

    glyph, text = block.fragments
    assert glyph.text == "•" and glyph.offset == 3.0
    assert text.text == "Led a team of five"
    assert text.indent_level == 1 and text.font_size_pt == 9.5
    assert _advances(block) == [5.0]


@pytest.mark.unit
def test_wrapped_bullet_is_tight_until_last_line(formatter):
    body = " ".join(["Automated the quarterly reconciliation"] * 5)
    block = formatter.format_line(_line(f"- {body}", LineRole.BULLET))

    lines = block.fragments[1:]
    assert len(lines) >= 2
    assert _advances(block) == [4.5] * (len(lines) - 1) + [5.0]
    assert _reserves(block) == [8.0] + [6.0] * (len(lines) - 1)
    assert " ".join(f.text for f in lines) == body


@pytest.mark.unit
def test_paragraph_wraps_to_content_width(formatter, measurer):
    text = " ".join(["I am excited to apply for this position."] * 8)
    block = formatter.format_line(_line(text, LineRole.PARAGRAPH))

    assert len(block.fragments) > 1
    for fragment in block.fragments:
        assert measurer.text_width(fragment.text, 10.0) <= 174.0
    assert _reserves(block) == [8.0] + [6.0] * len(block.fragments)
    assert _advances(block) == [5.0] * len(block.fragments)


@pytest.mark.unit
def test_blank(formatter):
    block = formatter.format_line(_line("", LineRole.BLANK))
    assert block.fragments == ()
    assert _advances(block) == [2.0]
