"""
Reusable patterns and constants for inferring structure from unmarked text.

Generated resumes and cover letters arrive as plain lines with no markup, so
every structural decision is made by the regex patterns and lexicons below.

Pattern classes follow one convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# SECTION LEXICON
# =============================================================================

# Section names recognised regardless of the casing used in the source text
SECTION_LEXICON = frozenset(
    {
        "SUMMARY",
        "SKILLS",
        "WORK EXPERIENCE",
        "EXPERIENCE",
        "CERTIFICATIONS",
        "CERTIFICATION",
        "EDUCATION",
        "PROJECTS",
    }
)

# Glyphs that open a bullet line
BULLET_MARKERS = ("•", "-")


# =============================================================================
# BODY LINE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class BodyLinePatterns:
    """
    Regex patterns for classifying body lines.

    Supports:
    - All-caps headings guarded against date ranges (MARCH 2020 CONTRACT)
    - Key-value subsection lines (Programming Languages: Go, Rust)
    - Job title lines ending in a parenthesised date (Engineer, Acme (2021 - Present))
    """

    # Any run of four digits (a year, in practice)
    FOUR_DIGIT_RUN: re.Pattern = re.compile(r"\d{4}")

    # Capitalised label of letters/spaces/ampersands, a colon, then content
    SUBSECTION: re.Pattern = re.compile(r"^[A-Z][a-zA-Z\s&]+:\s*.+")

    # Capitalised leading phrase followed eventually by "(... 2021" or "(... present"
    JOB_TITLE: re.Pattern = re.compile(r"^[A-Z][a-zA-Z\s,]+.*\(.*(?:\d{4}|(?i:present))")

    # Optional month name before a year (Jan, Sept., March)
    MONTH_PREFIX: str = r"(?:(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+)?"

    # Last parenthesised group ending the line that holds a date range
    # ("2019 - 2021", "Mar 2020 – Present") or just "present"
    TRAILING_DATE: re.Pattern = re.compile(
        r"\(\s*("
        + MONTH_PREFIX
        + r"\d{4}\s*[-–—]\s*(?:"
        + MONTH_PREFIX
        + r"\d{4}|present)|present)\s*\)\s*$",
        re.IGNORECASE,
    )


# Labels at or beyond this length are prose, not subsection keys
SUBSECTION_LABEL_LIMIT = 50


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for pulling contact details out of a header line.

    Applied independently, in order: email, phone, LinkedIn, GitHub.
    """

    EMAIL: re.Pattern = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

    # (555) 123-4567, 555-123-4567, 555.123.4567, 555 123 4567, 5551234567
    PHONE: re.Pattern = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

    LINKEDIN_URL: re.Pattern = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)

    # "LinkedIn: Jane Doe" style reference without a URL
    LINKEDIN_LABEL: re.Pattern = re.compile(r"LinkedIn:\s*([\w\s]+)", re.IGNORECASE)

    GITHUB_URL: re.Pattern = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)


# Substrings marking a line as contact information (matched lowercase)
CONTACT_MARKERS = ("@", "email")

# Substrings marking leftover header lines that must not reach the body
HEADER_LEFTOVER_MARKERS = ("@", "email", "github", "linkedin")


# =============================================================================
# HELPERS
# =============================================================================


def has_four_digit_run(text: str) -> bool:
    """True if text contains a 4-digit run (a year, most likely)."""
    return BodyLinePatterns.FOUR_DIGIT_RUN.search(text) is not None


def subsection_label(text: str) -> Optional[str]:
    """Return the label before the first colon if text is a subsection line, or None."""
    if not BodyLinePatterns.SUBSECTION.match(text):
        return None
    label = text.split(":", 1)[0]
    return label if len(label) < SUBSECTION_LABEL_LIMIT else None


def is_contact_line(text: str) -> bool:
    """True if text looks like the contact line of a header."""
    lowered = text.lower()
    return any(marker in lowered for marker in CONTACT_MARKERS)


def is_header_leftover(text: str) -> bool:
    """True if text carries contact details that belong above the body."""
    lowered = text.lower()
    return any(marker in lowered for marker in HEADER_LEFTOVER_MARKERS)
