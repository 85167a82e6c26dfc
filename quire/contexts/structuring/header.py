"""
Header extraction: the name and contact line at the top of a document.

The header is built from the first one or two non-blank lines only. The first
is always the name; the second becomes the contact line if it carries an email
marker. Anything else means the body starts right under the name.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from quire.contexts.structuring.line_patterns import ContactPatterns, is_contact_line

# Separator between contact parts on the rendered contact line
CONTACT_SEPARATOR = "  •  "


@dataclass(frozen=True)
class RawDocument:
    """
    Unparsed input text as an ordered, immutable sequence of lines.

    Attributes:
        lines: Lines in document order (may be empty strings)
    """

    lines: Tuple[str, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "RawDocument":
        """Split newline-separated text into a RawDocument."""
        if not text:
            return cls(())
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        return cls(tuple(normalized.split("\n")))

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class HeaderBlock:
    """
    Name and contact details rendered once at the top of the document.

    Attributes:
        name: Name as written in the source (display upper-cases it)
        contact_parts: Email, phone and profile links, in extraction order
        line_indices: RawDocument line indices consumed by the header
    """

    name: str = ""
    contact_parts: Tuple[str, ...] = ()
    line_indices: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def has_name(self) -> bool:
        return bool(self.name)

    @property
    def has_contact(self) -> bool:
        return len(self.contact_parts) > 0

    def contact_line(self, separator: str = CONTACT_SEPARATOR) -> str:
        """Join contact parts into the single centered contact line."""
        return separator.join(self.contact_parts)


def _linkedin_reference(line: str) -> Optional[str]:
    """LinkedIn profile URL, or the name following a 'LinkedIn:' label."""
    match = ContactPatterns.LINKEDIN_URL.search(line)
    if match:
        return match.group(0)
    match = ContactPatterns.LINKEDIN_LABEL.search(line)
    if match:
        return match.group(1).strip() or None
    return None


def extract_contact_parts(line: str) -> Tuple[str, ...]:
    """
    Pull contact details out of a contact line.

    Each detail is matched independently, in order: email, phone, LinkedIn,
    GitHub. Missing details are left out and duplicates collapse to the first.

    Args:
        line: Contact line text

    Returns:
        Tuple of contact parts in display order

    Example:
        >>> extract_contact_parts("jane@example.com | (555) 123-4567 | linkedin.com/in/janedoe")
        ('jane@example.com', '(555) 123-4567', 'linkedin.com/in/janedoe')
    """
    candidates: List[Optional[str]] = []

    email = ContactPatterns.EMAIL.search(line)
    candidates.append(email.group(0) if email else None)

    phone = ContactPatterns.PHONE.search(line)
    candidates.append(phone.group(0) if phone else None)

    candidates.append(_linkedin_reference(line))

    github = ContactPatterns.GITHUB_URL.search(line)
    candidates.append(github.group(0) if github else None)

    parts: List[str] = []
    for part in candidates:
        if part and part not in parts:
            parts.append(part)
    return tuple(parts)


def extract_header(raw: RawDocument) -> HeaderBlock:
    """
    Extract the header block from the first non-blank lines of a document.

    Args:
        raw: Document lines

    Returns:
        HeaderBlock; empty if the document has no non-blank lines, name-only if
        the second non-blank line is not contact-shaped
    """
    non_blank = [(i, line.strip()) for i, line in enumerate(raw.lines) if line.strip()]
    if not non_blank:
        return HeaderBlock()

    name_index, name = non_blank[0]
    if len(non_blank) < 2 or not is_contact_line(non_blank[1][1]):
        return HeaderBlock(name=name, line_indices=frozenset({name_index}))

    contact_index, contact_text = non_blank[1]
    return HeaderBlock(
        name=name,
        contact_parts=extract_contact_parts(contact_text),
        line_indices=frozenset({name_index, contact_index}),
    )
