"""
Base class and text helpers shared by all form parsers.

Tag extraction here scans with ``str.find`` for a start tag and the matching
end tag after it. Filing bodies mix XML fragments with free text spanning
many lines, and plain index scanning handles that without multiline regex
flags or backtracking-prone patterns.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..models import FilingMetadata, ParsedData, ParsedFiling

logger = logging.getLogger(__name__)


class FormType(str, Enum):
    """SEC form codes with a registered parser."""

    FORM_8K = "8-K"
    FORM_4 = "4"
    SC_13D = "SC 13D"
    FORM_10Q = "10-Q"
    DEF_14A = "DEF 14A"
    PRE_14A = "PRE 14A"


class FilingParseError(Exception):
    """Raised when a parser fails unexpectedly on a filing."""

    def __init__(self, form_type: str, accession_number: str, reason: str):
        self.form_type = form_type
        self.accession_number = accession_number
        self.reason = reason
        super().__init__(f"Failed to parse {form_type} filing {accession_number}: {reason}")


def extract_section(content: str, start_marker: str, end_marker: str) -> Optional[str]:
    """
    Return the trimmed text between two literal markers.

    The end marker is searched for after the first occurrence of the start
    marker. Matching is case-sensitive.

    Returns:
        Text between the markers, or None if either marker is missing
    """
    start_idx = content.find(start_marker)
    if start_idx == -1:
        return None

    search_start = start_idx + len(start_marker)
    end_idx = content.find(end_marker, search_start)
    if end_idx == -1:
        return None

    return content[search_start:end_idx].strip()


def has_keywords(content: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive check for any keyword occurring in content."""
    normalized = content.lower()
    return any(keyword.lower() in normalized for keyword in keywords)


def _next_tag_block(content: str, tag: str, pos: int = 0) -> Optional[Tuple[int, int]]:
    """Locate the next <tag>...</tag> block at or after pos as (start, end)."""
    start_tag = f"<{tag}>"
    end_tag = f"</{tag}>"

    start_idx = content.find(start_tag, pos)
    if start_idx == -1:
        return None

    end_idx = content.find(end_tag, start_idx + len(start_tag))
    if end_idx == -1:
        return None

    return start_idx, end_idx + len(end_tag)


def find_tag_blocks(content: str, tag: str) -> List[str]:
    """Return every <tag>...</tag> block in content, tags included."""
    blocks = []
    pos = 0
    while True:
        span = _next_tag_block(content, tag, pos)
        if span is None:
            break
        blocks.append(content[span[0]:span[1]])
        pos = span[1]
    return blocks


def extract_tag_text(content: str, tag: str) -> Optional[str]:
    """
    Return the stripped inner text of the first <tag> element.

    Ownership XML wraps most scalars as <tag><value>...</value></tag>; such a
    wrapper is unwrapped. Empty elements yield None.
    """
    span = _next_tag_block(content, tag)
    if span is None:
        return None

    inner = content[span[0] + len(tag) + 2:span[1] - len(tag) - 3]
    if "<value>" in inner and "</value>" in inner:
        return extract_tag_text(inner, "value")

    inner = inner.strip()
    return inner or None


class BaseFilingParser(ABC):
    """
    Abstract parser for one SEC form family.

    Subclasses declare the form codes they accept in ``form_types`` and
    implement ``_parse_content``.
    """

    form_types: Tuple[str, ...] = ()

    def can_parse(self, form_type: str) -> bool:
        """Check if this parser handles the given form type (exact match)."""
        return form_type in self.form_types

    def parse(self, content: str, metadata: FilingMetadata) -> ParsedFiling:
        """
        Parse raw filing content into a ParsedFiling.

        Args:
            content: Raw filing text
            metadata: Filing metadata supplied by the caller

        Returns:
            ParsedFiling with a freshly populated ParsedData

        Raises:
            FilingParseError: If parsing fails unexpectedly
        """
        logger.info(f"Parsing {metadata.form_type} filing: {metadata.accession_number}")

        try:
            parsed_data = self._parse_content(content, ParsedData())
        except Exception as e:
            logger.error(f"Error parsing {metadata.form_type} filing {metadata.accession_number}: {e}")
            raise FilingParseError(metadata.form_type, metadata.accession_number, str(e)) from e

        return ParsedFiling(
            accession_number=metadata.accession_number,
            cik=metadata.cik,
            company_name=metadata.company_name,
            filing_date=metadata.filing_date,
            form_type=metadata.form_type,
            content=content,
            parsed_data=parsed_data,
        )

    @abstractmethod
    def _parse_content(self, content: str, parsed_data: ParsedData) -> ParsedData:
        """Populate parsed_data from content and return it."""
