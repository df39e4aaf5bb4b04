"""Parser for proxy statements (DEF 14A and PRE 14A)."""

import re
import logging
from typing import Iterable, Optional

from ..models import ParsedData
from .base import BaseFilingParser, FormType, has_keywords

logger = logging.getLogger(__name__)

PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
SPLIT_RATIO_PATTERN = re.compile(r"(\d+)[:-](\d+)")

NAME_CHANGE_KEYWORDS = (
    "change the name", "amendment to the company name",
    "changing the company name", "corporate name change",
)
REVERSE_SPLIT_KEYWORDS = (
    "reverse stock split", "reverse split", "share consolidation",
)
SPECIAL_DIVIDEND_KEYWORDS = (
    "special dividend", "special distribution", "one-time dividend",
    "extraordinary dividend",
)


class Form14AParser(BaseFilingParser):
    """
    Detects shareholder proposals in proxy statements.

    Each blank-line separated paragraph is checked on its own; the first
    paragraph mentioning a proposal kind is kept as that proposal's details.
    """

    form_types = (FormType.DEF_14A.value, FormType.PRE_14A.value)

    def _parse_content(self, content: str, parsed_data: ParsedData) -> ParsedData:
        paragraphs = PARAGRAPH_SPLIT.split(content)

        name_change = self._find_paragraph(paragraphs, NAME_CHANGE_KEYWORDS)
        if name_change:
            parsed_data.name_change = True
            parsed_data.name_change_details = name_change

        reverse_split = self._find_paragraph(paragraphs, REVERSE_SPLIT_KEYWORDS)
        if reverse_split:
            parsed_data.reverse_stock_split = True
            parsed_data.reverse_split_details = reverse_split

            ratio_match = SPLIT_RATIO_PATTERN.search(reverse_split)
            if ratio_match:
                parsed_data.split_ratio = f"{ratio_match.group(1)}:{ratio_match.group(2)}"

        special_dividend = self._find_paragraph(paragraphs, SPECIAL_DIVIDEND_KEYWORDS)
        if special_dividend:
            parsed_data.special_dividend = True
            parsed_data.special_dividend_details = special_dividend

        return parsed_data

    @staticmethod
    def _find_paragraph(paragraphs: Iterable[str], keywords: Iterable[str]) -> Optional[str]:
        """First paragraph containing any keyword, or None."""
        for paragraph in paragraphs:
            if has_keywords(paragraph, keywords):
                return paragraph
        return None
