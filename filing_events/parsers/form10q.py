"""
Form 10-Q Parser

Quarterly reports disclose repurchases under "Issuer Purchases of Equity
Securities" (Part II, Item 2) and sometimes discuss patents in an
"Intellectual Property" or "Patents" section. Both are bounded by the next
"Item" heading.
"""

import re
import logging

from ..models import ParsedData
from .base import BaseFilingParser, FormType, extract_section, has_keywords

logger = logging.getLogger(__name__)

BUYBACK_SECTION = "Issuer Purchases of Equity Securities"
PATENT_SECTIONS = ("Patents", "Intellectual Property")
SECTION_END = "Item"

TOTAL_SHARES_PATTERN = re.compile(r"total\s+of\s+([\d,]+)\s+shares", re.IGNORECASE)
DOLLAR_AMOUNT_PATTERN = re.compile(r"\$([\d,]+(?:\.\d+)?)\s+(million|billion)", re.IGNORECASE)

UNIT_MULTIPLIERS = {
    "million": 1_000_000,
    "billion": 1_000_000_000,
}

NEW_PATENT_KEYWORDS = (
    "new patent", "patent issuance", "patent approval",
    "patent office has granted", "patent has been issued",
)


class Form10QParser(BaseFilingParser):
    """Parser for Form 10-Q quarterly reports, focused on buybacks and patents."""

    form_types = (FormType.FORM_10Q.value,)

    def _parse_content(self, content: str, parsed_data: ParsedData) -> ParsedData:
        buyback_section = extract_section(content, BUYBACK_SECTION, SECTION_END)
        if buyback_section:
            parsed_data.buyback = True
            parsed_data.buyback_details = buyback_section

            shares_match = TOTAL_SHARES_PATTERN.search(buyback_section)
            if shares_match:
                digits = shares_match.group(1).replace(",", "")
                if digits:
                    parsed_data.total_shares_repurchased = int(digits)

            amount_match = DOLLAR_AMOUNT_PATTERN.search(buyback_section)
            if amount_match:
                digits = amount_match.group(1).replace(",", "")
                if digits:
                    multiplier = UNIT_MULTIPLIERS[amount_match.group(2).lower()]
                    parsed_data.buyback_amount = float(digits) * multiplier

        patent_section = None
        for heading in PATENT_SECTIONS:
            patent_section = extract_section(content, heading, SECTION_END)
            if patent_section:
                break

        if patent_section:
            parsed_data.patent_info = patent_section
            parsed_data.new_patents = has_keywords(patent_section, NEW_PATENT_KEYWORDS)

        return parsed_data
