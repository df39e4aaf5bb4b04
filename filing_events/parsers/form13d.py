"""Parser for Schedule 13D beneficial ownership reports."""

import logging
import re

from ..models import ParsedData
from .base import BaseFilingParser, FormType, extract_tag_text, has_keywords

logger = logging.getLogger(__name__)

# Leading number of a percentOfClass value such as "6.2%" or "6.2 (see Item 5)"
PERCENT_PATTERN = re.compile(r"\s*([\d.]+)")

# Purpose-of-transaction language typical of activist holders
ACTIVIST_KEYWORDS = (
    "change board", "management change", "strategic alternatives",
    "strategic review", "sell the company", "merger", "acquisition",
    "activist", "proxy contest", "board seat", "director nomination",
)


class Schedule13DParser(BaseFilingParser):
    """
    Parses Schedule 13D filings (holders of more than 5% of a class).

    Extracts the reporting person, CUSIP, issuer, percent of class owned and
    the Item 4 "purpose of transaction" text, which decides whether the
    holder looks like an activist.
    """

    form_types = (FormType.SC_13D.value,)

    def _parse_content(self, content: str, parsed_data: ParsedData) -> ParsedData:
        parsed_data.reporting_person = extract_tag_text(content, "reportingPersonName")
        parsed_data.cusip = extract_tag_text(content, "cusip")
        parsed_data.issuer_name = extract_tag_text(content, "issuerName")

        percent = extract_tag_text(content, "percentOfClass")
        if percent:
            parsed_data.percent_owned = self._parse_percent(percent)

        purpose = extract_tag_text(content, "purpose")
        if purpose:
            parsed_data.purpose = purpose
            parsed_data.is_activist = has_keywords(purpose, ACTIVIST_KEYWORDS)

        return parsed_data

    @staticmethod
    def _parse_percent(text: str) -> float:
        """Parse the leading number of a percentOfClass value, 0.0 if there is none."""
        match = PERCENT_PATTERN.match(text)
        if match:
            try:
                return float(match.group(1))
            except ValueError:
                pass
        logger.debug(f"Unparseable percentOfClass: {text!r}")
        return 0.0
