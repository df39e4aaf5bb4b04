"""
Form 8-K Parser

Form 8-K is the "current report" companies file for material events. Each
disclosure sits under a numbered Item heading, e.g.::

    Item 5.03. Amendments to Articles of Incorporation or Bylaws
    ...
    Item 8.01 Other Events
    ...

The parser finds the items of interest, slices out each item's body and runs
keyword batteries for the signals that item can carry.
"""

import re
import logging
from typing import Dict, Optional, Tuple

from ..models import ParsedData
from .base import BaseFilingParser, FormType, has_keywords

logger = logging.getLogger(__name__)

# Any numbered item heading; marks the end of the previous item's body
NEXT_ITEM_PATTERN = re.compile(r"Item\s*\d+\.\d+[.\s]", re.IGNORECASE)

SIGNAL_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "name_change": (
        "name change", "corporate name change", "changing its name",
        "changed its name", "amendment to change the name",
    ),
    "ticker_change": (
        "ticker symbol change", "trading symbol change", "changed its ticker",
        "new ticker symbol", "symbol will change",
    ),
    "reverse_stock_split": (
        "reverse stock split", "reverse split", "share consolidation",
    ),
    "buyback": (
        "share repurchase", "stock buyback", "repurchase authorization",
        "repurchase program", "buyback program",
    ),
    "uplisting": (
        "uplisting", "uplist", "approval to list", "nasdaq capital market",
        "nasdaq global", "nyse american", "listing on nasdaq",
    ),
    "fda_approval": (
        "fda approval", "nda approval", "clinical trial results",
        "marketing authorization", "clearance from fda",
    ),
    "patent_approval": (
        "patent approval", "patent issuance", "new patent",
        "patent office has granted", "patent has been issued",
    ),
    "spin_off": (
        "spin-off", "spinoff", "spin out", "spinout",
    ),
    "special_dividend": (
        "special dividend", "special distribution", "one-time dividend",
        "extraordinary dividend", "distribution to shareholders",
    ),
    "debt_reduction": (
        "debt refinancing", "debt reduction", "extinguishment of debt",
        "early repayment", "debt repayment", "debt restructuring",
    ),
}


class Form8KParser(BaseFilingParser):
    """Parser for Form 8-K current reports."""

    form_types = (FormType.FORM_8K.value,)

    # Items of interest, in scan order
    ITEM_CATEGORIES = {
        "5.03": "Amendments to Articles of Incorporation/Bylaws; Change in Fiscal Year",
        "8.01": "Other Events",
        "7.01": "Regulation FD Disclosure",
        "2.01": "Completion of Acquisition or Disposition of Assets",
        "1.01": "Entry into a Material Definitive Agreement",
        "2.03": "Creation of a Direct Financial Obligation",
        "3.01": "Notice of Delisting or Failure to Satisfy Listing Rule",
    }

    # Signals each item may raise
    ITEM_SIGNALS: Dict[str, Tuple[str, ...]] = {
        "5.03": ("name_change", "ticker_change", "reverse_stock_split"),
        "8.01": (
            "buyback", "uplisting", "fda_approval", "patent_approval",
            "spin_off", "special_dividend",
        ),
        "7.01": ("buyback",),
        "2.01": ("spin_off",),
        "1.01": ("debt_reduction",),
        "2.03": ("debt_reduction",),
        "3.01": ("uplisting",),
    }

    def _parse_content(self, content: str, parsed_data: ParsedData) -> ParsedData:
        for item_number in self.ITEM_CATEGORIES:
            item_pattern = self._item_pattern(item_number)
            if not item_pattern.search(content):
                continue

            parsed_data.items.append(item_number)

            item_content = self._extract_item_content(content, item_pattern)
            if item_content:
                parsed_data.item_contents[item_number] = item_content
                self._classify_item(item_number, item_content, parsed_data)

        logger.debug(f"8-K items found: {parsed_data.items}")
        return parsed_data

    @staticmethod
    def _item_pattern(item_number: str) -> re.Pattern:
        """Heading pattern for one item, e.g. 'Item 5.03.' or 'ITEM 5.03 '."""
        return re.compile(rf"Item\s*{re.escape(item_number)}[.\s]", re.IGNORECASE)

    def _extract_item_content(self, content: str, item_pattern: re.Pattern) -> Optional[str]:
        """
        Slice out an item's body.

        The body runs from the end of the item heading to the next numbered
        item heading, or to the end of the document.
        """
        match = item_pattern.search(content)
        if not match:
            return None

        start_idx = match.end()
        next_match = NEXT_ITEM_PATTERN.search(content, start_idx)
        end_idx = next_match.start() if next_match else len(content)

        return content[start_idx:end_idx].strip()

    def _classify_item(self, item_number: str, item_content: str, parsed_data: ParsedData) -> None:
        """Set the signals this item's content supports; never clears one."""
        for signal in self.ITEM_SIGNALS.get(item_number, ()):
            if getattr(parsed_data, signal):
                continue
            if has_keywords(item_content, SIGNAL_KEYWORDS[signal]):
                setattr(parsed_data, signal, True)
