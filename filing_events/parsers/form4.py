"""
Form 4 Parser

Form 4 reports changes in beneficial ownership by insiders. The ownership
document is XML:

    <ownershipDocument>
      <reportingOwner>
        <reportingOwnerId><rptOwnerName>DOE JANE</rptOwnerName></reportingOwnerId>
        <reportingOwnerRelationship>...</reportingOwnerRelationship>
      </reportingOwner>
      <nonDerivativeTable>
        <nonDerivativeTransaction>
          <transactionDate><value>2024-01-03</value></transactionDate>
          <transactionCoding><transactionCode>P</transactionCode></transactionCoding>
          <transactionAmounts>
            <transactionShares><value>1000</value></transactionShares>
            <transactionPricePerShare><value>12.50</value></transactionPricePerShare>
          </transactionAmounts>
        </nonDerivativeTransaction>
      </nonDerivativeTable>
    </ownershipDocument>

Older and hand-assembled filings use a flat ``<rptOwnerRelationship>`` block
instead of ``<reportingOwnerRelationship>``; both are accepted.
"""

import logging
from typing import Optional

from ..models import InsiderTransaction, ParsedData
from .base import BaseFilingParser, FormType, extract_tag_text, find_tag_blocks

logger = logging.getLogger(__name__)

RELATIONSHIP_TAGS = ("rptOwnerRelationship", "reportingOwnerRelationship")
INSIDER_FLAGS = ("isDirector", "isOfficer", "isTenPercentOwner")
TRUE_FLAG_VALUES = ("1", "true")


def _to_float(value: Optional[str]) -> float:
    """Parse a numeric tag value, treating missing or malformed values as 0."""
    if not value:
        return 0.0
    try:
        return float(value.replace(",", ""))
    except ValueError:
        return 0.0


class Form4Parser(BaseFilingParser):
    """Parser for Form 4 insider transaction reports."""

    form_types = (FormType.FORM_4.value,)

    def _parse_content(self, content: str, parsed_data: ParsedData) -> ParsedData:
        parsed_data.reporting_person = extract_tag_text(content, "rptOwnerName")

        relationship = self._extract_relationship(content)
        if relationship is not None:
            parsed_data.relationship = relationship
            parsed_data.is_insider = any(
                (extract_tag_text(relationship, flag) or "").lower() in TRUE_FLAG_VALUES
                for flag in INSIDER_FLAGS
            )

        for block in find_tag_blocks(content, "nonDerivativeTransaction"):
            transaction = self._parse_transaction(block)
            parsed_data.transactions.append(transaction)

            if transaction.is_purchase and parsed_data.is_insider:
                parsed_data.insider_buying = True

        logger.debug(
            f"Form 4: {len(parsed_data.transactions)} transactions, "
            f"insider={parsed_data.is_insider}, buying={parsed_data.insider_buying}"
        )
        return parsed_data

    def _extract_relationship(self, content: str) -> Optional[str]:
        """Return the raw inner text of the reporting owner relationship block."""
        for tag in RELATIONSHIP_TAGS:
            blocks = find_tag_blocks(content, tag)
            if blocks:
                block = blocks[0]
                return block[len(tag) + 2:len(block) - len(tag) - 3]
        return None

    def _parse_transaction(self, block: str) -> InsiderTransaction:
        """Build an InsiderTransaction from one nonDerivativeTransaction block."""
        code = extract_tag_text(block, "transactionCode") or ""
        shares = _to_float(extract_tag_text(block, "transactionShares"))
        price = _to_float(extract_tag_text(block, "transactionPricePerShare"))
        date = extract_tag_text(block, "transactionDate") or ""

        return InsiderTransaction(
            code=code,
            shares=shares,
            price=price,
            date=date,
            value=shares * price,
            is_purchase=code == "P",
        )
