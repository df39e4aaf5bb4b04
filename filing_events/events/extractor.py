"""
Event Extractor

Turns a ParsedFiling into canonical Event records. Each detection signal in
ParsedData maps to at most one event per filing; details are filled in by the
regex heuristics in ``field_extractors``.

Usage:
    extractor = EventExtractor()
    events = extractor.extract_events(parsed_filing)

    for event in events:
        print(f"{event.type.value}: {event.description}")
"""

import logging
from typing import Any, Dict, List, Optional

from ..models import Event, EventStatus, EventType, ParsedFiling
from ..models.event import make_event_id
from ..utils import SEC_ARCHIVE_URL, filing_archive_url
from . import field_extractors as fx

logger = logging.getLogger(__name__)

# Completed when detected: the filing reports something that already happened.
# Pending: the filing announces an action that takes effect later.
DEFAULT_STATUS: Dict[EventType, EventStatus] = {
    EventType.NAME_CHANGE: EventStatus.PENDING,
    EventType.TICKER_CHANGE: EventStatus.PENDING,
    EventType.INSIDER_BUYING: EventStatus.COMPLETED,
    EventType.ACTIVIST_INVESTOR: EventStatus.COMPLETED,
    EventType.INSTITUTIONAL_INVESTOR: EventStatus.COMPLETED,
    EventType.SHARE_BUYBACK: EventStatus.PENDING,
    EventType.REVERSE_STOCK_SPLIT: EventStatus.PENDING,
    EventType.UPLISTING: EventStatus.PENDING,
    EventType.FDA_APPROVAL: EventStatus.COMPLETED,
    EventType.PATENT_APPROVAL: EventStatus.COMPLETED,
    EventType.SPIN_OFF: EventStatus.PENDING,
    EventType.SPECIAL_DIVIDEND: EventStatus.PENDING,
    EventType.DEBT_REDUCTION: EventStatus.PENDING,
}

STAKE_FORM_TYPE = "SC 13D"
DEFAULT_STAKE_THRESHOLD = 5.0


class EventExtractor:
    """
    Derives corporate events from parsed filings.

    Holds only immutable settings, so one instance can serve any number of
    filings concurrently.
    """

    def __init__(
        self,
        archive_base_url: str = SEC_ARCHIVE_URL,
        stake_threshold: float = DEFAULT_STAKE_THRESHOLD
    ):
        """
        Initialize extractor.

        Args:
            archive_base_url: Base of the SEC archive used to build source URLs
            stake_threshold: 13D ownership percentage that must be exceeded
                for an investor stake event
        """
        self.archive_base_url = archive_base_url
        self.stake_threshold = stake_threshold

    def extract_events(self, filing: ParsedFiling) -> List[Event]:
        """
        Extract events from a parsed filing.

        Never raises: an unexpected failure is logged and yields an empty
        list for this filing.

        Args:
            filing: Output of a form parser

        Returns:
            Events in a fixed type order; empty if no signals were detected
        """
        logger.info(f"Extracting events from {filing.form_type} filing: {filing.accession_number}")

        try:
            return self._extract(filing)
        except Exception as e:
            logger.error(f"Error extracting events from filing {filing.accession_number}: {e}")
            return []

    def _extract(self, filing: ParsedFiling) -> List[Event]:
        data = filing.parsed_data
        content = filing.content
        events = []

        if data.name_change:
            effective_date = fx.extract_effective_date(content)
            events.append(self._create_event(
                filing,
                EventType.NAME_CHANGE,
                "Company name change announced",
                {
                    "oldName": filing.company_name,
                    "newName": fx.extract_new_name(content),
                    "effectiveDate": effective_date,
                },
                execution_date=effective_date,
            ))

        if data.ticker_change:
            effective_date = fx.extract_effective_date(content)
            events.append(self._create_event(
                filing,
                EventType.TICKER_CHANGE,
                "Ticker symbol change announced",
                {
                    "oldTicker": fx.extract_old_ticker(content),
                    "newTicker": fx.extract_new_ticker(content),
                    "effectiveDate": effective_date,
                },
                execution_date=effective_date,
            ))

        if data.insider_buying:
            purchases = [t for t in data.transactions if t.is_purchase]
            events.append(self._create_event(
                filing,
                EventType.INSIDER_BUYING,
                "Insider buying activity reported",
                {
                    "reportingPerson": data.reporting_person,
                    "relationship": data.relationship,
                    "transactions": [t.model_dump(by_alias=True) for t in data.transactions],
                    "totalShares": sum(t.shares for t in purchases),
                    "totalValue": sum(t.value for t in purchases),
                },
            ))

        if filing.form_type == STAKE_FORM_TYPE and data.percent_owned > self.stake_threshold:
            if data.is_activist:
                event_type = EventType.ACTIVIST_INVESTOR
                description = "Activist investor stake reported"
            else:
                event_type = EventType.INSTITUTIONAL_INVESTOR
                description = "Large institutional investor stake reported"
            events.append(self._create_event(
                filing,
                event_type,
                description,
                {
                    "investor": data.reporting_person,
                    "percentOwned": data.percent_owned,
                    "purpose": data.purpose,
                    "cusip": data.cusip,
                },
            ))

        if data.buyback:
            amount = data.buyback_amount
            if amount is None:
                amount = fx.extract_buyback_amount(content)
            events.append(self._create_event(
                filing,
                EventType.SHARE_BUYBACK,
                "Share buyback program announced",
                {
                    "amount": amount,
                    "shares": data.total_shares_repurchased,
                    "programDetails": data.buyback_details,
                },
            ))

        if data.reverse_stock_split:
            effective_date = fx.extract_effective_date(content)
            events.append(self._create_event(
                filing,
                EventType.REVERSE_STOCK_SPLIT,
                "Reverse stock split announced",
                {
                    "ratio": data.split_ratio or fx.extract_split_ratio(content),
                    "effectiveDate": effective_date,
                },
                execution_date=effective_date,
            ))

        if data.uplisting:
            effective_date = fx.extract_effective_date(content)
            events.append(self._create_event(
                filing,
                EventType.UPLISTING,
                "Uplisting to major exchange announced",
                {
                    "currentExchange": fx.extract_current_exchange(content),
                    "targetExchange": fx.extract_target_exchange(content),
                    "effectiveDate": effective_date,
                },
                execution_date=effective_date,
            ))

        if data.fda_approval:
            events.append(self._create_event(
                filing,
                EventType.FDA_APPROVAL,
                "FDA approval announced",
                {
                    "product": fx.extract_product_name(content),
                    "approvalType": fx.extract_approval_type(content),
                },
            ))

        if data.patent_approval or data.new_patents:
            events.append(self._create_event(
                filing,
                EventType.PATENT_APPROVAL,
                "Patent approval or issuance announced",
                {"patentInfo": data.patent_info or data.item_contents.get("8.01")},
            ))

        if data.spin_off:
            distribution_date = fx.extract_distribution_date(content)
            events.append(self._create_event(
                filing,
                EventType.SPIN_OFF,
                "Spin-off of business unit announced",
                {
                    "unitName": fx.extract_spin_off_unit_name(content),
                    "recordDate": fx.extract_record_date(content),
                    "distributionDate": distribution_date,
                },
                execution_date=distribution_date,
            ))

        if data.special_dividend:
            payment_date = fx.extract_payment_date(content)
            events.append(self._create_event(
                filing,
                EventType.SPECIAL_DIVIDEND,
                "Special dividend announced",
                {
                    "amount": fx.extract_dividend_amount(content),
                    "recordDate": fx.extract_record_date(content),
                    "paymentDate": payment_date,
                },
                execution_date=payment_date,
            ))

        if data.debt_reduction:
            events.append(self._create_event(
                filing,
                EventType.DEBT_REDUCTION,
                "Significant debt reduction or refinancing announced",
                {
                    "amount": fx.extract_debt_amount(content),
                    "type": fx.extract_debt_action_type(content),
                },
            ))

        logger.info(f"Extracted {len(events)} events from filing {filing.accession_number}")
        return events

    def _create_event(
        self,
        filing: ParsedFiling,
        event_type: EventType,
        description: str,
        details: Dict[str, Any],
        execution_date: Optional[str] = None
    ) -> Event:
        """Build an Event with the shared fields filled from the filing."""
        return Event(
            id=make_event_id(event_type, filing.cik, filing.accession_number),
            type=event_type,
            cik=filing.cik,
            company_name=filing.company_name,
            identified_date=filing.filing_date,
            execution_date=execution_date,
            source_form_type=filing.form_type,
            source_accession_number=filing.accession_number,
            source_url=filing_archive_url(filing.cik, filing.accession_number, self.archive_base_url),
            description=description,
            details=details,
            status=DEFAULT_STATUS[event_type],
        )
