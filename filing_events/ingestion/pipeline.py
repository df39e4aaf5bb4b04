"""
Filing pipeline: dispatch, parse, extract and enrich.

This is the composition root for the parser factory and event extractor.
Both are built once and shared; neither holds per-filing state, so filings
can be processed concurrently without coordination.
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterable, List, Optional

from ..events import EventExtractor
from ..models import Event, FilingMetadata
from ..parsers import FilingParseError, ParserFactory
from .edgar_client import SECEdgarClient
from .filing_text import prepare_content

logger = logging.getLogger(__name__)

TickerLookup = Callable[[str], Awaitable[Optional[str]]]


@dataclass
class PipelineResult:
    """Outcome of a batch run."""
    processed: int = 0
    skipped: int = 0
    failed: int = 0
    events: List[Event] = field(default_factory=list)


class FilingPipeline:
    """
    Runs filings through parser dispatch and event extraction.

    Example:
        pipeline = FilingPipeline(ticker_lookup=client.get_ticker_by_cik)
        events = await pipeline.process_filing(content, metadata)
    """

    def __init__(
        self,
        factory: Optional[ParserFactory] = None,
        extractor: Optional[EventExtractor] = None,
        ticker_lookup: Optional[TickerLookup] = None
    ):
        """
        Initialize pipeline.

        Args:
            factory: Parser dispatch (default: all form parsers)
            extractor: Event extractor (default settings if None)
            ticker_lookup: Async CIK -> ticker lookup used to enrich events
        """
        self.factory = factory or ParserFactory()
        self.extractor = extractor or EventExtractor()
        self.ticker_lookup = ticker_lookup

    def process(self, content: str, metadata: FilingMetadata) -> List[Event]:
        """
        Parse one filing and extract its events.

        Returns:
            Extracted events; empty if no parser handles the form type

        Raises:
            FilingParseError: If the form parser fails on this filing
        """
        parser = self.factory.get_parser(metadata.form_type)
        if parser is None:
            return []

        parsed = parser.parse(prepare_content(content, metadata.form_type), metadata)
        return self.extractor.extract_events(parsed)

    async def enrich_tickers(self, events: List[Event]) -> List[Event]:
        """
        Fill in missing tickers, looking each CIK up once.

        A failed lookup leaves the events without a ticker.
        """
        if not self.ticker_lookup:
            return events

        tickers = {}
        enriched = []
        for event in events:
            if event.ticker:
                enriched.append(event)
                continue

            if event.cik not in tickers:
                try:
                    tickers[event.cik] = await self.ticker_lookup(event.cik)
                except Exception as e:
                    logger.warning(f"Ticker lookup failed for CIK {event.cik}: {e}")
                    tickers[event.cik] = None

            ticker = tickers[event.cik]
            enriched.append(event.model_copy(update={"ticker": ticker}) if ticker else event)

        return enriched

    async def process_filing(self, content: str, metadata: FilingMetadata) -> List[Event]:
        """Process one filing and enrich its events with tickers."""
        events = self.process(content, metadata)
        return await self.enrich_tickers(events)

    async def run(self, client: SECEdgarClient, filings: Iterable[FilingMetadata]) -> PipelineResult:
        """
        Fetch and process a batch of filings.

        A filing that cannot be fetched or parsed is logged and counted as
        failed; the rest of the batch still runs.
        """
        result = PipelineResult()

        for metadata in filings:
            if self.factory.get_parser(metadata.form_type) is None:
                result.skipped += 1
                continue

            try:
                content = await client.get_filing_content(metadata.cik, metadata.accession_number)
                events = await self.process_filing(content, metadata)
            except FilingParseError as e:
                logger.error(f"Skipping filing {metadata.accession_number}: {e}")
                result.failed += 1
                continue
            except Exception as e:
                logger.error(f"Error processing filing {metadata.accession_number}: {e}")
                result.failed += 1
                continue

            if events:
                logger.info(f"Extracted {len(events)} events from {metadata.accession_number}")
            result.events.extend(events)
            result.processed += 1

        logger.info(
            f"Filing run complete. Processed {result.processed} filings, "
            f"skipped {result.skipped}, failed {result.failed}, "
            f"extracted {len(result.events)} events."
        )
        return result
