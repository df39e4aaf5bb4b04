"""CLI tool for extracting corporate events from SEC filings."""

import argparse
import asyncio
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import httpx

from ..config import configure_logging, get_config
from ..events import EventExtractor
from ..models import Event, FilingMetadata
from ..parsers import FilingParseError, ParserFactory
from .edgar_client import SECEdgarClient
from .pipeline import FilingPipeline


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Extract corporate events from SEC filings"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Extract events from a local filing file")
    parse_cmd.add_argument("path", type=Path, help="Path to raw filing text")
    parse_cmd.add_argument("--form-type", required=True, help="SEC form type (e.g., 8-K, 4, 'SC 13D')")
    parse_cmd.add_argument("--cik", required=True, help="Company CIK")
    parse_cmd.add_argument("--company", required=True, help="Company name")
    parse_cmd.add_argument("--accession", required=True, help="Accession number")
    parse_cmd.add_argument("--filing-date", required=True, help="Filing date (YYYY-MM-DD)")

    fetch_cmd = subparsers.add_parser("fetch", help="Fetch a company's recent filings from EDGAR")
    fetch_cmd.add_argument("--cik", required=True, help="Company CIK")
    fetch_cmd.add_argument(
        "--form-type",
        action="append",
        dest="form_types",
        help="Form type to include (repeatable; default: all parsed form types)",
    )
    fetch_cmd.add_argument("--since", type=date.fromisoformat, help="Only filings on or after YYYY-MM-DD")
    fetch_cmd.add_argument("--limit", type=int, default=20, help="Max filings to process")
    fetch_cmd.add_argument("--no-tickers", action="store_true", help="Skip ticker enrichment")

    for cmd in (parse_cmd, fetch_cmd):
        cmd.add_argument("--output", type=Path, help="Optional: Save events to JSON file")

    return parser


def write_events(events: List[Event], output: Optional[Path]) -> None:
    """Write events as JSON to a file or stdout."""
    payload = json.dumps([event.to_record() for event in events], indent=2)
    if output:
        output.write_text(payload + "\n", encoding="utf-8")
        print(f"Saved {len(events)} events to {output}")
    else:
        print(payload)


def run_parse(args: argparse.Namespace, pipeline: FilingPipeline) -> int:
    if not args.path.exists():
        print(f"Error: File not found: {args.path}", file=sys.stderr)
        return 1

    metadata = FilingMetadata(
        accession_number=args.accession,
        cik=args.cik,
        company_name=args.company,
        filing_date=args.filing_date,
        form_type=args.form_type,
    )
    content = args.path.read_text(encoding="utf-8", errors="replace")

    try:
        events = pipeline.process(content, metadata)
    except FilingParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_events(events, args.output)
    return 0


async def run_fetch(args: argparse.Namespace, pipeline: FilingPipeline, client: SECEdgarClient) -> int:
    async with client:
        if not args.no_tickers:
            pipeline.ticker_lookup = client.get_ticker_by_cik

        try:
            filings = await client.list_recent_filings(
                args.cik,
                form_types=args.form_types or pipeline.factory.supported_form_types,
                date_from=args.since,
                limit=args.limit,
            )
        except httpx.HTTPError as e:
            print(f"Error: Could not list filings for CIK {args.cik}: {e}", file=sys.stderr)
            return 1

        result = await pipeline.run(client, filings)

    print(
        f"Processed {result.processed} filings "
        f"(skipped {result.skipped}, failed {result.failed}), "
        f"extracted {len(result.events)} events",
        file=sys.stderr,
    )
    write_events(result.events, args.output)
    return 0 if result.failed == 0 else 2


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the extraction CLI."""
    args = build_parser().parse_args(argv)

    config = get_config()
    configure_logging(config)

    pipeline = FilingPipeline(
        factory=ParserFactory(),
        extractor=EventExtractor(
            archive_base_url=config.sec_archive_url,
            stake_threshold=config.stake_threshold,
        ),
    )

    if args.command == "parse":
        return run_parse(args, pipeline)

    client = SECEdgarClient.from_config(config)
    return asyncio.run(run_fetch(args, pipeline, client))


if __name__ == "__main__":
    sys.exit(main())
