"""SEC EDGAR API client for downloading filings and company metadata."""

import asyncio
import time
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import logging

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ..config import FilingEventsConfig
from ..models import FilingMetadata
from ..utils import SEC_ARCHIVE_URL, filing_archive_url, pad_cik

logger = logging.getLogger(__name__)

RETRY_STATUSES = {429, 500, 502, 503, 504}


def _is_retryable(exc: BaseException) -> bool:
    """Retry connection problems and throttling/server errors, not 4xx."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRY_STATUSES
    return isinstance(exc, httpx.TransportError)


class SECEdgarClient:
    """
    Client for SEC EDGAR with rate limiting and optional caching.

    SEC Requirements:
    - Max 10 requests per second
    - Must include User-Agent with company name and email
    """

    DATA_URL = "https://data.sec.gov"

    def __init__(
        self,
        user_agent: str,
        cache_dir: Optional[Path] = None,
        archive_url: str = SEC_ARCHIVE_URL,
        data_url: str = DATA_URL,
        requests_per_second: float = 10.0,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize EDGAR client.

        Args:
            user_agent: Format: "CompanyName contact@email.com"
            cache_dir: Directory to cache downloaded filings (no caching if None)
            archive_url: Base URL of the filing archive
            data_url: Base URL of the JSON submissions API
            requests_per_second: Client-side rate limit
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.user_agent = user_agent
        self.cache_dir = Path(cache_dir) if cache_dir else None
        if self.cache_dir:
            self.cache_dir.mkdir(parents=True, exist_ok=True)

        self.archive_url = archive_url
        self.data_url = data_url

        self.session = httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
            transport=transport
        )

        self.last_request_time = 0.0
        self.min_interval = 1.0 / requests_per_second

    @classmethod
    def from_config(cls, config: FilingEventsConfig, **kwargs) -> "SECEdgarClient":
        """Create a client from FilingEventsConfig."""
        return cls(
            user_agent=config.sec_user_agent,
            cache_dir=config.cache_dir,
            archive_url=config.sec_archive_url,
            data_url=config.sec_data_url,
            requests_per_second=config.requests_per_second,
            timeout=config.request_timeout,
            **kwargs
        )

    async def _rate_limit(self):
        """Enforce the requests-per-second limit."""
        elapsed = time.time() - self.last_request_time
        if elapsed < self.min_interval:
            await asyncio.sleep(self.min_interval - elapsed)
        self.last_request_time = time.time()

    @retry(
        retry=retry_if_exception(_is_retryable),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        reraise=True
    )
    async def _fetch(self, url: str) -> httpx.Response:
        """
        Fetch URL with retry logic.

        Raises:
            httpx.HTTPStatusError: On HTTP errors (after retries for 429/5xx)
        """
        await self._rate_limit()
        response = await self.session.get(url)
        response.raise_for_status()
        return response

    async def get_filing_content(self, cik: str, accession_number: str) -> str:
        """
        Download the full submission text of a filing.

        Args:
            cik: Company CIK (padded or not)
            accession_number: SEC filing identifier (e.g., "0000320193-24-000006")

        Returns:
            Raw filing text

        Example:
            text = await client.get_filing_content("320193", "0000320193-24-000006")
        """
        cache_file = self._get_cache_path(accession_number)
        if cache_file and cache_file.exists():
            logger.info(f"Loading filing from cache: {accession_number}")
            return cache_file.read_text(encoding="utf-8")

        url = filing_archive_url(cik, accession_number, self.archive_url)
        logger.info(f"Fetching filing content for accession number: {accession_number}")
        response = await self._fetch(url)
        content = response.text

        if cache_file:
            cache_file.write_text(content, encoding="utf-8")
            logger.debug(f"Cached filing: {cache_file}")

        return content

    async def get_company_info(self, cik: str) -> Dict[str, Any]:
        """Fetch the submissions JSON for a company (name, tickers, recent filings)."""
        url = f"{self.data_url}/submissions/CIK{pad_cik(cik)}.json"
        logger.info(f"Fetching company info for CIK: {cik}")
        response = await self._fetch(url)
        return response.json()

    async def get_ticker_by_cik(self, cik: str) -> Optional[str]:
        """
        Look up a company's primary ticker.

        Returns:
            First listed ticker, or None if unknown or the lookup failed
        """
        try:
            info = await self.get_company_info(cik)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Could not find ticker for CIK {cik}: {e}")
            return None

        tickers = info.get("tickers") or []
        return tickers[0] if tickers else None

    async def list_recent_filings(
        self,
        cik: str,
        form_types: Optional[Iterable[str]] = None,
        date_from: Optional[date] = None,
        limit: int = 100
    ) -> List[FilingMetadata]:
        """
        List a company's recent filings from the submissions API.

        Args:
            cik: Company CIK
            form_types: Only keep these form codes (all if None)
            date_from: Only keep filings on or after this date
            limit: Max results to return

        Returns:
            FilingMetadata objects, newest first
        """
        info = await self.get_company_info(cik)
        company_name = info.get("name", "")
        recent = info.get("filings", {}).get("recent", {})

        accessions = recent.get("accessionNumber", [])
        forms = recent.get("form", [])
        dates = recent.get("filingDate", [])

        wanted = set(form_types) if form_types else None
        filings = []

        for accession_number, form_type, filing_date in zip(accessions, forms, dates):
            if wanted is not None and form_type not in wanted:
                continue
            if date_from and filing_date < date_from.isoformat():
                continue

            filings.append(FilingMetadata(
                accession_number=accession_number,
                cik=cik,
                company_name=company_name,
                filing_date=filing_date,
                form_type=form_type
            ))
            if len(filings) >= limit:
                break

        logger.info(f"Found {len(filings)} filings for CIK {cik}")
        return filings

    def _get_cache_path(self, accession_number: str) -> Optional[Path]:
        """Get cache file path for an accession number."""
        if not self.cache_dir:
            return None
        return self.cache_dir / f"{accession_number}.txt"

    async def close(self):
        """Close HTTP session."""
        await self.session.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
