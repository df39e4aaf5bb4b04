"""
Filing Events Configuration

Centralized settings for:
- SEC EDGAR access (user agent, endpoints, rate limit, timeouts)
- Raw filing cache
- Event extraction thresholds
- Logging
"""

import os
import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class FilingEventsConfig(BaseSettings):
    """Configuration for filing ingestion and event extraction."""

    # SEC EDGAR
    sec_user_agent: str = Field(
        default="filing-events admin@example.com",
        description="User-Agent sent to SEC ('CompanyName contact@email.com')"
    )
    sec_archive_url: str = Field(
        default="https://www.sec.gov/Archives/edgar/data",
        description="Base URL of the EDGAR filing archive"
    )
    sec_data_url: str = Field(
        default="https://data.sec.gov",
        description="Base URL of the EDGAR JSON data API"
    )
    requests_per_second: float = Field(
        default=10.0,
        description="Max requests per second (SEC limit is 10)",
        gt=0
    )
    request_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds"
    )
    cache_dir: Optional[Path] = Field(
        default=None,
        description="Directory for cached raw filings (disabled if unset)"
    )

    # Extraction
    stake_threshold: float = Field(
        default=5.0,
        description="13D percent of class that must be exceeded for a stake event"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level for CLI runs"
    )

    class Config:
        env_prefix = "FILING_EVENTS_"
        case_sensitive = False


def get_config() -> FilingEventsConfig:
    """Get configuration from environment (and .env if present)."""
    load_dotenv()
    # SEC_USER_AGENT is shared with other EDGAR tooling
    user_agent = os.getenv("SEC_USER_AGENT")
    if user_agent:
        return FilingEventsConfig(sec_user_agent=user_agent)
    return FilingEventsConfig()


def configure_logging(config: FilingEventsConfig) -> None:
    """Set up root logging for command line runs."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT
    )
