"""Event extraction from parsed filings."""

from .extractor import DEFAULT_STATUS, EventExtractor

__all__ = ["DEFAULT_STATUS", "EventExtractor"]
