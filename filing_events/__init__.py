"""Extraction of corporate events from SEC filings."""

__version__ = "0.1.0"
