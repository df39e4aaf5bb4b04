"""Pydantic data models for filings and extracted events."""

from .filing import FilingMetadata, InsiderTransaction, ParsedData, ParsedFiling
from .event import Event, EventStatus, EventType

__all__ = [
    "FilingMetadata",
    "InsiderTransaction",
    "ParsedData",
    "ParsedFiling",
    "Event",
    "EventStatus",
    "EventType",
]
