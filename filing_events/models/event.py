"""Pydantic models for corporate events derived from filings."""

from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class EventType(str, Enum):
    """Closed set of corporate event kinds."""

    NAME_CHANGE = "nameChange"
    TICKER_CHANGE = "tickerChange"
    INSIDER_BUYING = "insiderBuying"
    ACTIVIST_INVESTOR = "activistInvestor"
    INSTITUTIONAL_INVESTOR = "institutionalInvestor"
    SHARE_BUYBACK = "shareBuyback"
    REVERSE_STOCK_SPLIT = "reverseStockSplit"
    UPLISTING = "uplisting"
    FDA_APPROVAL = "fdaApproval"
    PATENT_APPROVAL = "patentApproval"
    SPIN_OFF = "spinOff"
    SPECIAL_DIVIDEND = "specialDividend"
    DEBT_REDUCTION = "debtReduction"


class EventStatus(str, Enum):
    """Lifecycle state of an event."""

    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


def make_event_id(event_type: EventType, cik: str, accession_number: str) -> str:
    """Deterministic event identifier: one event per type per filing."""
    return f"{event_type.value}-{cik}-{accession_number}"


class Event(BaseModel):
    """
    A corporate event detected in a single filing.

    Events are value objects: re-processing the same filing yields the same
    ``id``, so consumers should store them with upsert semantics.
    """

    id: str = Field(..., description="'{type}-{cik}-{accession_number}'")
    type: EventType
    cik: str
    company_name: str
    ticker: Optional[str] = Field(None, description="Filled in by a ticker lookup after extraction")
    identified_date: str = Field(..., description="Filing date on which the signal was observed")
    execution_date: Optional[str] = Field(None, description="When the action takes or took effect")
    source_form_type: str
    source_accession_number: str
    source_url: Optional[str] = None
    description: str
    details: Dict[str, Any] = Field(default_factory=dict)
    status: EventStatus = EventStatus.UNKNOWN

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the canonical camelCase event shape."""
        return self.model_dump(mode="json", by_alias=True)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "shareBuyback-123-0001-23",
                "type": "shareBuyback",
                "cik": "123",
                "companyName": "Acme",
                "identifiedDate": "2024-01-05",
                "sourceFormType": "8-K",
                "sourceAccessionNumber": "0001-23",
                "description": "Share buyback program announced",
                "details": {"amount": 10000000.0},
                "status": "pending"
            }
        }
