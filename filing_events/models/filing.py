"""Pydantic models for raw and parsed SEC filings."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class FilingMetadata(BaseModel):
    """
    Minimal metadata describing one filing submission.

    Supplied by the caller alongside the raw filing text. The CIK is kept
    exactly as given; use ``normalize_cik``/``pad_cik`` from
    ``filing_events.utils`` when a specific form is needed.
    """

    accession_number: str = Field(
        ...,
        description="SEC filing identifier (e.g., '0001193125-24-000123')",
        min_length=1
    )
    cik: str = Field(..., description="Central Index Key of the filer", min_length=1)
    company_name: str = Field(..., description="Registrant name")
    filing_date: str = Field(..., description="Date the filing was submitted (YYYY-MM-DD)")
    form_type: str = Field(..., description="SEC form code (e.g., '8-K', '4', 'SC 13D')")

    @field_validator('accession_number', 'cik', 'filing_date')
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Drop surrounding whitespace from identifier fields."""
        return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "accession_number": "0001193125-24-000123",
                "cik": "320193",
                "company_name": "Apple Inc.",
                "filing_date": "2024-01-05",
                "form_type": "8-K"
            }
        }


class InsiderTransaction(BaseModel):
    """One non-derivative transaction reported on a Form 4."""

    code: str = Field(default="", description="Transaction code ('P' purchase, 'S' sale, ...)")
    shares: float = Field(default=0.0, description="Number of shares transacted")
    price: float = Field(default=0.0, description="Price per share")
    date: str = Field(default="", description="Transaction date as reported")
    value: float = Field(default=0.0, description="shares * price")
    is_purchase: bool = Field(default=False, description="Whether code is 'P'")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ParsedData(BaseModel):
    """
    Signals and details detected in a filing by its form parser.

    Every field has a default, so each parser only fills what its form can
    carry. Booleans are detection signals; the rest hold extracted details.
    """

    # Form 8-K
    items: List[str] = Field(default_factory=list)
    item_contents: Dict[str, str] = Field(default_factory=dict)
    name_change: bool = False
    ticker_change: bool = False
    buyback: bool = False
    reverse_stock_split: bool = False
    uplisting: bool = False
    fda_approval: bool = False
    patent_approval: bool = False
    spin_off: bool = False
    special_dividend: bool = False
    debt_reduction: bool = False

    # Form 4
    insider_buying: bool = False
    transactions: List[InsiderTransaction] = Field(default_factory=list)
    reporting_person: Optional[str] = None
    relationship: Optional[str] = None
    is_insider: Optional[bool] = None

    # Schedule 13D
    cusip: Optional[str] = None
    issuer_name: Optional[str] = None
    percent_owned: float = 0.0
    purpose: Optional[str] = None
    is_activist: bool = False

    # Form 10-Q
    buyback_details: Optional[str] = None
    total_shares_repurchased: Optional[int] = None
    buyback_amount: Optional[float] = Field(None, description="Repurchase amount in dollars")
    patent_info: Optional[str] = None
    new_patents: Optional[bool] = None

    # Proxy statements (DEF 14A / PRE 14A)
    name_change_details: Optional[str] = None
    reverse_split_details: Optional[str] = None
    split_ratio: Optional[str] = None
    special_dividend_details: Optional[str] = None


class ParsedFiling(FilingMetadata):
    """
    A filing after its form parser has run.

    Carries the original metadata, the verbatim content and the parser's
    detected signals.
    """

    content: str
    parsed_data: ParsedData = Field(default_factory=ParsedData)

    @property
    def metadata(self) -> FilingMetadata:
        """The metadata portion of this filing."""
        return FilingMetadata(
            accession_number=self.accession_number,
            cik=self.cik,
            company_name=self.company_name,
            filing_date=self.filing_date,
            form_type=self.form_type,
        )
