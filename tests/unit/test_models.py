"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from filing_events.models import (
    Event,
    EventStatus,
    EventType,
    FilingMetadata,
    InsiderTransaction,
    ParsedData,
    ParsedFiling,
)
from filing_events.models.event import make_event_id
from filing_events.utils import filing_archive_url, normalize_cik, pad_cik


class TestFilingMetadata:
    """Tests for FilingMetadata model."""

    def test_valid_metadata(self):
        """Test creating valid metadata."""
        metadata = FilingMetadata(
            accession_number="0001193125-24-000123",
            cik="320193",
            company_name="Apple Inc.",
            filing_date="2024-01-05",
            form_type="8-K"
        )

        assert metadata.accession_number == "0001193125-24-000123"
        assert metadata.form_type == "8-K"

    def test_identifiers_stripped(self):
        """Test whitespace is stripped from identifier fields."""
        metadata = FilingMetadata(
            accession_number=" 0001-23 ",
            cik=" 123\n",
            company_name="Acme",
            filing_date="2024-01-05 ",
            form_type="8-K"
        )

        assert metadata.accession_number == "0001-23"
        assert metadata.cik == "123"
        assert metadata.filing_date == "2024-01-05"

    def test_cik_not_normalized(self):
        """Test the CIK is kept as given."""
        metadata = FilingMetadata(
            accession_number="0001-23",
            cik="0000000123",
            company_name="Acme",
            filing_date="2024-01-05",
            form_type="4"
        )
        assert metadata.cik == "0000000123"

    def test_empty_accession_rejected(self):
        """Test that an empty accession number fails validation."""
        with pytest.raises(ValidationError):
            FilingMetadata(
                accession_number="",
                cik="123",
                company_name="Acme",
                filing_date="2024-01-05",
                form_type="8-K"
            )


class TestParsedModels:
    """Tests for ParsedData and ParsedFiling."""

    def test_parsed_data_defaults(self):
        """Test every signal defaults to off."""
        data = ParsedData()

        assert data.items == []
        assert data.name_change is False
        assert data.insider_buying is False
        assert data.percent_owned == 0.0
        assert data.is_insider is None
        assert data.buyback_amount is None

    def test_defaults_not_shared(self):
        """Test mutable defaults are per instance."""
        first = ParsedData()
        first.items.append("8.01")
        assert ParsedData().items == []

    def test_parsed_filing_metadata(self, make_metadata):
        """Test the metadata view of a parsed filing."""
        metadata = make_metadata(form_type="10-Q")
        filing = ParsedFiling(**metadata.model_dump(), content="text")

        assert filing.metadata == metadata
        assert filing.parsed_data == ParsedData()

    def test_insider_transaction_aliases(self):
        """Test transactions dump camelCase keys and accept either spelling."""
        transaction = InsiderTransaction(code="P", shares=10, price=2.5, value=25.0, isPurchase=True)

        assert transaction.is_purchase is True
        assert transaction.model_dump(by_alias=True)["isPurchase"] is True
        assert InsiderTransaction(is_purchase=True) == InsiderTransaction(isPurchase=True)


class TestEvent:
    """Tests for Event model."""

    def _event(self, **overrides):
        fields = dict(
            id=make_event_id(EventType.SHARE_BUYBACK, "123", "0001-23"),
            type=EventType.SHARE_BUYBACK,
            cik="123",
            company_name="Acme",
            identified_date="2024-01-05",
            source_form_type="8-K",
            source_accession_number="0001-23",
            description="Share buyback program announced",
            details={"amount": 10000000.0},
            status=EventStatus.PENDING,
        )
        fields.update(overrides)
        return Event(**fields)

    def test_event_id(self):
        """Test deterministic id format."""
        assert make_event_id(EventType.NAME_CHANGE, "123", "0001-23") == "nameChange-123-0001-23"

    def test_to_record_camel_case(self):
        """Test serialized record uses camelCase keys and plain values."""
        record = self._event().to_record()

        assert record["id"] == "shareBuyback-123-0001-23"
        assert record["type"] == "shareBuyback"
        assert record["status"] == "pending"
        assert record["companyName"] == "Acme"
        assert record["identifiedDate"] == "2024-01-05"
        assert record["sourceAccessionNumber"] == "0001-23"
        assert record["executionDate"] is None
        assert record["details"] == {"amount": 10000000.0}
        assert "company_name" not in record

    def test_populate_by_alias(self):
        """Test events can be rebuilt from their record."""
        event = self._event()
        assert Event(**event.to_record()) == event

    def test_frozen(self):
        """Test events are immutable."""
        event = self._event()
        with pytest.raises(ValidationError):
            event.ticker = "ACME"

    def test_model_copy_update(self):
        """Test enrichment through model_copy."""
        event = self._event()
        enriched = event.model_copy(update={"ticker": "ACME"})

        assert enriched.ticker == "ACME"
        assert event.ticker is None

    def test_invalid_type(self):
        """Test unknown event types are rejected."""
        with pytest.raises(ValidationError):
            self._event(type="mergerArbitrage")

    def test_status_default(self):
        """Test status defaults to unknown."""
        fields = self._event().model_dump()
        fields.pop("status")
        assert Event(**fields).status == EventStatus.UNKNOWN


class TestCikHelpers:
    """Tests for CIK and archive URL helpers."""

    @pytest.mark.parametrize("raw, normalized, padded", [
        ("0000320193", "320193", "0000320193"),
        ("320193", "320193", "0000320193"),
        (" 123 ", "123", "0000000123"),
        ("0000000000", "0", "0000000000"),
    ])
    def test_normalize_and_pad(self, raw, normalized, padded):
        """Test CIK normalization and padding."""
        assert normalize_cik(raw) == normalized
        assert pad_cik(raw) == padded

    def test_archive_url(self):
        """Test archive URL uses the unpadded CIK."""
        url = filing_archive_url("0000320193", "0000320193-24-000006")
        assert url == (
            "https://www.sec.gov/Archives/edgar/data/320193/"
            "000032019324000006/0000320193-24-000006.txt"
        )
