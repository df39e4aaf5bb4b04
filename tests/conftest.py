"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path

from filing_events.models import FilingMetadata


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir():
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def read_fixture(fixtures_dir):
    """Return a function that reads a fixture file by name."""
    def _read(name: str) -> str:
        return (fixtures_dir / name).read_text(encoding="utf-8")
    return _read


@pytest.fixture
def make_metadata():
    """Return a factory for FilingMetadata with sensible defaults."""
    def _make(
        form_type: str = "8-K",
        accession_number: str = "0001-23",
        cik: str = "123",
        company_name: str = "Acme",
        filing_date: str = "2024-01-05",
    ) -> FilingMetadata:
        return FilingMetadata(
            accession_number=accession_number,
            cik=cik,
            company_name=company_name,
            filing_date=filing_date,
            form_type=form_type,
        )
    return _make
