"""Helpers for SEC identifiers and archive URLs."""

SEC_ARCHIVE_URL = "https://www.sec.gov/Archives/edgar/data"


def normalize_cik(cik: str) -> str:
    """Strip zero padding from a CIK ('0000320193' -> '320193')."""
    stripped = str(cik).strip().lstrip("0")
    return stripped or "0"


def pad_cik(cik: str) -> str:
    """Zero-pad a CIK to the 10 digits used by data.sec.gov."""
    return normalize_cik(cik).zfill(10)


def filing_archive_url(cik: str, accession_number: str, base_url: str = SEC_ARCHIVE_URL) -> str:
    """
    Build the URL of a filing's full submission text file.

    Example:
        >>> filing_archive_url("0000320193", "0000320193-24-000006")
        'https://www.sec.gov/Archives/edgar/data/320193/000032019324000006/0000320193-24-000006.txt'
    """
    accession_clean = accession_number.replace("-", "")
    return f"{base_url.rstrip('/')}/{normalize_cik(cik)}/{accession_clean}/{accession_number}.txt"
