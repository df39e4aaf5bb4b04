"""Unit tests for the regex field extractors."""

import pytest

from filing_events.events import field_extractors as fx


class TestNameAndTicker:
    """Tests for name and ticker extraction."""

    @pytest.mark.parametrize("text, expected", [
        ('The Company changed its name to "Nova Corp".', "Nova Corp"),
        ("will change the corporate name to 'Nova Corp'", "Nova Corp"),
        ('The new company name will be "Nova Corp".', "Nova Corp"),
        ('The Board renamed the company to "Nova Corp".', "Nova Corp"),
    ])
    def test_new_name(self, text, expected):
        """Test each supported name change phrasing."""
        assert fx.extract_new_name(text) == expected

    def test_new_name_requires_quotes(self):
        """Test an unquoted name is not extracted."""
        assert fx.extract_new_name("changed its name to Nova Corp") is None

    def test_tickers(self):
        """Test old and new ticker extraction."""
        text = 'The current ticker symbol is "ACME" and the new ticker symbol will be "NOVA".'
        assert fx.extract_old_ticker(text) == "ACME"
        assert fx.extract_new_ticker(text) == "NOVA"

    def test_ticker_from_to(self):
        """Test 'changed from'/'changed to' phrasing."""
        text = "ticker symbol changed from 'OLD' and the ticker symbol changed to 'NEW'"
        assert fx.extract_old_ticker(text) == "OLD"
        assert fx.extract_new_ticker(text) == "NEW"

    def test_ticker_too_long(self):
        """Test tickers longer than five characters are rejected."""
        assert fx.extract_new_ticker('new ticker symbol will be "TOOLONG"') is None


class TestDates:
    """Tests for date extraction and normalization."""

    @pytest.mark.parametrize("raw, expected", [
        ("March 1, 2024", "2024-03-01"),
        ("March 1 2024", "2024-03-01"),
        ("Mar 1, 2024", "2024-03-01"),
        ("03/01/2024", "2024-03-01"),
        ("3-1-24", "2024-03-01"),
        ("Smarch 1, 2024", "Smarch 1, 2024"),
    ])
    def test_normalize_date(self, raw, expected):
        """Test known formats normalize and unknown text passes through."""
        assert fx.normalize_date(raw) == expected

    def test_effective_date(self):
        """Test effective date phrasing variants."""
        assert fx.extract_effective_date("effective as of January 15, 2024") == "2024-01-15"
        assert fx.extract_effective_date("will become effective on June 30, 2024") == "2024-06-30"
        assert fx.extract_effective_date("Effective date: 07/01/2024") == "2024-07-01"
        assert fx.extract_effective_date("no dates here") is None

    def test_record_distribution_payment_dates(self):
        """Test record, distribution and payment date extraction."""
        text = (
            "The record date is May 1, 2024. The distribution date will be May 15, 2024. "
            "The dividend is payable on June 1, 2024."
        )
        assert fx.extract_record_date(text) == "2024-05-01"
        assert fx.extract_distribution_date(text) == "2024-05-15"
        assert fx.extract_payment_date(text) == "2024-06-01"


class TestSplitRatio:
    """Tests for split ratio extraction."""

    @pytest.mark.parametrize("text, expected", [
        ("a reverse stock split at a ratio of 1:10", "1:10"),
        ("a reverse split ratio of 1 for 25", "1:25"),
        ("the 1:15 reverse stock split", "1:15"),
        ("effect a 1-for-8 reverse split", "1:8"),
    ])
    def test_split_ratio(self, text, expected):
        """Test each ratio phrasing yields N:M."""
        assert fx.extract_split_ratio(text) == expected

    def test_no_ratio(self):
        """Test absent ratio yields None."""
        assert fx.extract_split_ratio("a reverse stock split") is None


class TestExchanges:
    """Tests for exchange extraction."""

    def test_current_exchange(self):
        """Test the current exchange is read from prose."""
        assert fx.extract_current_exchange("currently listed on the OTCQX. More") == "OTCQX"

    def test_current_exchange_default(self):
        """Test the OTC Markets default when nothing is stated."""
        assert fx.extract_current_exchange("nothing about listing") == "OTC Markets"

    @pytest.mark.parametrize("text, expected", [
        ("approved for the Nasdaq Capital Market", "Nasdaq Capital Market"),
        ("listing on the NASDAQ Global Select tier", "Nasdaq Global Select Market"),
        ("moving to NYSE American", "NYSE American"),
        ("moving to the NYSE", "New York Stock Exchange"),
        ("listing on Nasdaq", "Nasdaq"),
        ("listing elsewhere", None),
    ])
    def test_target_exchange(self, text, expected):
        """Test table order resolves specific tiers before generic names."""
        assert fx.extract_target_exchange(text) == expected


class TestApprovals:
    """Tests for FDA product and approval type extraction."""

    def test_product_name(self):
        """Test product extraction from FDA approval prose."""
        assert fx.extract_product_name("received FDA approval for its HeartPatch, a device") == "HeartPatch"
        assert fx.extract_product_name("approval of Zorvex from the FDA") == "Zorvex"

    @pytest.mark.parametrize("text, expected", [
        ("cleared via 510(k)", "510(k) Clearance"),
        ("a De Novo request", "De Novo Classification"),
        ("its PMA supplement", "Pre-Market Approval (PMA)"),
        ("the New Drug Application", "New Drug Application (NDA)"),
        ("an Emergency Use authorization", "Emergency Use Authorization (EUA)"),
        ("was approved", "FDA Approval"),
    ])
    def test_approval_type(self, text, expected):
        """Test approval type lookup and default."""
        assert fx.extract_approval_type(text) == expected

    def test_nda_substring_precedes_later_entries(self):
        """Test that an 'nda' substring matches before BLA and ANDA entries."""
        assert fx.extract_approval_type("Abbreviated New Drug Application (ANDA)") == "New Drug Application (NDA)"


class TestAmounts:
    """Tests for monetary amount extraction."""

    @pytest.mark.parametrize("number, unit, expected", [
        ("2.5", "million", 2_500_000.0),
        ("1,250", None, 1250.0),
        ("3", "Billion", 3_000_000_000.0),
        ("4.", None, 4.0),
        (",", None, None),
        ("1.2.3", None, None),
    ])
    def test_parse_amount(self, number, unit, expected):
        """Test number parsing with optional unit multiplier."""
        assert fx.parse_amount(number, unit) == expected

    def test_debt_amount(self):
        """Test debt amounts apply the unit once."""
        assert fx.extract_debt_amount("The Company reduced its debt by $2.5 million.") == 2_500_000.0
        assert fx.extract_debt_amount("completed $40 million debt repayment") == 40_000_000.0
        assert fx.extract_debt_amount("repaid the debt of $1,000.") == 1000.0
        assert fx.extract_debt_amount("no numbers") is None

    def test_debt_action_type(self):
        """Test debt action lookup and default."""
        assert fx.extract_debt_action_type("the refinancing of notes") == "Refinancing"
        assert fx.extract_debt_action_type("early repayment of the loan") == "Early Repayment"
        assert fx.extract_debt_action_type("extinguishment of debt") == "Debt Extinguishment"
        assert fx.extract_debt_action_type("a debt restructuring") == "Restructuring"
        assert fx.extract_debt_action_type("reduced borrowings") == "Repayment/Reduction"
        assert fx.extract_debt_action_type("borrowed more") == "Debt Transaction"

    def test_dividend_amount(self):
        """Test per-share special dividend amount."""
        assert fx.extract_dividend_amount("declared a special dividend of $1.25 per share") == 1.25
        assert fx.extract_dividend_amount("a $0.50 special dividend") == 0.5
        assert fx.extract_dividend_amount("a regular dividend of $0.10") is None

    def test_buyback_amount(self):
        """Test repurchase authorization amounts."""
        text = "The Company announced a share repurchase program of up to $10 million."
        assert fx.extract_buyback_amount(text) == 10_000_000.0
        assert fx.extract_buyback_amount("a $2 billion stock buyback") == 2_000_000_000.0
        assert fx.extract_buyback_amount("a buyback with no amount.") is None


class TestSpinOff:
    """Tests for spin-off unit extraction."""

    def test_unit_name(self):
        """Test unit name from spin-off prose."""
        assert fx.extract_spin_off_unit_name("the planned spin-off of its Medical Devices segment, which") == (
            "Medical Devices segment"
        )
        assert fx.extract_spin_off_unit_name("intends to spin off Acme Labs.") == "Acme Labs"


class TestFieldExtractorDecorator:
    """Tests for failure isolation in field extractors."""

    def test_errors_become_none(self):
        """Test an exception inside an extractor yields None."""
        @fx.field_extractor
        def broken(content):
            raise RuntimeError("bad pattern")

        assert broken("anything") is None

    def test_wraps_preserves_name(self):
        """Test decorated extractors keep their names."""
        assert fx.extract_new_name.__name__ == "extract_new_name"
