"""Unit tests for section, keyword and tag scanning helpers."""

from filing_events.parsers.base import (
    extract_section,
    extract_tag_text,
    find_tag_blocks,
    has_keywords,
)


class TestExtractSection:
    """Tests for literal marker section extraction."""

    def test_returns_trimmed_text_between_markers(self):
        """Test that text between start and end markers is returned trimmed."""
        content = "Header START  body text  END trailer"
        assert extract_section(content, "START", "END") == "body text"

    def test_end_marker_searched_after_start(self):
        """Test that an end marker before the start marker is ignored."""
        content = "END prefix START middle END suffix"
        assert extract_section(content, "START", "END") == "middle"

    def test_missing_start_marker(self):
        """Test that a missing start marker returns None."""
        assert extract_section("no markers here", "START", "END") is None

    def test_missing_end_marker(self):
        """Test that a missing end marker returns None."""
        assert extract_section("START but never closed", "START", "END") is None

    def test_markers_are_case_sensitive(self):
        """Test that markers must match case exactly."""
        assert extract_section("start body end", "START", "END") is None


class TestHasKeywords:
    """Tests for case-insensitive keyword detection."""

    def test_case_insensitive_match(self):
        """Test that keyword matching ignores case on both sides."""
        assert has_keywords("COMPANY changed its Name", ["changed its name"])
        assert has_keywords("share repurchase", ["SHARE REPURCHASE"])

    def test_no_match(self):
        """Test unrelated text does not match."""
        assert not has_keywords("unrelated text", ["buyback"])

    def test_any_keyword_matches(self):
        """Test that a single matching keyword is enough."""
        assert has_keywords("announced a spinoff", ["merger", "spinoff"])

    def test_empty_keywords(self):
        """Test that an empty keyword list never matches."""
        assert not has_keywords("anything", [])


class TestTagScanning:
    """Tests for index-based tag extraction."""

    def test_extract_tag_text(self):
        """Test plain tag text extraction."""
        assert extract_tag_text("<cusip> 123456789 </cusip>", "cusip") == "123456789"

    def test_extract_tag_text_unwraps_value(self):
        """Test that <value> wrappers used in ownership XML are unwrapped."""
        content = "<transactionShares>\n  <value>1000</value>\n</transactionShares>"
        assert extract_tag_text(content, "transactionShares") == "1000"

    def test_extract_tag_text_spans_lines(self):
        """Test that tag content spanning lines is returned whole."""
        content = "<purpose>\nline one\nline two\n</purpose>"
        assert extract_tag_text(content, "purpose") == "line one\nline two"

    def test_extract_tag_text_missing_or_unclosed(self):
        """Test missing, unclosed and empty tags return None."""
        assert extract_tag_text("<other>x</other>", "cusip") is None
        assert extract_tag_text("<cusip>never closed", "cusip") is None
        assert extract_tag_text("<cusip>  </cusip>", "cusip") is None

    def test_find_tag_blocks_returns_every_block(self):
        """Test that all blocks are found in order, tags included."""
        content = "<t>a</t> gap <t>b</t> tail <t>unclosed"
        assert find_tag_blocks(content, "t") == ["<t>a</t>", "<t>b</t>"]

    def test_find_tag_blocks_none(self):
        """Test that content without the tag yields no blocks."""
        assert find_tag_blocks("plain text", "t") == []
