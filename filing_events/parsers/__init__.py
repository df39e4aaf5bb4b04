"""Form parsers that turn raw filing text into ParsedFiling objects."""

from .base import (
    BaseFilingParser,
    FilingParseError,
    FormType,
    extract_section,
    extract_tag_text,
    find_tag_blocks,
    has_keywords,
)
from .factory import ParserFactory
from .form10q import Form10QParser
from .form13d import Schedule13DParser
from .form14a import Form14AParser
from .form4 import Form4Parser
from .form8k import Form8KParser

__all__ = [
    "BaseFilingParser",
    "FilingParseError",
    "extract_section",
    "extract_tag_text",
    "find_tag_blocks",
    "has_keywords",
    "FormType",
    "ParserFactory",
    "Form10QParser",
    "Schedule13DParser",
    "Form14AParser",
    "Form4Parser",
    "Form8KParser",
]
