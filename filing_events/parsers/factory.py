"""Form type to parser dispatch."""

import logging
from typing import Optional, Sequence, Tuple

from .base import BaseFilingParser
from .form10q import Form10QParser
from .form13d import Schedule13DParser
from .form14a import Form14AParser
from .form4 import Form4Parser
from .form8k import Form8KParser

logger = logging.getLogger(__name__)


class ParserFactory:
    """
    Resolves a form type to the parser that handles it.

    The parser set is fixed at construction and never changes afterwards, so
    one factory can be shared by concurrent callers.

    Example:
        factory = ParserFactory()
        parser = factory.get_parser("8-K")
        if parser:
            parsed = parser.parse(content, metadata)
    """

    def __init__(self, parsers: Optional[Sequence[BaseFilingParser]] = None):
        if parsers is None:
            parsers = (
                Form8KParser(),
                Form4Parser(),
                Schedule13DParser(),
                Form10QParser(),
                Form14AParser(),
            )
        self._parsers: Tuple[BaseFilingParser, ...] = tuple(parsers)

    @property
    def parsers(self) -> Tuple[BaseFilingParser, ...]:
        """Registered parsers in lookup order."""
        return self._parsers

    @property
    def supported_form_types(self) -> Tuple[str, ...]:
        """Every form type some registered parser accepts."""
        return tuple(form_type for parser in self._parsers for form_type in parser.form_types)

    def get_parser(self, form_type: str) -> Optional[BaseFilingParser]:
        """
        Get the first parser that accepts form_type.

        Returns:
            The parser, or None if no parser handles this form type
        """
        for parser in self._parsers:
            if parser.can_parse(form_type):
                return parser

        logger.warning(f"No parser found for form type: {form_type}")
        return None
