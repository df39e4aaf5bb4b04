"""
Filing text preparation.

EDGAR serves most prose filings (8-K, 10-Q, proxy statements) as HTML. Their
parsers work on plain text, so HTML bodies are flattened before parsing.
Form 4 and Schedule 13D carry XML that their parsers scan tag by tag; those
are passed through untouched.
"""

import re
import logging
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

PROSE_FORM_TYPES = ("8-K", "10-Q", "DEF 14A", "PRE 14A")

HTML_MARKERS = re.compile(r"<(?:html|body|div|p|table|font)[\s>]", re.IGNORECASE)


def looks_like_html(content: str) -> bool:
    """Check whether content contains HTML markup."""
    return bool(HTML_MARKERS.search(content))


def html_to_text(html_content: str) -> str:
    """
    Flatten HTML to text, keeping paragraph breaks.

    Block elements become blank-line separated paragraphs so paragraph based
    parsers still see proposal boundaries.
    """
    soup = BeautifulSoup(html_content, 'html.parser')

    # Remove unwanted tags
    for tag in soup(['script', 'style', 'meta', 'link', 'noscript']):
        tag.decompose()

    for block in soup.find_all(['p', 'div', 'tr', 'br', 'h1', 'h2', 'h3', 'h4', 'li']):
        block.insert_after("\n\n")

    text = soup.get_text()

    # Normalize non-breaking spaces and runs of blanks, keep newlines
    text = text.replace('\xa0', ' ')
    text = re.sub(r'[ \t\r\f\v]+', ' ', text)
    text = re.sub(r' *\n *', '\n', text)
    text = re.sub(r'\n{3,}', '\n\n', text)

    return text.strip()


def prepare_content(content: str, form_type: str) -> str:
    """Return the text a form's parser should see."""
    if form_type in PROSE_FORM_TYPES and looks_like_html(content):
        logger.debug(f"Converting HTML {form_type} filing to text")
        return html_to_text(content)
    return content
