"""
Regex heuristics that pull event details out of filing prose.

Each extractor tries a short list of patterns in priority order and returns
the first hit, or None. Lookup-table extractors (exchange, approval type,
debt action) check substrings in table order, so more specific entries must
come before generic ones.
"""

import re
import logging
from datetime import datetime
from functools import wraps
from typing import Callable, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

MONTH_DAY_YEAR = r"([A-Z][a-z]+ \d{1,2},? \d{4})"
NUMERIC_DATE = r"(\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4})"
AMOUNT = r"\$([\d.,]+)(?:\s+(million|billion))?"

DATE_FORMATS = (
    "%B %d, %Y", "%B %d %Y", "%b %d, %Y", "%b %d %Y",
    "%m/%d/%Y", "%m-%d-%Y", "%m.%d.%Y",
    "%m/%d/%y", "%m-%d-%y", "%m.%d.%y",
)

UNIT_MULTIPLIERS = {
    "million": 1_000_000,
    "billion": 1_000_000_000,
}


def _compile(*patterns: str) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


NEW_NAME_PATTERNS = _compile(
    r"change(?:d|s)? (?:the |its |their )?(?:corporate |company )?name (?:to|from) [\"']([^\"']+)[\"']",
    r"new (?:corporate |company )?name (?:will be|is) [\"']([^\"']+)[\"']",
    r"rename(?:d|s)? (?:the company|itself) (?:to|as) [\"']([^\"']+)[\"']",
)
OLD_TICKER_PATTERNS = _compile(
    r"(?:current|old|previous) (?:ticker|trading) symbol (?:is|was) [\"']([^\"']{1,5})[\"']",
    r"ticker symbol (?:from|changed from) [\"']([^\"']{1,5})[\"']",
)
NEW_TICKER_PATTERNS = _compile(
    r"(?:new|changed) (?:ticker|trading) symbol (?:will be|is) [\"']([^\"']{1,5})[\"']",
    r"ticker symbol (?:to|changed to) [\"']([^\"']{1,5})[\"']",
)
EFFECTIVE_DATE_PATTERNS = _compile(
    rf"effective (?:as of |on |date[: ]+){MONTH_DAY_YEAR}",
    rf"will (?:be |become |take )effective (?:on |as of |){MONTH_DAY_YEAR}",
    rf"effective date[: ]+{NUMERIC_DATE}",
)
SPLIT_RATIO_PATTERNS = _compile(
    r"reverse (?:stock )?split (?:at a )?ratio of (?:(\d+)[: ](\d+)|(\d+) for (\d+))",
    r"(\d+)[: ](\d+) reverse (?:stock )?split",
    r"(\d+)-for-(\d+) reverse (?:stock )?split",
)
CURRENT_EXCHANGE_PATTERNS = _compile(
    r"currently (?:listed|trading) on (?:the )?([A-Za-z ]+)",
    r"uplisting from (?:the )?([A-Za-z ]+)",
)
PRODUCT_NAME_PATTERNS = _compile(
    r"FDA (?:approval|cleared|authorized) (?:for|of) (?:its |the |)([^,.;:]+)",
    r"approval (?:for|of) (?:its |the |)([^,.;:]+) (?:from|by) the FDA",
)
SPIN_OFF_UNIT_PATTERNS = _compile(
    r"spin(?:-| )off of (?:its |the |)([^,.;:]+)",
    r"spin(?:-| )off (?:its |the |)([^,.;:]+)",
)
RECORD_DATE_PATTERNS = _compile(
    rf"record date (?:of |is |will be |){MONTH_DAY_YEAR}",
    rf"record date (?:of |is |will be |){NUMERIC_DATE}",
)
DISTRIBUTION_DATE_PATTERNS = _compile(
    rf"distribution date (?:of |is |will be |){MONTH_DAY_YEAR}",
    rf"distribution date (?:of |is |will be |){NUMERIC_DATE}",
)
PAYMENT_DATE_PATTERNS = _compile(
    rf"payment date (?:of |is |will be |){MONTH_DAY_YEAR}",
    rf"payment date (?:of |is |will be |){NUMERIC_DATE}",
    rf"payable (?:on |){MONTH_DAY_YEAR}",
    rf"will be paid (?:on |){NUMERIC_DATE}",
)
DIVIDEND_AMOUNT_PATTERNS = _compile(
    r"special dividend of \$([\d.]+)",
    r"special dividend in the amount of \$([\d.]+)",
    r"\$([\d.]+) (?:per share |)special dividend",
)
DEBT_AMOUNT_PATTERNS = _compile(
    r"(?:reduce|reducing|reduced|repay|repaying|repaid|refinance|refinancing|refinanced) "
    rf"(?:its |their |the |)debt (?:by |in the amount of |of |totaling |){AMOUNT}",
    rf"{AMOUNT} (?:of |in |)debt (?:reduction|repayment|refinancing)",
)
BUYBACK_AMOUNT_PATTERNS = _compile(
    rf"(?:repurchase|buyback|buy-back)[^.$]{{0,100}}?{AMOUNT}",
    rf"{AMOUNT}\s+(?:share |stock )?(?:repurchase|buyback)",
)

TARGET_EXCHANGES = (
    ("nasdaq capital market", "Nasdaq Capital Market"),
    ("nasdaq global market", "Nasdaq Global Market"),
    ("nasdaq global select", "Nasdaq Global Select Market"),
    ("nyse american", "NYSE American"),
    ("nyse", "New York Stock Exchange"),
    ("nasdaq", "Nasdaq"),
)
APPROVAL_TYPES = (
    (("510(k)", "510k"), "510(k) Clearance"),
    (("de novo",), "De Novo Classification"),
    (("pma", "pre-market approval"), "Pre-Market Approval (PMA)"),
    (("nda", "new drug application"), "New Drug Application (NDA)"),
    (("bla", "biologics license"), "Biologics License Application (BLA)"),
    (("anda", "abbreviated new drug"), "Abbreviated New Drug Application (ANDA)"),
    (("emergency use", "eua"), "Emergency Use Authorization (EUA)"),
)
DEBT_ACTION_TYPES = (
    (("refinanc",), "Refinancing"),
    (("early repayment", "prepayment"), "Early Repayment"),
    (("extinguish",), "Debt Extinguishment"),
    (("restructur",), "Restructuring"),
    (("repay", "reduc"), "Repayment/Reduction"),
)

DEFAULT_CURRENT_EXCHANGE = "OTC Markets"
DEFAULT_APPROVAL_TYPE = "FDA Approval"
DEFAULT_DEBT_ACTION = "Debt Transaction"


def field_extractor(func: Callable) -> Callable:
    """Log and swallow unexpected errors so one bad field never sinks a filing."""

    @wraps(func)
    def wrapper(content: str):
        try:
            return func(content)
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}")
            return None

    return wrapper


def _first_match(content: str, patterns: Sequence[re.Pattern]) -> Optional[re.Match]:
    for pattern in patterns:
        match = pattern.search(content)
        if match:
            return match
    return None


def _first_group(content: str, patterns: Sequence[re.Pattern]) -> Optional[str]:
    match = _first_match(content, patterns)
    if match and match.group(1):
        return match.group(1).strip()
    return None


def normalize_date(raw: str) -> str:
    """
    Convert a prose date to YYYY-MM-DD.

    Returns the stripped input unchanged when no known format fits.

    Example:
        >>> normalize_date("March 1, 2024")
        '2024-03-01'
    """
    text = raw.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    return text


def _first_date(content: str, patterns: Sequence[re.Pattern]) -> Optional[str]:
    raw = _first_group(content, patterns)
    return normalize_date(raw) if raw else None


def parse_amount(number: str, unit: Optional[str] = None) -> Optional[float]:
    """
    Parse '2.5' + 'million' into 2500000.0.

    The unit multiplier is applied exactly once. Returns None for text that
    is not a number.
    """
    cleaned = number.replace(",", "").rstrip(".")
    if not cleaned:
        return None
    try:
        amount = float(cleaned)
    except ValueError:
        return None
    if unit:
        amount *= UNIT_MULTIPLIERS[unit.lower()]
    return amount


def _lookup(content: str, table, default: Optional[str] = None) -> Optional[str]:
    normalized = content.lower()
    for needles, label in table:
        if isinstance(needles, str):
            needles = (needles,)
        if any(needle in normalized for needle in needles):
            return label
    return default


@field_extractor
def extract_new_name(content: str) -> Optional[str]:
    return _first_group(content, NEW_NAME_PATTERNS)


@field_extractor
def extract_old_ticker(content: str) -> Optional[str]:
    return _first_group(content, OLD_TICKER_PATTERNS)


@field_extractor
def extract_new_ticker(content: str) -> Optional[str]:
    return _first_group(content, NEW_TICKER_PATTERNS)


@field_extractor
def extract_effective_date(content: str) -> Optional[str]:
    return _first_date(content, EFFECTIVE_DATE_PATTERNS)


@field_extractor
def extract_record_date(content: str) -> Optional[str]:
    return _first_date(content, RECORD_DATE_PATTERNS)


@field_extractor
def extract_distribution_date(content: str) -> Optional[str]:
    return _first_date(content, DISTRIBUTION_DATE_PATTERNS)


@field_extractor
def extract_payment_date(content: str) -> Optional[str]:
    return _first_date(content, PAYMENT_DATE_PATTERNS)


@field_extractor
def extract_split_ratio(content: str) -> Optional[str]:
    """Split ratio as 'N:M', from 'ratio of 1:10', '1 for 10' or '1-for-10' phrasing."""
    match = _first_match(content, SPLIT_RATIO_PATTERNS)
    if not match:
        return None
    numbers = [group for group in match.groups() if group]
    if len(numbers) < 2:
        return None
    return f"{numbers[0]}:{numbers[1]}"


@field_extractor
def extract_current_exchange(content: str) -> Optional[str]:
    """Exchange the company trades on today; OTC Markets when not stated."""
    return _first_group(content, CURRENT_EXCHANGE_PATTERNS) or DEFAULT_CURRENT_EXCHANGE


@field_extractor
def extract_target_exchange(content: str) -> Optional[str]:
    return _lookup(content, TARGET_EXCHANGES)


@field_extractor
def extract_product_name(content: str) -> Optional[str]:
    return _first_group(content, PRODUCT_NAME_PATTERNS)


@field_extractor
def extract_approval_type(content: str) -> Optional[str]:
    return _lookup(content, APPROVAL_TYPES, DEFAULT_APPROVAL_TYPE)


@field_extractor
def extract_spin_off_unit_name(content: str) -> Optional[str]:
    return _first_group(content, SPIN_OFF_UNIT_PATTERNS)


@field_extractor
def extract_dividend_amount(content: str) -> Optional[float]:
    """Per-share special dividend amount."""
    raw = _first_group(content, DIVIDEND_AMOUNT_PATTERNS)
    return parse_amount(raw) if raw else None


@field_extractor
def extract_debt_amount(content: str) -> Optional[float]:
    """Debt amount in dollars, with any million/billion suffix applied."""
    match = _first_match(content, DEBT_AMOUNT_PATTERNS)
    if not match:
        return None
    return parse_amount(match.group(1), match.group(2))


@field_extractor
def extract_debt_action_type(content: str) -> Optional[str]:
    return _lookup(content, DEBT_ACTION_TYPES, DEFAULT_DEBT_ACTION)


@field_extractor
def extract_buyback_amount(content: str) -> Optional[float]:
    """Authorized repurchase amount in dollars."""
    match = _first_match(content, BUYBACK_AMOUNT_PATTERNS)
    if not match:
        return None
    return parse_amount(match.group(1), match.group(2))
