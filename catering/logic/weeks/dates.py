"""Calendar helpers: ISO keys, query date parsing and week-commencing detection."""
import re
from datetime import date, timedelta
from typing import Optional

from catering.domain.errors import DateParseError, WeekPatternNotFound

# "Menu for w/c Monday 26th January 2026", "Week Commencing Monday 2 February 2026"
WEEK_COMMENCING_PATTERN = re.compile(
    r"(?:week\s+commencing|w/c)\s+[a-z]+\s+(\d{1,2})(?:st|nd|rd|th)?\s+([a-z]+)\s+(\d{4})",
    re.IGNORECASE,
)
DATE_SEPARATORS = re.compile(r"[-/]")
DATE_PART = re.compile(r"[0-9]+")

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
MONTHS = {name: number for number, name in enumerate(MONTH_NAMES, start=1)}


def format_date(value: date) -> str:
    """Fixed-width ISO date, e.g. 2026-02-09."""
    return value.isoformat()


def menu_key(value: date, period: str) -> str:
    """Composite index key ``YYYY-MM-DD-<period>``."""
    return f"{format_date(value)}-{period}"


def parse_date_param(raw: str) -> date:
    """Parse ``YYYY-MM-DD`` / ``YYYY/MM/DD`` (separators may be mixed).

    Raises DateParseError unless there are exactly three ASCII digit parts
    that form a real calendar date.
    """
    parts = [p for p in DATE_SEPARATORS.split(raw or "") if p]
    if len(parts) != 3 or not all(DATE_PART.fullmatch(p) for p in parts):
        raise DateParseError(raw)
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError as exc:
        raise DateParseError(raw) from exc


def parse_week_commencing(text: str) -> Optional[date]:
    """Return the week-commencing date named in ``text``, or None.

    The month must be a full English month name and the day/month/year
    must be a valid date, otherwise the match is rejected.
    """
    match = WEEK_COMMENCING_PATTERN.search(text or "")
    if not match:
        return None
    day, month_name, year = match.groups()
    month = MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        return date(int(year), month, int(day))
    except ValueError:
        return None


def require_week_commencing(text: str, source: str = "") -> date:
    week_start = parse_week_commencing(text)
    if week_start is None:
        raise WeekPatternNotFound(source)
    return week_start


def weekday_offset(value: date) -> int:
    """Days since Monday (0=Mon..6=Sun)."""
    return value.weekday()


def day_of_week(week_start: date, offset: int) -> date:
    return week_start + timedelta(days=offset)
