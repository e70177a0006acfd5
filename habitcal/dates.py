"""Date keys and the local notion of "today"."""

from datetime import date, datetime, timezone, timedelta

from habitcal.config import TIMEZONE_OFFSET_HOURS

DATE_FORMAT = "%Y-%m-%d"


def local_today() -> date:
    """Today's calendar date, local unless TIMEZONE_OFFSET_HOURS is set."""
    if TIMEZONE_OFFSET_HOURS is None:
        return date.today()
    return datetime.now(timezone(timedelta(hours=TIMEZONE_OFFSET_HOURS))).date()


def format_date(d: date) -> str:
    """Zero-padded YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date(date_key: str) -> date:
    return datetime.strptime(date_key, DATE_FORMAT).date()
