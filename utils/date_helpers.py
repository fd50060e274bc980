from datetime import date, datetime, timedelta
from utils.constants import DATE_FORMAT


def today() -> date:
    return date.today()


def today_str() -> str:
    return date.today().strftime(DATE_FORMAT)


def as_date(value: date | datetime) -> date:
    """Drop the time-of-day from a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(date_str: str | None) -> date | None:
    """Parse a YYYY-MM-DD date string, returning None on failure.

    '/' and '.' separators are accepted too. A full ISO timestamp
    ('2024-01-15T10:30:00') parses to its date; any other trailing text fails.
    """
    if not date_str:
        return None
    date_str = date_str.strip()
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    if "T" in date_str or " " in date_str:
        try:
            return datetime.fromisoformat(date_str).date()
        except ValueError:
            return None
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def start_of_week(ref: date | datetime) -> date:
    """Monday of the week containing ref (ref itself when it is a Monday)."""
    d = as_date(ref)
    return d - timedelta(days=d.weekday())


def start_of_month(ref: date | datetime) -> date:
    return as_date(ref).replace(day=1)
