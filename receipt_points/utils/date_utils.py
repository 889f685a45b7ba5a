"""Date and time parsing for receipt fields"""

import re
from datetime import date, datetime, time
from typing import Optional

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}$")


def parse_purchase_date(value: str) -> Optional[date]:
    """Parse a YYYY-MM-DD purchase date, returning None when it is not a real calendar date"""
    if not _DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_purchase_time(value: str) -> Optional[time]:
    """Parse an HH:MM (24h) purchase time, returning None when out of range or malformed"""
    if not _TIME_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return None
