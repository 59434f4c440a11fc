from __future__ import annotations

from datetime import date, datetime
from typing import Optional

ISO_DATE_FORMAT = "%Y-%m-%d"
BR_DATE_FORMAT = "%d/%m/%Y"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_calendar_date(value) -> Optional[date]:
    """Normalize a stored date value to a plain calendar date.

    Accepts ``date``, ``datetime`` (time part dropped) or a ``YYYY-MM-DD``
    string. Anything else, including malformed strings, gives None.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            return None
    return None


def iso(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def format_br_date(value: date) -> str:
    return value.strftime(BR_DATE_FORMAT)


def format_day_month(value: date) -> str:
    return value.strftime("%d/%m")
