from __future__ import annotations

from datetime import date, timedelta
from typing import List

from ..common.datetime_utils import iso, to_calendar_date
from ..core.enums import Weekday
from .model import ScheduleDescriptor

_WEEK = timedelta(days=7)


def _sunday_based_weekday(value: date) -> int:
    # date.weekday() is Monday=0; classes use Sunday=0.
    return (value.weekday() + 1) % 7


def generate_occurrences(weekday, start_date, end_date) -> List[date]:
    """List every date a weekly class meets between start and end, inclusive.

    The first occurrence is the earliest date on or after ``start_date``
    falling on ``weekday``; the rest follow in 7-day steps. Missing or
    unparseable inputs, or ``start_date > end_date``, give an empty list.
    """

    target = Weekday.parse(weekday)
    start = to_calendar_date(start_date)
    end = to_calendar_date(end_date)
    if target is None or start is None or end is None or start > end:
        return []

    offset = (target.day_number - _sunday_based_weekday(start) + 7) % 7
    current = start + timedelta(days=offset)

    dates: List[date] = []
    while current <= end:
        dates.append(current)
        current += _WEEK
    return dates


def occurrences_for(schedule: ScheduleDescriptor) -> List[date]:
    return generate_occurrences(schedule.weekday, schedule.start_date, schedule.end_date)


def occurrence_keys(schedule: ScheduleDescriptor) -> List[str]:
    """Occurrence dates as ``YYYY-MM-DD`` keys, the format attendance is stored with."""
    return [iso(d) for d in occurrences_for(schedule)]
