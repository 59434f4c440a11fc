"""Attendance percentages from sparse records.

Two record shapes exist:

- date-keyed: ``{"YYYY-MM-DD": "present" | "absent"}`` per student, scored
  against the class occurrence list;
- week-keyed: ``{week_index: present_count | None}`` per class, scored against
  the number of enrolled students.

Everything here is a pure function. Bad entries are skipped and every zero
denominator yields 0.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import iso, to_calendar_date
from ..core.constants import STUDENT_ATTENDANCE_OK, WEEKLY_RATE_GOOD, WEEKLY_RATE_WARNING, WEEKS_PER_MONTH
from ..core.enums import AttendanceStatus, FrequencyBand


def _cap(percentage: float) -> float:
    # More present than enrolled (roster shrank after saving) still reads as 100.
    return min(percentage, 100.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _occurrence_keys(occurrences: Iterable) -> set[str]:
    keys: set[str] = set()
    for occ in occurrences:
        d = to_calendar_date(occ)
        if d is not None:
            keys.add(iso(d))
    return keys


def count_present(attendance_record: Optional[Mapping], occurrences: Sequence) -> int:
    """Number of ``present`` entries whose date is one of ``occurrences``."""

    if not attendance_record:
        return 0
    valid = _occurrence_keys(occurrences)
    attended: set[str] = set()
    for key, status in attendance_record.items():
        d = to_calendar_date(key)
        if d is None or iso(d) not in valid:
            continue
        if status == AttendanceStatus.PRESENT.value:
            attended.add(iso(d))
    return len(attended)


def compute_student_attendance(attendance_record: Optional[Mapping], occurrences: Sequence) -> int:
    """Percentage (0-100, rounded) of class occurrences the student attended."""

    total = len(occurrences)
    if total == 0:
        return 0
    return _round_half_up(count_present(attendance_record, occurrences) / total * 100)


def valid_week_counts(weekly_records: Optional[Mapping], max_week: int = WEEKS_PER_MONTH) -> dict[int, int]:
    """Weeks that were actually reported, with their present count.

    ``None``, blank strings, non-numeric or fractional values mean "not
    reported". An entered ``0`` is a reported week. Week keys outside
    ``1..max_week`` are skipped.
    """

    out: dict[int, int] = {}
    for week, value in (weekly_records or {}).items():
        count = _as_count(value)
        if count is None:
            continue
        try:
            index = int(week)
        except (TypeError, ValueError):
            continue
        if 1 <= index <= max_week:
            out[index] = count
    return out


def _as_count(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    return count if count >= 0 else None


def compute_class_weekly_average(weekly_records: Optional[Mapping], enrolled_count: int) -> float:
    """Unrounded class presence percentage over the reported weeks."""

    if enrolled_count <= 0:
        return 0.0
    weeks = valid_week_counts(weekly_records)
    if not weeks:
        return 0.0
    return _cap(sum(weeks.values()) / (len(weeks) * enrolled_count) * 100)


def weekly_rate(present_count, enrolled_count: int) -> float:
    """Presence percentage of a single week (0 when not reported)."""

    count = _as_count(present_count)
    if count is None or enrolled_count <= 0:
        return 0.0
    return _cap(count / enrolled_count * 100)


def student_band(percentage: float) -> FrequencyBand:
    return FrequencyBand.OK if percentage >= STUDENT_ATTENDANCE_OK else FrequencyBand.LOW


def weekly_band(percentage: float) -> FrequencyBand:
    if percentage >= WEEKLY_RATE_GOOD:
        return FrequencyBand.GOOD
    if percentage >= WEEKLY_RATE_WARNING:
        return FrequencyBand.WARNING
    return FrequencyBand.LOW


def occurrence_status(attendance_record: Optional[Mapping], class_date: date) -> Optional[str]:
    if not attendance_record:
        return None
    status = attendance_record.get(iso(class_date))
    if status in (AttendanceStatus.PRESENT.value, AttendanceStatus.ABSENT.value):
        return AttendanceStatus(status).value
    return None
