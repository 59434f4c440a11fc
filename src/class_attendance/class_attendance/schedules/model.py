from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import to_calendar_date
from ..core.enums import Weekday

DateLike = Union[date, str, None]


@dataclass(frozen=True)
class ScheduleDescriptor:
    """Weekly schedule of a class: meeting weekday plus start/end dates.

    Values are kept as stored; a missing or malformed part means the class
    is not fully scheduled yet.
    """

    weekday: Optional[str]
    start_date: DateLike = None
    end_date: DateLike = None

    @property
    def parsed_weekday(self) -> Optional[Weekday]:
        return Weekday.parse(self.weekday)

    @property
    def parsed_end(self) -> Optional[date]:
        return to_calendar_date(self.end_date)
