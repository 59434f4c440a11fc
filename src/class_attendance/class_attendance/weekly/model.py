from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeeklyEntry:
    """Presence count reported for one week of a class."""

    week: int
    enrolled_count: int
    present_count: int


@dataclass(frozen=True)
class WeeklyReport:
    """Monthly snapshot persisted for a class (only reported weeks)."""

    class_id: int
    year: int
    month: int
    weeks: tuple[WeeklyEntry, ...]
    overall_rate: float

    def as_week_map(self) -> dict[int, int]:
        return {e.week: e.present_count for e in self.weeks}
