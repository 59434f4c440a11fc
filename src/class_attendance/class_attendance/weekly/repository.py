from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WeeklyReport


class WeeklyFrequencyRepository(Protocol):
    def list_month(self, *, year: int, month: int) -> Sequence[WeeklyReport]:
        raise NotImplementedError

    def get_for_class(self, *, class_id: int, year: int, month: int) -> Optional[WeeklyReport]:
        raise NotImplementedError

    def save(self, report: WeeklyReport) -> None:
        """Replace the stored weeks and overall rate of (class, year, month)."""

        raise NotImplementedError
