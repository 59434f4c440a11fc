from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..attendance.aggregator import compute_class_weekly_average, valid_week_counts, weekly_band, weekly_rate
from ..classes.model import ClassRoster
from ..classes.repository import ClassRepository
from ..common.validators import clean_present_count, require_positive_id, require_range
from ..core.constants import WEEKS_PER_MONTH
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError, ValidationError
from .model import WeeklyEntry, WeeklyReport
from .repository import WeeklyFrequencyRepository


@dataclass(frozen=True)
class FrequencyStats:
    total_classes: int
    classes_with_data: int
    overall_average: float
    best: float
    worst: float
    total_students: int


class WeeklyFrequencyService:
    """Monthly presence report where each week stores a class-level count."""

    def __init__(self, classes: ClassRepository, weekly: WeeklyFrequencyRepository):
        self._classes = classes
        self._weekly = weekly

    def _month_records(self, year: int, month: int) -> dict[int, dict[int, int]]:
        return {r.class_id: r.as_week_map() for r in self._weekly.list_month(year=year, month=month)}

    def monthly_averages(self, year: int, month: int) -> dict[int, float]:
        year, month = self._check_period(year, month)
        records = self._month_records(year, month)
        return {
            c.class_id: compute_class_weekly_average(records.get(c.class_id), c.enrolled_count)
            for c in self._classes.list_all()
        }

    def monthly_report(self, year: int, month: int, *, weekday=None, professor: Optional[str] = None) -> list[dict]:
        """One row per class with the per-week badge and the month average."""

        year, month = self._check_period(year, month)
        records = self._month_records(year, month)

        out: list[dict] = []
        for c in self._filter(self._classes.list_all(), weekday=weekday, professor=professor):
            weeks = records.get(c.class_id, {})
            enrolled = c.enrolled_count
            parsed_day = c.schedule.parsed_weekday
            week_rows = []
            for week in range(1, WEEKS_PER_MONTH + 1):
                present = weeks.get(week)
                rate = weekly_rate(present, enrolled)
                week_rows.append(
                    {
                        "semana": week,
                        "presentes": present,
                        "percentual": rate,
                        "band": weekly_band(rate).value if present is not None else None,
                    }
                )
            out.append(
                {
                    "class_id": c.class_id,
                    "name": c.name,
                    "dia_semana": c.schedule.weekday,
                    "dia_semana_curto": parsed_day.short_label if parsed_day else None,
                    "professor": c.professor_name,
                    "matriculados": enrolled,
                    "semanas": week_rows,
                    "frequencia_geral": compute_class_weekly_average(weeks, enrolled),
                }
            )
        return out

    def record_week(self, *, class_id: int, year: int, month: int, week: int, value) -> float:
        """Store one week's count (blank clears it) and return the new month average."""

        year, month = self._check_period(year, month)
        week = require_range(week, "Semana", 1, WEEKS_PER_MONTH)
        present = clean_present_count(value)

        roster = self._classes.get_by_id(require_positive_id(class_id, "Turma"))
        if not roster:
            raise NotFoundError("Turma não encontrada")

        current = self._weekly.get_for_class(class_id=roster.class_id, year=year, month=month)
        weeks: dict[int, Optional[int]] = dict(current.as_week_map()) if current else {}
        weeks[week] = present

        enrolled = roster.enrolled_count
        if present is not None and present > enrolled:
            raise ValidationError(f"Nº de presentes maior que o de matriculados ({enrolled})")

        average = compute_class_weekly_average(weeks, enrolled)
        entries = tuple(
            WeeklyEntry(week=w, enrolled_count=enrolled, present_count=count)
            for w, count in sorted(valid_week_counts(weeks).items())
        )
        self._weekly.save(
            WeeklyReport(
                class_id=roster.class_id,
                year=year,
                month=month,
                weeks=entries,
                overall_rate=average,
            )
        )
        return average

    def statistics(self, year: int, month: int, *, weekday=None, professor: Optional[str] = None) -> FrequencyStats:
        averages = self.monthly_averages(year, month)
        selected = self._filter(self._classes.list_all(), weekday=weekday, professor=professor)

        total_students = sum(c.enrolled_count for c in selected)
        with_data = [averages.get(c.class_id, 0.0) for c in selected if averages.get(c.class_id, 0.0) > 0]
        if not with_data:
            return FrequencyStats(
                total_classes=len(selected),
                classes_with_data=0,
                overall_average=0.0,
                best=0.0,
                worst=0.0,
                total_students=total_students,
            )

        return FrequencyStats(
            total_classes=len(selected),
            classes_with_data=len(with_data),
            overall_average=sum(with_data) / len(with_data),
            best=max(with_data),
            worst=min(with_data),
            total_students=total_students,
        )

    @staticmethod
    def _filter(classes: Sequence[ClassRoster], *, weekday=None, professor: Optional[str] = None) -> list[ClassRoster]:
        day = Weekday.parse(weekday) if weekday else None
        if weekday and day is None:
            return []
        out = []
        for c in classes:
            if day and c.schedule.parsed_weekday != day:
                continue
            if professor and c.professor_name != professor:
                continue
            out.append(c)
        return sorted(out, key=lambda c: c.name.casefold())

    @staticmethod
    def _check_period(year, month) -> tuple[int, int]:
        return require_range(year, "Ano", 2000, 2100), require_range(month, "Mês", 1, 12)
