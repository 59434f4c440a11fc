from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..classes.model import ClassRoster
from ..classes.repository import ClassRepository
from ..common.datetime_utils import format_day_month, iso, to_calendar_date
from ..common.validators import require_positive_id
from ..core.enums import AttendanceStatus, ClassStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.recurrence import occurrences_for
from .aggregator import compute_student_attendance, occurrence_status, student_band


@dataclass(frozen=True)
class AttendanceGrid:
    class_id: int
    class_name: str
    status: str
    dates: list[dict]
    rows: list[dict]


class AttendanceService:
    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def _get_class(self, class_id: int) -> ClassRoster:
        roster = self._classes.get_by_id(int(class_id))
        if not roster:
            raise NotFoundError("Turma não encontrada")
        return roster

    def attendance_grid(self, class_id: int) -> AttendanceGrid:
        roster = self._get_class(class_id)
        dates = occurrences_for(roster.schedule)

        rows = []
        for student in sorted(roster.students, key=lambda s: s.name.casefold()):
            percentage = compute_student_attendance(student.attendance, dates)
            rows.append(
                {
                    "student_id": student.student_id,
                    "name": student.name,
                    "cells": [occurrence_status(student.attendance, d) for d in dates],
                    "percentage": percentage,
                    "band": student_band(percentage).value,
                }
            )

        return AttendanceGrid(
            class_id=roster.class_id,
            class_name=roster.name,
            status=roster.status.value,
            dates=[{"date": iso(d), "label": format_day_month(d)} for d in dates],
            rows=rows,
        )

    def student_percentage(self, class_id: int, student_id: int) -> int:
        roster = self._get_class(class_id)
        student = roster.find_student(int(student_id))
        if not student:
            raise NotFoundError("Aluno não está matriculado nesta turma")
        return compute_student_attendance(student.attendance, occurrences_for(roster.schedule))

    def mark(self, *, class_id: int, student_id: int, class_date, status) -> None:
        roster = self._get_class(class_id)
        student_id = require_positive_id(student_id, "Aluno")

        try:
            parsed_status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Status de presença inválido") from None

        day: Optional[date] = to_calendar_date(class_date)
        if day is None:
            raise ValidationError("Data inválida")
        if day not in occurrences_for(roster.schedule):
            raise ValidationError("A data não faz parte do calendário da turma")

        if not roster.find_student(student_id):
            raise ValidationError("Aluno não está matriculado nesta turma")

        self._classes.set_student_attendance(
            class_id=roster.class_id,
            student_id=student_id,
            class_date=day,
            status=parsed_status,
        )

    def finish_class(self, class_id: int) -> None:
        roster = self._get_class(class_id)
        if roster.status == ClassStatus.FINISHED:
            return
        if not self._classes.update_status(class_id=roster.class_id, status=ClassStatus.FINISHED):
            raise ValidationError("Não foi possível finalizar a turma")
