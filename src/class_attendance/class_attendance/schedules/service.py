from __future__ import annotations

from datetime import date
from typing import Iterable

from ..classes.repository import ClassRepository
from ..common.datetime_utils import format_br_date
from ..common.validators import require_positive_id
from ..core.constants import UNDEFINED_DATE_LABEL
from ..core.exceptions import NotFoundError, ValidationError
from .model import ScheduleDescriptor
from .recurrence import occurrences_for


class ScheduleService:
    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def class_dates(self, class_id: int) -> list[date]:
        roster = self._classes.get_by_id(int(class_id))
        if not roster:
            raise NotFoundError("Turma não encontrada")
        return occurrences_for(roster.schedule)

    def contract_course_dates(self, class_ids: Iterable) -> list[dict]:
        """Course lines printed on an enrolment contract, in selection order."""

        ids = [require_positive_id(cid, "Turma") for cid in class_ids]
        if not ids:
            raise ValidationError("Selecione ao menos uma turma")

        out: list[dict] = []
        for class_id in ids:
            roster = self._classes.get_by_id(class_id)
            if not roster:
                raise NotFoundError(f"Turma {class_id} não encontrada")
            dates = occurrences_for(roster.schedule)
            out.append(
                {
                    "class_id": roster.class_id,
                    "name": roster.name,
                    "dia_semana": roster.schedule.weekday,
                    "horario": roster.horario,
                    "total_aulas": len(dates),
                    "datas": ", ".join(format_br_date(d) for d in dates),
                }
            )
        return out

    @staticmethod
    def end_date_label(schedule: ScheduleDescriptor) -> str:
        end = schedule.parsed_end
        return format_br_date(end) if end else UNDEFINED_DATE_LABEL
