from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.enums import ClassStatus
from ..schedules.model import ScheduleDescriptor


@dataclass(frozen=True)
class StudentAttendance:
    """Aluno matriculado com seu registro esparso de presença (data -> status)."""

    student_id: int
    name: str
    attendance: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassRoster:
    """Read-model da turma: agenda semanal e lista de alunos."""

    class_id: int
    name: str
    schedule: ScheduleDescriptor
    horario: Optional[str] = None
    professor_name: Optional[str] = None
    status: ClassStatus = ClassStatus.ACTIVE
    students: tuple[StudentAttendance, ...] = ()

    @property
    def enrolled_count(self) -> int:
        return len(self.students)

    def find_student(self, student_id: int) -> Optional[StudentAttendance]:
        for s in self.students:
            if s.student_id == student_id:
                return s
        return None
