from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

import pytest

from src.class_attendance.class_attendance.classes.model import ClassRoster, StudentAttendance
from src.class_attendance.class_attendance.common.datetime_utils import iso
from src.class_attendance.class_attendance.container import wire
from src.class_attendance.class_attendance.core.enums import AttendanceStatus, ClassStatus
from src.class_attendance.class_attendance.schedules.model import ScheduleDescriptor
from src.class_attendance.class_attendance.weekly.model import WeeklyReport


@dataclass
class InMemoryClasses:
    classes: dict[int, ClassRoster]
    writes: list[tuple] = field(default_factory=list)

    def get_by_id(self, class_id: int) -> Optional[ClassRoster]:
        return self.classes.get(class_id)

    def list_all(self):
        return list(self.classes.values())

    def set_student_attendance(self, *, class_id: int, student_id: int, class_date: date, status: AttendanceStatus) -> bool:
        roster = self.classes[class_id]
        students = []
        for s in roster.students:
            if s.student_id == student_id:
                s = replace(s, attendance={**s.attendance, iso(class_date): status.value})
            students.append(s)
        self.classes[class_id] = replace(roster, students=tuple(students))
        self.writes.append((class_id, student_id, class_date, status))
        return True

    def update_status(self, *, class_id: int, status: ClassStatus) -> bool:
        if class_id not in self.classes:
            return False
        self.classes[class_id] = replace(self.classes[class_id], status=status)
        return True


@dataclass
class InMemoryWeekly:
    reports: dict[tuple[int, int, int], WeeklyReport] = field(default_factory=dict)

    def list_month(self, *, year: int, month: int):
        return [r for (_, y, m), r in self.reports.items() if (y, m) == (year, month)]

    def get_for_class(self, *, class_id: int, year: int, month: int) -> Optional[WeeklyReport]:
        return self.reports.get((class_id, year, month))

    def save(self, report: WeeklyReport) -> None:
        self.reports[(report.class_id, report.year, report.month)] = report


def make_class(class_id: int, name: str, weekday, start, end, students=(), **kwargs) -> ClassRoster:
    return ClassRoster(
        class_id=class_id,
        name=name,
        schedule=ScheduleDescriptor(weekday=weekday, start_date=start, end_date=end),
        students=tuple(students),
        **kwargs,
    )


@pytest.fixture
def thursday_class() -> ClassRoster:
    # Occurrences: 2024-01-04, 01-11, 01-18, 01-25
    return make_class(
        1,
        "Informática Básica A",
        "Quinta-feira",
        "2024-01-01",
        "2024-01-25",
        students=[
            StudentAttendance(
                student_id=10,
                name="Diego Alves",
                attendance={"2024-01-04": "present", "2024-01-11": "present", "2024-01-18": "absent"},
            ),
            StudentAttendance(
                student_id=11,
                name="carla Mendes",
                attendance={
                    "2024-01-04": "present",
                    "2024-01-11": "present",
                    "2024-01-18": "present",
                    "2024-01-25": "present",
                    "2023-12-28": "present",
                },
            ),
        ],
        horario="08:00",
        professor_name="Ana Souza",
    )


@pytest.fixture
def classes_repo(thursday_class) -> InMemoryClasses:
    unscheduled = make_class(2, "Excel Avançado", "Sábado", "2024-02-03", None, horario="14:00", professor_name="Bruno Lima")
    return InMemoryClasses({1: thursday_class, 2: unscheduled})


@pytest.fixture
def weekly_repo() -> InMemoryWeekly:
    return InMemoryWeekly()


@pytest.fixture
def container(classes_repo, weekly_repo):
    return wire(classes_repo=classes_repo, weekly_repo=weekly_repo)


@pytest.fixture
def roster_factory():
    return make_class


@pytest.fixture
def classes_repo_factory():
    return InMemoryClasses
