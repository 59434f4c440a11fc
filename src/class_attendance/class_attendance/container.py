from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .database.connection import DBConfig, DatabaseConnection
from .schedules.service import ScheduleService
from .weekly.mysql_weekly_repository import MySQLWeeklyFrequencyRepository
from .weekly.repository import WeeklyFrequencyRepository
from .weekly.service import WeeklyFrequencyService


@dataclass(frozen=True)
class Container:
    classes_repo: ClassRepository
    weekly_repo: WeeklyFrequencyRepository

    schedule_service: ScheduleService
    attendance_service: AttendanceService
    weekly_frequency_service: WeeklyFrequencyService


def wire(*, classes_repo: ClassRepository, weekly_repo: WeeklyFrequencyRepository) -> Container:
    return Container(
        classes_repo=classes_repo,
        weekly_repo=weekly_repo,
        schedule_service=ScheduleService(classes_repo),
        attendance_service=AttendanceService(classes_repo),
        weekly_frequency_service=WeeklyFrequencyService(classes_repo, weekly_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        classes_repo=MySQLClassRepository(conn),
        weekly_repo=MySQLWeeklyFrequencyRepository(conn),
    )
