from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import iso
from ..core.enums import AttendanceStatus, ClassStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, placeholders
from ..schedules.model import ScheduleDescriptor
from .model import ClassRoster, StudentAttendance
from .repository import ClassRepository

_CLASS_COLUMNS = "class_id, name, dia_semana, data_inicio, data_termino, horario, professor_name, status"


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, class_id: int) -> Optional[ClassRoster]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_CLASS_COLUMNS} FROM classes WHERE class_id=%s", (int(class_id),))
            r = fetchone(cur)
            if not r:
                return None
            students = self._load_students(cur, [int(r["class_id"])])
            return self._to_roster(r, students.get(int(r["class_id"]), []))

    def list_all(self) -> Sequence[ClassRoster]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_CLASS_COLUMNS} FROM classes ORDER BY name ASC")
            rows = fetchall(cur)
            if not rows:
                return []
            students = self._load_students(cur, [int(r["class_id"]) for r in rows])
            return [self._to_roster(r, students.get(int(r["class_id"]), [])) for r in rows]

    def set_student_attendance(
        self,
        *,
        class_id: int,
        student_id: int,
        class_date: date,
        status: AttendanceStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO student_attendance(class_id, student_id, class_date, status)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(class_id), int(student_id), iso(class_date), status.value),
            )
            return cur.rowcount > 0

    def update_status(self, *, class_id: int, status: ClassStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE classes SET status=%s WHERE class_id=%s", (status.value, int(class_id)))
            return cur.rowcount > 0

    def _load_students(self, cur, class_ids: list[int]) -> dict[int, list[StudentAttendance]]:
        marks = placeholders(len(class_ids))
        cur.execute(
            f"""
            SELECT cs.class_id, s.student_id, s.full_name
            FROM class_students cs
            JOIN students s ON s.student_id = cs.student_id
            WHERE cs.class_id IN ({marks})
            """,
            tuple(class_ids),
        )
        enrolled = fetchall(cur)

        cur.execute(
            f"""
            SELECT class_id, student_id, class_date, status
            FROM student_attendance
            WHERE class_id IN ({marks})
            """,
            tuple(class_ids),
        )
        attendance: dict[tuple[int, int], dict[str, str]] = {}
        for r in fetchall(cur):
            key = (int(r["class_id"]), int(r["student_id"]))
            attendance.setdefault(key, {})[str(r["class_date"])] = r["status"]

        out: dict[int, list[StudentAttendance]] = {}
        for r in enrolled:
            class_id = int(r["class_id"])
            student_id = int(r["student_id"])
            out.setdefault(class_id, []).append(
                StudentAttendance(
                    student_id=student_id,
                    name=r["full_name"],
                    attendance=attendance.get((class_id, student_id), {}),
                )
            )
        return out

    @staticmethod
    def _to_roster(r: dict, students: list[StudentAttendance]) -> ClassRoster:
        try:
            status = ClassStatus(r.get("status") or ClassStatus.ACTIVE.value)
        except ValueError:
            status = ClassStatus.ACTIVE
        return ClassRoster(
            class_id=int(r["class_id"]),
            name=r["name"],
            schedule=ScheduleDescriptor(
                weekday=r.get("dia_semana"),
                start_date=r.get("data_inicio"),
                end_date=r.get("data_termino"),
            ),
            horario=r.get("horario"),
            professor_name=r.get("professor_name"),
            status=status,
            students=tuple(students),
        )
