from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus, ClassStatus
from .model import ClassRoster


class ClassRepository(Protocol):
    def get_by_id(self, class_id: int) -> Optional[ClassRoster]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ClassRoster]:
        raise NotImplementedError

    def set_student_attendance(
        self,
        *,
        class_id: int,
        student_id: int,
        class_date: date,
        status: AttendanceStatus,
    ) -> bool:
        """Store one date entry of a student's attendance (last write wins)."""

        raise NotImplementedError

    def update_status(self, *, class_id: int, status: ClassStatus) -> bool:
        raise NotImplementedError
