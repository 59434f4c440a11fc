from datetime import date

import pytest

from src.class_attendance.class_attendance.core.exceptions import NotFoundError, ValidationError
from src.class_attendance.class_attendance.schedules.model import ScheduleDescriptor
from src.class_attendance.class_attendance.schedules.service import ScheduleService


def test_class_dates_follow_stored_schedule(classes_repo):
    svc = ScheduleService(classes_repo)

    assert svc.class_dates(1) == [date(2024, 1, 4), date(2024, 1, 11), date(2024, 1, 18), date(2024, 1, 25)]
    assert svc.class_dates(2) == []


def test_class_dates_unknown_class(classes_repo):
    with pytest.raises(NotFoundError):
        ScheduleService(classes_repo).class_dates(99)


def test_contract_lists_dates_in_brazilian_format(classes_repo):
    courses = ScheduleService(classes_repo).contract_course_dates(["1", 2])

    assert courses[0]["name"] == "Informática Básica A"
    assert courses[0]["datas"] == "04/01/2024, 11/01/2024, 18/01/2024, 25/01/2024"
    assert courses[0]["total_aulas"] == 4
    assert courses[1]["datas"] == ""
    assert courses[1]["total_aulas"] == 0


def test_contract_requires_selection(classes_repo):
    with pytest.raises(ValidationError):
        ScheduleService(classes_repo).contract_course_dates([])

    with pytest.raises(ValidationError):
        ScheduleService(classes_repo).contract_course_dates(["abc"])


def test_end_date_label():
    assert ScheduleService.end_date_label(ScheduleDescriptor("Sábado", "2024-02-03", "2024-06-29")) == "29/06/2024"
    assert ScheduleService.end_date_label(ScheduleDescriptor("Sábado", "2024-02-03", None)) == "Data não definida"
    assert ScheduleService.end_date_label(ScheduleDescriptor("Sábado", "2024-02-03", "garbage")) == "Data não definida"
