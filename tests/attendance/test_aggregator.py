from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance.aggregator import (
    compute_class_weekly_average,
    compute_student_attendance,
    count_present,
    student_band,
    valid_week_counts,
    weekly_band,
    weekly_rate,
)
from src.class_attendance.class_attendance.core.enums import AttendanceStatus, FrequencyBand
from src.class_attendance.class_attendance.schedules.recurrence import generate_occurrences

JANUARY_THURSDAYS = [date(2024, 1, 4), date(2024, 1, 11), date(2024, 1, 18), date(2024, 1, 25)]


def test_student_half_present_with_unset_date():
    record = {"2024-01-04": "present", "2024-01-11": "present", "2024-01-18": "absent"}

    assert compute_student_attendance(record, JANUARY_THURSDAYS) == 50


def test_student_all_or_nothing():
    all_present = {d.isoformat(): "present" for d in JANUARY_THURSDAYS}
    all_absent = {d.isoformat(): "absent" for d in JANUARY_THURSDAYS}

    assert compute_student_attendance(all_present, JANUARY_THURSDAYS) == 100
    assert compute_student_attendance(all_absent, JANUARY_THURSDAYS) == 0
    assert compute_student_attendance({}, JANUARY_THURSDAYS) == 0
    assert compute_student_attendance(None, JANUARY_THURSDAYS) == 0


def test_no_occurrences_is_zero_whatever_the_record():
    assert compute_student_attendance({"2024-01-04": "present"}, []) == 0


def test_orphaned_and_malformed_keys_are_ignored():
    record = {
        "2024-01-04": "present",
        "2023-12-28": "present",
        "not-a-date": "present",
        "2024-01-11": None,
        "2024-01-18": "PRESENT",
    }

    assert count_present(record, JANUARY_THURSDAYS) == 1
    assert compute_student_attendance(record, JANUARY_THURSDAYS) == 25
    # the record itself is left untouched
    assert "2023-12-28" in record


def test_enum_status_and_string_occurrences_are_accepted():
    record = {"2024-01-04": AttendanceStatus.PRESENT}
    occurrences = [d.isoformat() for d in JANUARY_THURSDAYS]

    assert compute_student_attendance(record, occurrences) == 25


def test_rounding_goes_half_up():
    dates = generate_occurrences("Segunda-feira", "2024-01-01", "2024-02-19")  # 8 Mondays
    record = {dates[0].isoformat(): "present"}

    assert len(dates) == 8
    assert compute_student_attendance(record, dates) == 13


def test_one_of_three_rounds_down():
    record = {"2024-01-04": "present"}

    assert compute_student_attendance(record, JANUARY_THURSDAYS[:3]) == 33


def test_weekly_average_scenario():
    result = compute_class_weekly_average({1: 18, 2: 20, 3: None, 4: 0}, 20)

    assert result == pytest.approx(63.3333, rel=1e-4)


def test_entered_zero_counts_but_missing_week_does_not():
    with_zero = compute_class_weekly_average({1: 20, 2: 0}, 20)
    without = compute_class_weekly_average({1: 20}, 20)

    assert with_zero == pytest.approx(50.0)
    assert without == pytest.approx(100.0)


def test_blank_and_malformed_weeks_are_not_reported():
    records = {1: "", 2: "  ", 3: "abc", 4: -2, 5: "10", "x": 5}

    assert valid_week_counts(records) == {5: 10}
    assert compute_class_weekly_average(records, 20) == pytest.approx(50.0)


def test_weekly_average_zero_denominators():
    assert compute_class_weekly_average({1: 18}, 0) == 0.0
    assert compute_class_weekly_average({}, 20) == 0.0
    assert compute_class_weekly_average(None, 20) == 0.0
    assert compute_class_weekly_average({1: None, 2: ""}, 20) == 0.0


def test_weekly_average_is_not_rounded():
    assert compute_class_weekly_average({1: 1}, 3) == pytest.approx(100 / 3)


def test_weekly_rate_and_bands():
    assert weekly_rate(15, 20) == pytest.approx(75.0)
    assert weekly_rate(None, 20) == 0.0
    assert weekly_rate(5, 0) == 0.0

    assert weekly_band(75) is FrequencyBand.GOOD
    assert weekly_band(50) is FrequencyBand.WARNING
    assert weekly_band(49.9) is FrequencyBand.LOW
    assert student_band(80) is FrequencyBand.OK
    assert student_band(79) is FrequencyBand.LOW


def test_counts_above_roster_are_capped_at_100():
    # roster shrank from 25 to 20 after the week was saved
    assert compute_class_weekly_average({1: 25}, 20) == pytest.approx(100.0)
    assert compute_class_weekly_average({1: 25, 2: 10}, 20) == pytest.approx(87.5)
    assert weekly_rate(25, 20) == pytest.approx(100.0)


def test_fractional_counts_and_out_of_range_weeks_are_skipped():
    assert valid_week_counts({1: 18.7, 0: 5, -1: 3, 9: 4, "6": 2}) == {}
    assert valid_week_counts({1: 18.0}) == {1: 18}
    assert compute_class_weekly_average({0: 20, 9: 20}, 20) == 0.0
    assert weekly_rate(18.7, 20) == 0.0


def test_skipped_weeks_leave_numerator_and_denominator_alone():
    records = {1: 10, 2: 18.7, 0: 20, 6: 20}

    assert valid_week_counts(records) == {1: 10}
    assert compute_class_weekly_average(records, 20) == pytest.approx(50.0)
