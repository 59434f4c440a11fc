"""Example: use the service layer without Flask.

Controllers are a thin layer; the recurrence and percentage rules live in
plain functions and services.
"""

import importlib

from config import get_settings_module

from src.class_attendance.class_attendance.attendance.aggregator import compute_class_weekly_average
from src.class_attendance.class_attendance.container import build_container
from src.class_attendance.class_attendance.schedules.recurrence import generate_occurrences


def main():
    print(generate_occurrences("Quinta-feira", "2024-01-01", "2024-01-25"))
    print(compute_class_weekly_average({1: 18, 2: 20, 3: None, 4: 0}, 20))

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    print(container.attendance_service.attendance_grid(class_id=1))


if __name__ == "__main__":
    main()
