"""Class attendance package.

Organized by feature modules (schedules, attendance, weekly, ...) with a thin
Flask controller layer over services and repositories. The recurrence and
aggregation functions in ``schedules.recurrence`` and ``attendance.aggregator``
are pure and have no I/O.
"""
