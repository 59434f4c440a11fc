from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import WeeklyEntry, WeeklyReport
from .repository import WeeklyFrequencyRepository


class MySQLWeeklyFrequencyRepository(WeeklyFrequencyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_month(self, *, year: int, month: int) -> Sequence[WeeklyReport]:
        return self._query(year=year, month=month)

    def get_for_class(self, *, class_id: int, year: int, month: int) -> Optional[WeeklyReport]:
        reports = self._query(year=year, month=month, class_id=class_id)
        return reports[0] if reports else None

    def save(self, report: WeeklyReport) -> None:
        key = (int(report.class_id), int(report.year), int(report.month))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM weekly_frequency WHERE class_id=%s AND ano=%s AND mes=%s", key)
            for e in report.weeks:
                cur.execute(
                    """
                    INSERT INTO weekly_frequency(class_id, ano, mes, semana, matriculados, presentes)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    key + (int(e.week), int(e.enrolled_count), int(e.present_count)),
                )
            cur.execute(
                """
                INSERT INTO weekly_frequency_summary(class_id, ano, mes, frequencia_geral)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE frequencia_geral=VALUES(frequencia_geral)
                """,
                key + (float(report.overall_rate),),
            )

    def _query(self, *, year: int, month: int, class_id: Optional[int] = None) -> list[WeeklyReport]:
        clauses = ["s.ano=%s", "s.mes=%s"]
        params: list[object] = [int(year), int(month)]
        if class_id is not None:
            clauses.append("s.class_id=%s")
            params.append(int(class_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.class_id, s.frequencia_geral, w.semana, w.matriculados, w.presentes
                FROM weekly_frequency_summary s
                LEFT JOIN weekly_frequency w
                    ON w.class_id = s.class_id AND w.ano = s.ano AND w.mes = s.mes
                WHERE {where}
                ORDER BY s.class_id ASC, w.semana ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        weeks: dict[int, list[WeeklyEntry]] = {}
        rates: dict[int, float] = {}
        for r in rows:
            cid = int(r["class_id"])
            rates[cid] = float(r["frequencia_geral"] or 0)
            bucket = weeks.setdefault(cid, [])
            if r.get("semana") is not None:
                bucket.append(
                    WeeklyEntry(
                        week=int(r["semana"]),
                        enrolled_count=int(r["matriculados"]),
                        present_count=int(r["presentes"]),
                    )
                )

        return [
            WeeklyReport(
                class_id=cid,
                year=int(year),
                month=int(month),
                weeks=tuple(entries),
                overall_rate=rates[cid],
            )
            for cid, entries in weeks.items()
        ]
