from __future__ import annotations

from enum import Enum
from typing import Optional


class Weekday(str, Enum):
    """Dia da semana de uma turma (Domingo = 0)."""

    DOMINGO = "Domingo"
    SEGUNDA = "Segunda-feira"
    TERCA = "Terça-feira"
    QUARTA = "Quarta-feira"
    QUINTA = "Quinta-feira"
    SEXTA = "Sexta-feira"
    SABADO = "Sábado"

    @property
    def day_number(self) -> int:
        return _WEEKDAY_ORDER.index(self)

    @property
    def short_label(self) -> str:
        return self.value[:3]

    @classmethod
    def parse(cls, value) -> Optional["Weekday"]:
        """Return the matching weekday, or None for unknown/missing names."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


_WEEKDAY_ORDER = list(Weekday)


class AttendanceStatus(str, Enum):
    """Estado de presença registrado por aluno e data."""

    PRESENT = "present"
    ABSENT = "absent"


class ClassStatus(str, Enum):
    ACTIVE = "ativa"
    FINISHED = "finalizada"


class FrequencyBand(str, Enum):
    """Faixa usada para colorir percentuais nas listagens."""

    GOOD = "good"
    OK = "ok"
    WARNING = "warning"
    LOW = "low"
