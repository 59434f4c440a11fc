from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_positive_id(value, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} inválido") from None
    if parsed <= 0:
        raise ValidationError(f"{field_name} inválido")
    return parsed


def require_range(value, field_name: str, low: int, high: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} inválido") from None
    if parsed < low or parsed > high:
        raise ValidationError(f"{field_name} deve estar entre {low} e {high}")
    return parsed


def clean_present_count(value) -> Optional[int]:
    """Normalize a weekly "presentes" form value.

    Blank or None means the week was not reported. Numbers below zero are
    clamped to 0.
    """

    if value is None:
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError("Nº de presentes inválido")
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Nº de presentes inválido") from None
    return max(0, parsed)
