from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import date_key, parse_date_key


def clean_text(value: str | None) -> str:
    return (value or "").strip()


def require_term_id(value) -> int:
    try:
        term_id = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid term '{value}'")
    if term_id <= 0:
        raise ValidationError(f"Invalid term '{value}'")
    return term_id


def require_date_key(value: str | None) -> str:
    """Validate and normalise a YYYY-MM-DD key."""
    return date_key(parse_date_key(clean_text(value)))
