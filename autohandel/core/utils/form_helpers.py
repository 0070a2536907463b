"""Helpers for turning submitted form values into record fields."""
from typing import Any, Dict, Iterable, Optional

from core.exceptions import ValidationError

_CHECKED_VALUES = (True, 1, 'on', 'true', 'True', '1', 'yes')


def is_checked(value: Any) -> bool:
    """Checkbox semantics: browsers send 'on', JSON clients send true."""
    return value in _CHECKED_VALUES


def parse_int(value: Any) -> Optional[int]:
    """Parse an integer field; empty or invalid input becomes None."""
    if value is None or value == '':
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def parse_float(value: Any) -> Optional[float]:
    """Parse a decimal field; empty or invalid input becomes None."""
    if value is None or value == '':
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_fields(data: Dict[str, Any], fields: Iterable[str], partial: bool = False):
    """Raise ValidationError naming every required field left empty.

    With ``partial=True`` only fields present in ``data`` are checked (edits).
    """
    missing = []
    for field in fields:
        if partial and field not in data:
            continue
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    if missing:
        raise ValidationError(
            f'Vul alle verplichte velden in: {", ".join(missing)}', fields=missing
        )


def text_matches(record: Dict[str, Any], query: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match of ``query`` against the given fields."""
    needle = query.lower()
    for field in fields:
        value = record.get(field)
        if value is not None and needle in str(value).lower():
            return True
    return False
