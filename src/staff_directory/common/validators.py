from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} cannot be empty.")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters.")
    return value


def parse_row_index(value: object) -> int:
    """Spreadsheet row positions arrive as strings from forms and JSON."""
    try:
        row_index = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError("Invalid staff row.")
    if row_index < 1:
        raise ValidationError("Invalid staff row.")
    return row_index
