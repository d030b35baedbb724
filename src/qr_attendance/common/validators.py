from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_HH_MM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_exact_length(value: Optional[str], field_name: str, length: int) -> str:
    if value is None or len(value) != length:
        raise ValidationError(f"{field_name} must be exactly {length} characters")
    return value


def is_iso_date(value: str) -> bool:
    """YYYY-MM-DD naming a real calendar day."""
    if not _ISO_DATE.match(value or ""):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def is_hh_mm(value: str) -> bool:
    return bool(_HH_MM.match(value or ""))
