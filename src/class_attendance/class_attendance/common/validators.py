from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: str, field_name: str = "Email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address")
    return value.lower()


def optional_email(value: Optional[str], field_name: str = "Email") -> str:
    """Blank stays blank; anything else must look like an email."""
    if not value or not value.strip():
        return ""
    return require_email(value, field_name)


def parse_id(value: object, field_name: str) -> int:
    try:
        parsed = int(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not valid")
    if parsed <= 0:
        raise ValidationError(f"{field_name} is not valid")
    return parsed
