from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_choice(value: Optional[str], choices: dict, message: str):
    """Map a raw string onto one of ``choices`` (keyed by wire value)."""
    if not isinstance(value, str) or value not in choices:
        raise ValidationError(message)
    return choices[value]
