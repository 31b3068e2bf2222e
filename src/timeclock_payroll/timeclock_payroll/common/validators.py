from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_fields(payload: Mapping[str, Any], *names: str) -> None:
    """Fail with one message listing every missing field."""
    missing = [n for n in names if payload.get(n) is None or str(payload.get(n)).strip() == ""]
    if missing:
        raise ValidationError(f"All fields ({', '.join(names)}) are required.")


def require_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return number


def require_non_negative(value: Any, field_name: str) -> Decimal:
    number = require_decimal(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_coordinate(value: Any, field_name: str, *, limit: int) -> Decimal:
    number = require_decimal(value, field_name)
    if not -limit <= number <= limit:
        raise ValidationError(f"{field_name} must be between -{limit} and {limit}")
    return number


def to_decimal(value: Any) -> Decimal:
    """Nullable numeric column to Decimal; missing counts as zero."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
