from __future__ import annotations

from typing import Collection

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_any(values: Collection, field_name: str) -> Collection:
    if not values:
        raise ValidationError(f"Select at least one {field_name}")
    return values


def require_one_of(value: str, choices: Collection[str], field_name: str) -> str:
    if value not in choices:
        raise ValidationError(f"{field_name} must be one of: {', '.join(choices)}")
    return value


def require_mapping(value, field_name: str = "Request body") -> dict:
    if not isinstance(value, dict):
        raise ValidationError(f"{field_name} must be a JSON object")
    return value
