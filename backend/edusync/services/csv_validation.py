"""Field-level parsing and validation for bulk-import CSV rows.

Every helper either returns the parsed value or raises RowValidationError
with a message that names the offending field.
"""
import enum
from datetime import date
from typing import TypeVar

from email_validator import EmailNotValidError, validate_email as _check_email

E = TypeVar("E", bound=enum.Enum)


class RowValidationError(ValueError):
    """A single CSV field is missing or malformed."""


def field_at(row: list[str], index: int) -> str:
    """Positional access that treats short rows as blank trailing fields."""
    return row[index] if index < len(row) else ""


def validate_string(value: str | None, field_name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise RowValidationError(f"{field_name} is required")
    return value


def optional_string(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


def validate_email(value: str | None, field_name: str = "email") -> str:
    value = validate_string(value, field_name)
    try:
        return _check_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        raise RowValidationError(f"Invalid {field_name}: '{value}'")


def parse_date(value: str | None, field_name: str) -> date:
    value = validate_string(value, field_name)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise RowValidationError(
            f"Invalid date for {field_name}: '{value}'. Expected format YYYY-MM-DD"
        )


def parse_int(value: str | None, field_name: str) -> int:
    value = validate_string(value, field_name)
    try:
        return int(value)
    except ValueError:
        raise RowValidationError(f"{field_name} must be an integer: '{value}'")


def parse_optional_int(value: str | None, field_name: str, minimum: int | None = None) -> int | None:
    if not (value or "").strip():
        return None
    parsed = parse_int(value, field_name)
    if minimum is not None and parsed < minimum:
        raise RowValidationError(f"{field_name} must be at least {minimum}: '{parsed}'")
    return parsed


def parse_enum(enum_cls: type[E], value: str | None, field_name: str) -> E:
    """Case-insensitive lookup of an enum member by name."""
    value = validate_string(value, field_name)
    try:
        return enum_cls[value.upper()]
    except KeyError:
        allowed = ", ".join(member.name for member in enum_cls)
        raise RowValidationError(
            f"Invalid value for {field_name}: '{value}'. Allowed values: {allowed}"
        )
