"""Validators for passport fields. Pure functions, no infrastructure or registry access."""

import re
from datetime import date

from passport_office.domain.exceptions import InvalidPassportDataError

# Letters, periods and hyphens only
NAME_PATTERN = re.compile(r"[A-Za-z.\-]+")


def normalize_name(name: str) -> str:
    """Trim and capitalise: first character upper, the rest lower."""
    return name.strip().capitalize()


def _validate_name(name: str, label: str) -> None:
    cleaned = name.strip()
    if not cleaned or NAME_PATTERN.fullmatch(cleaned) is None:
        raise InvalidPassportDataError(f"invalid {label} format")


def validate_first_name(first_name: str) -> None:
    """Raises InvalidPassportDataError if first_name is blank or has characters outside the name alphabet."""
    _validate_name(first_name, "first name")


def validate_last_name(last_name: str) -> None:
    """Raises InvalidPassportDataError if last_name is blank or has characters outside the name alphabet."""
    _validate_name(last_name, "last name")


def validate_date_of_birth(date_of_birth: date, today: date) -> None:
    """Enforce temporal rule: birth date may be today but not after. Raises InvalidPassportDataError."""
    if date_of_birth > today:
        raise InvalidPassportDataError("date of birth cannot be in the future")
