"""Domain validators. Pure validation functions."""

from passport_office.domain.validators.passport_validator import (
    NAME_PATTERN,
    normalize_name,
    validate_date_of_birth,
    validate_first_name,
    validate_last_name,
)

__all__ = [
    "NAME_PATTERN",
    "normalize_name",
    "validate_date_of_birth",
    "validate_first_name",
    "validate_last_name",
]
