"""Domain layer: models, builder, schemas, validators, exceptions. Pure business logic only."""

from passport_office.domain.builder import BuildResult, PassportBuilder
from passport_office.domain.clock import Clock, FixedClock, SystemClock
from passport_office.domain.exceptions import (
    DomainError,
    DomainValidationError,
    InvalidPassportDataError,
    PassportRevokedError,
)
from passport_office.domain.models import PassportRecord, StampLog
from passport_office.domain.schemas import PassportView
from passport_office.domain.validators import (
    normalize_name,
    validate_date_of_birth,
    validate_first_name,
    validate_last_name,
)

__all__ = [
    "BuildResult",
    "Clock",
    "DomainError",
    "DomainValidationError",
    "FixedClock",
    "InvalidPassportDataError",
    "PassportBuilder",
    "PassportRecord",
    "PassportRevokedError",
    "PassportView",
    "StampLog",
    "SystemClock",
    "normalize_name",
    "validate_date_of_birth",
    "validate_first_name",
    "validate_last_name",
]
