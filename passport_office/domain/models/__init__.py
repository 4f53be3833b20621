"""Domain models. Pure business entities."""

from passport_office.domain.models.passport import (
    STAMP_SEPARATOR,
    VALIDITY_YEARS,
    PassportRecord,
    StampLog,
    expiration_for,
)

__all__ = [
    "PassportRecord",
    "STAMP_SEPARATOR",
    "StampLog",
    "VALIDITY_YEARS",
    "expiration_for",
]
