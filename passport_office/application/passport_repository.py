"""Passport repository protocol. Application layer depends on this; infrastructure implements it."""

from typing import Optional, Protocol
from uuid import UUID

from passport_office.domain.models.passport import PassportRecord


class PassportRepository(Protocol):
    """Keyed store of issued passports. Implementations must be safe under concurrent use."""

    def save(self, record: PassportRecord) -> None:
        """Insert or overwrite by passport_id. No validation."""
        ...

    def find_by_id(self, passport_id: UUID) -> Optional[PassportRecord]:
        """Return the record, or None if not stored."""
        ...

    def delete_by_id(self, passport_id: UUID) -> bool:
        """Remove the record. True if one existed."""
        ...

    def append_stamp(self, passport_id: UUID, stamp: str) -> Optional[bool]:
        """Stamp a stored record atomically. None if not stored, else whether the stamp was appended."""
        ...

    def clear(self) -> None:
        ...

    def count(self) -> int:
        ...
