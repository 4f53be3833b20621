"""In-memory passport registry. Thread-safe, one instance per process."""

import logging
import threading
from typing import Dict, Optional
from uuid import UUID

from passport_office.domain.models.passport import PassportRecord

logger = logging.getLogger(__name__)


class InMemoryPassportRegistry:
    """
    Keyed store passport_id -> PassportRecord.
    Every operation holds the registry lock; the backing dict never leaves this class.
    Removing a record (delete or clear) seals its stamp log.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: Dict[UUID, PassportRecord] = {}

    def save(self, record: PassportRecord) -> None:
        with self._lock:
            self._records[record.passport_id] = record
        logger.info("passport_saved", extra={"passport_id": str(record.passport_id)})

    def find_by_id(self, passport_id: UUID) -> Optional[PassportRecord]:
        with self._lock:
            return self._records.get(passport_id)

    def delete_by_id(self, passport_id: UUID) -> bool:
        with self._lock:
            record = self._records.pop(passport_id, None)
            if record is not None:
                record.mark_revoked()
        if record is None:
            logger.warning("passport_delete_missing", extra={"passport_id": str(passport_id)})
            return False
        logger.info("passport_deleted", extra={"passport_id": str(passport_id)})
        return True

    def append_stamp(self, passport_id: UUID, stamp: str) -> Optional[bool]:
        """Lookup and stamp under one lock. None if not stored, else whether the stamp was appended."""
        with self._lock:
            record = self._records.get(passport_id)
            if record is None:
                return None
            return record.add_stamp(stamp)

    def clear(self) -> None:
        with self._lock:
            for record in self._records.values():
                record.mark_revoked()
            self._records.clear()
        logger.info("registry_cleared")

    def count(self) -> int:
        with self._lock:
            return len(self._records)


_registry: InMemoryPassportRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> InMemoryPassportRegistry:
    """Return the process-wide registry, creating it on first call. Exactly one instance is ever created."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = InMemoryPassportRegistry()
    return _registry


def reset_registry() -> None:
    """Empty the process-wide registry (test isolation). The instance itself is kept."""
    get_registry().clear()
