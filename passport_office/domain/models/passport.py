"""Domain model for passports. Pure business semantics, no storage or presentation."""

import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, List, Optional, Tuple
from uuid import UUID

from dateutil.relativedelta import relativedelta

from passport_office.domain.exceptions import PassportRevokedError

# Passport validity (domain constant; avoid magic numbers)
VALIDITY_YEARS = 10
STAMP_SEPARATOR = ", "
SHORT_ID_LENGTH = 8

# Held by PassportBuilder only; a record constructed without it is rejected.
_ISSUE_TOKEN = object()


def expiration_for(date_of_birth: date) -> date:
    """Expiration date for a holder born on date_of_birth. 29 February falls back to 28 February."""
    return date_of_birth + relativedelta(years=VALIDITY_YEARS)


class StampLog:
    """
    Ordered, append-only log of travel stamps. Thread-safe.
    Once sealed (on revocation) every further append is rejected.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[str] = []
        self._sealed = False

    def append(self, stamp: Optional[str]) -> bool:
        """
        Append the trimmed stamp. Returns False if it is blank after trimming.
        Raises PassportRevokedError if the log is sealed.
        """
        cleaned = stamp.strip() if stamp else ""
        with self._lock:
            if self._sealed:
                raise PassportRevokedError("cannot add a stamp to a revoked passport")
            if not cleaned:
                return False
            self._entries.append(cleaned)
            return True

    def seal(self) -> None:
        with self._lock:
            self._sealed = True

    @property
    def sealed(self) -> bool:
        with self._lock:
            return self._sealed

    def snapshot(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __str__(self) -> str:
        return STAMP_SEPARATOR.join(self.snapshot())


@dataclass(frozen=True)
class PassportRecord:
    """
    Issued passport. Identity fields are immutable; only the stamp log grows.
    Equality and hashing use name, date of birth and nationality; passport_id,
    expiration_date and stamps are ignored.
    Only PassportBuilder can construct one; direct construction raises TypeError.
    """

    passport_id: UUID = field(compare=False)
    first_name: str
    last_name: str
    date_of_birth: date
    nationality: str
    middle_name: str = ""
    _issue_token: object = field(default=None, repr=False, compare=False)
    expiration_date: date = field(init=False, compare=False)
    _stamps: StampLog = field(default_factory=StampLog, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._issue_token is not _ISSUE_TOKEN:
            raise TypeError("PassportRecord must be created through PassportBuilder")
        # Single use: copies made with dataclasses.replace() carry no token.
        object.__setattr__(self, "_issue_token", None)
        object.__setattr__(self, "expiration_date", expiration_for(self.date_of_birth))

    @property
    def stamps(self) -> Tuple[str, ...]:
        return self._stamps.snapshot()

    @property
    def stamps_display(self) -> str:
        """Stamps joined with ", " in insertion order."""
        return str(self._stamps)

    @property
    def revoked(self) -> bool:
        return self._stamps.sealed

    @property
    def short_id(self) -> str:
        return str(self.passport_id)[:SHORT_ID_LENGTH]

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    def add_stamp(self, stamp: Optional[str]) -> bool:
        """Append a travel stamp. Returns False for a blank stamp; raises PassportRevokedError once revoked."""
        return self._stamps.append(stamp)

    def mark_revoked(self) -> None:
        """Seal the stamp log. Called by the registry when the record is removed."""
        self._stamps.seal()

    def is_expired(self, today: date) -> bool:
        """True when today (a Clock reading) is strictly after the expiration date."""
        return today > self.expiration_date
