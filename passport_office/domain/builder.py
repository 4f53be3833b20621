"""Validated construction of PassportRecord. All-or-nothing: a record exists only if every rule passes."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional
from uuid import UUID, uuid4

from passport_office.domain.clock import Clock, SystemClock
from passport_office.domain.exceptions import InvalidPassportDataError
from passport_office.domain.models.passport import _ISSUE_TOKEN, PassportRecord
from passport_office.domain.validators.passport_validator import (
    normalize_name,
    validate_date_of_birth,
    validate_first_name,
    validate_last_name,
)


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a build: exactly one of record or error is set."""

    record: Optional[PassportRecord] = None
    error: Optional[InvalidPassportDataError] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @property
    def reason(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


class PassportBuilder:
    """
    Collects the holder's details and builds a validated PassportRecord.

    Required: first name, last name, date of birth, nationality. Middle name is optional.
    Validation is fail-fast in this order: first name, last name, date of birth.
    The date-of-birth check uses the injected clock at build time.
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        nationality: str,
        *,
        middle_name: Optional[str] = None,
        clock: Optional[Clock] = None,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        for label, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("date_of_birth", date_of_birth),
            ("nationality", nationality),
        ):
            if value is None:
                raise TypeError(f"{label} cannot be None")
        self._first_name = first_name
        self._last_name = last_name
        self._date_of_birth = date_of_birth
        self._nationality = nationality
        self._middle_name = middle_name or ""
        self._clock = clock or SystemClock()
        self._id_factory = id_factory

    def with_middle_name(self, middle_name: Optional[str]) -> "PassportBuilder":
        self._middle_name = middle_name or ""
        return self

    def build(self) -> PassportRecord:
        """Validate and construct. Raises InvalidPassportDataError on the first violated rule."""
        validate_first_name(self._first_name)
        validate_last_name(self._last_name)
        validate_date_of_birth(self._date_of_birth, self._clock.today())

        middle = self._middle_name.strip()
        return PassportRecord(
            passport_id=self._id_factory(),
            first_name=normalize_name(self._first_name),
            last_name=normalize_name(self._last_name),
            middle_name=normalize_name(middle) if middle else "",
            date_of_birth=self._date_of_birth,
            nationality=self._nationality,
            _issue_token=_ISSUE_TOKEN,
        )

    def try_build(self) -> BuildResult:
        """Like build(), but reports a validation failure in the result instead of raising."""
        try:
            return BuildResult(record=self.build())
        except InvalidPassportDataError as e:
            return BuildResult(error=e)
