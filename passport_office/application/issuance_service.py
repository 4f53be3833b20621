"""Passport issuance service. Orchestrates builder and registry; the only sanctioned entry point."""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from passport_office.application.passport_repository import PassportRepository
from passport_office.domain.builder import PassportBuilder
from passport_office.domain.clock import Clock
from passport_office.domain.exceptions import PassportRevokedError
from passport_office.domain.models.passport import PassportRecord
from passport_office.domain.schemas.passport import PassportView


class PassportIssuanceService:
    """
    Application-layer orchestration only. No storage details, no presentation.
    Failure policy: validation errors end at issue() and come back as None;
    unknown or revoked ids come back as None / False, never as exceptions.
    """

    def __init__(
        self,
        repository: PassportRepository,
        clock: Clock,
        logger: logging.Logger,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._logger = logger

    def issue(
        self,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        nationality: str,
        middle_name: Optional[str] = None,
    ) -> Optional[PassportRecord]:
        """
        Build and store a new passport. Returns the record, or None if any field is invalid.
        Nothing is stored on failure.
        """
        result = PassportBuilder(
            first_name,
            last_name,
            date_of_birth,
            nationality,
            middle_name=middle_name,
            clock=self._clock,
        ).try_build()
        if result.record is None:
            self._logger.error(
                "passport_issue_failed",
                extra={"reason": result.reason, "nationality": nationality},
            )
            return None

        record = result.record
        self._repository.save(record)
        self._logger.info(
            "passport_issued",
            extra={"passport_id": str(record.passport_id), "nationality": record.nationality},
        )
        return record

    def retrieve(self, passport_id: UUID) -> Optional[PassportRecord]:
        """Return the stored passport, or None."""
        return self._repository.find_by_id(passport_id)

    def revoke(self, passport_id: UUID) -> bool:
        """Remove the passport from the registry. False if it was not there."""
        revoked = self._repository.delete_by_id(passport_id)
        if revoked:
            self._logger.info("passport_revoked", extra={"passport_id": str(passport_id)})
        return revoked

    def add_stamp(self, passport_id: UUID, location_name: str) -> bool:
        """
        Append a travel stamp to a stored passport in place; the record is not re-saved.
        True whenever the passport is stored (a blank stamp is ignored); False when it is unknown or revoked.
        """
        try:
            appended = self._repository.append_stamp(passport_id, location_name)
        except PassportRevokedError as e:
            self._logger.warning(
                "passport_stamp_rejected",
                extra={"passport_id": str(passport_id), "reason": e.message},
            )
            return False

        if appended is None:
            self._logger.warning("passport_stamp_not_found", extra={"passport_id": str(passport_id)})
            return False
        if not appended:
            self._logger.warning("passport_stamp_blank", extra={"passport_id": str(passport_id)})
            return True

        self._logger.info(
            "passport_stamped",
            extra={"passport_id": str(passport_id), "stamp": location_name.strip()},
        )
        return True

    def describe(self, passport_id: UUID) -> Optional[PassportView]:
        """Presentation view of a stored passport, expiry judged against the service clock."""
        record = self._repository.find_by_id(passport_id)
        if record is None:
            return None
        return PassportView.from_record(record, self._clock.today())
