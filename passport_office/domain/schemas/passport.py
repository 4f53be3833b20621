"""Pydantic schema for presenting a passport. Read-only, no registry or infrastructure."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from passport_office.domain.models.passport import SHORT_ID_LENGTH, PassportRecord

DISPLAY_DATE_FORMAT = "%m/%d/%Y"


class PassportView(BaseModel):
    """Human-readable view of a passport for logs and listings. Dates are MM/DD/YYYY."""

    model_config = ConfigDict(frozen=True)

    passport_id: UUID
    short_id: str = Field(..., min_length=SHORT_ID_LENGTH, max_length=SHORT_ID_LENGTH)
    full_name: str = Field(..., min_length=1)
    date_of_birth: str
    expiration_date: str
    nationality: str
    stamps: str = ""
    expired: bool

    @classmethod
    def from_record(cls, record: PassportRecord, today: date) -> "PassportView":
        """Snapshot a record. The expired flag is evaluated against today."""
        return cls(
            passport_id=record.passport_id,
            short_id=record.short_id,
            full_name=record.full_name,
            date_of_birth=record.date_of_birth.strftime(DISPLAY_DATE_FORMAT),
            expiration_date=record.expiration_date.strftime(DISPLAY_DATE_FORMAT),
            nationality=record.nationality,
            stamps=record.stamps_display,
            expired=record.is_expired(today),
        )

    def render(self) -> str:
        return (
            f"Passport [ID={self.short_id}, Name={self.full_name}, DOB={self.date_of_birth}, "
            f"Nationality={self.nationality}, Expires={self.expiration_date}, "
            f"Expired={str(self.expired).lower()}]"
        )
