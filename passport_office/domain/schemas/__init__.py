"""Domain schemas. Presentation and serialization."""

from passport_office.domain.schemas.passport import DISPLAY_DATE_FORMAT, PassportView

__all__ = [
    "DISPLAY_DATE_FORMAT",
    "PassportView",
]
