# Application layer: services that orchestrate domain and infrastructure.

from passport_office.application.issuance_service import PassportIssuanceService
from passport_office.application.passport_repository import PassportRepository

__all__ = [
    "PassportIssuanceService",
    "PassportRepository",
]
