"""Process wiring: the single creation point for the registry and the issuance service."""

import logging

from passport_office.application.issuance_service import PassportIssuanceService
from passport_office.config.logging import configure_logging
from passport_office.config.settings import get_settings
from passport_office.domain.clock import Clock, SystemClock
from passport_office.infrastructure.memory.passport_registry import (
    InMemoryPassportRegistry,
    get_registry,
)


def get_clock() -> Clock:
    """Return the wall clock."""
    return SystemClock()


def get_issuance_service(
    registry: InMemoryPassportRegistry | None = None,
    clock: Clock | None = None,
) -> PassportIssuanceService:
    """Build PassportIssuanceService with the process-wide registry, wall clock and logger unless overridden."""
    configure_logging(get_settings().log_level)
    return PassportIssuanceService(
        repository=registry if registry is not None else get_registry(),
        clock=clock if clock is not None else get_clock(),
        logger=logging.getLogger("passport_office.issuance"),
    )
