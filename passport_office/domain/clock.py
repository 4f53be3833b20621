"""Source of the current date. Injected wherever "today" matters so tests can pin it."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Provides the current calendar date."""

    def today(self) -> date:
        ...


class SystemClock:
    """Wall-clock date of the local machine."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Always returns the same date."""

    current: date

    def today(self) -> date:
        return self.current
