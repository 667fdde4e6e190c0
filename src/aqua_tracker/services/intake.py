"""Daily water intake ledger."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from aqua_tracker.domain.intake import BottleSize, DailyIntake, HistoryEntry

_logger = logging.getLogger(__name__)


class IntakeRepository(Protocol):
    """Persistence interface for per-day bottle counts."""

    def increment(self, user_id: UUID, day: date, size: BottleSize) -> DailyIntake:
        """Atomically add one bottle, creating the day's row if needed."""

    def get_for_day(self, user_id: UUID, day: date) -> DailyIntake | None:
        """Return the stored record for a day, if any."""

    def list_days(self, user_id: UUID) -> list[DailyIntake]:
        """Return every stored day for a user, newest first."""


@dataclass
class IntakeService:
    """Service for logging bottles and reading daily totals."""

    repository: IntakeRepository
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return the current calendar day in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def increment(
        self, user_id: UUID, day: date, size: BottleSize | str
    ) -> DailyIntake:
        """Log one bottle of ``size`` for the day and return the new counts."""
        bottle = size if isinstance(size, BottleSize) else BottleSize.from_label(size)
        record = self.repository.increment(user_id, day, bottle)
        _logger.info(
            "Logged bottle: user_id=%s day=%s size=%s total_l=%.2f",
            user_id,
            day.isoformat(),
            bottle.label,
            record.total_liters,
        )
        return record

    def increment_today(self, user_id: UUID, size: BottleSize | str) -> DailyIntake:
        return self.increment(user_id, self.today(), size)

    def get_for_day(self, user_id: UUID, day: date) -> DailyIntake:
        """Return the day's counts, all zero when nothing was logged."""
        record = self.repository.get_for_day(user_id, day)
        return record or DailyIntake.empty(user_id, day)

    def get_today(self, user_id: UUID) -> DailyIntake:
        return self.get_for_day(user_id, self.today())

    def get_history(self, user_id: UUID) -> list[HistoryEntry]:
        """Return daily totals, most recent day first."""
        return [
            HistoryEntry(day=record.day, total_liters=record.total_liters)
            for record in self.repository.list_days(user_id)
        ]
