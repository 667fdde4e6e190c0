"""Supabase repository for daily water counts."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from aqua_tracker.domain.errors import StoreFailureError
from aqua_tracker.domain.intake import BottleSize, DailyIntake
from aqua_tracker.services.intake import IntakeRepository

INCREMENT_FUNCTION = "increment_water_count"
COUNT_COLUMNS = ", ".join(size.column for size in BottleSize)

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIntakeRepository(IntakeRepository):
    """Supabase implementation for the intake ledger.

    Increments go through a Postgres function doing
    ``INSERT ... ON CONFLICT (user_id, day) DO UPDATE``, so concurrent
    bottles for the same day never lose an update.
    """

    client: Client

    def increment(self, user_id: UUID, day: date, size: BottleSize) -> DailyIntake:
        """Add one bottle of ``size`` and return the day's counts."""
        try:
            response = self.client.rpc(
                INCREMENT_FUNCTION,
                {
                    "p_user_id": str(user_id),
                    "p_day": day.isoformat(),
                    "p_size_ml": size.ml,
                },
            ).execute()
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            _logger.exception(
                "Increment failed", extra={"user_id": str(user_id), "size": size.ml}
            )
            raise StoreFailureError from exc
        rows = response.data if isinstance(response.data, list) else [response.data]
        if not rows or not rows[0]:
            _logger.error("Increment returned no row")
            raise StoreFailureError
        return _parse_row(rows[0], user_id)

    def get_for_day(self, user_id: UUID, day: date) -> DailyIntake | None:
        """Return the stored counts for a day."""
        try:
            response = (
                self.client.table("water_counts")
                .select(f"day, {COUNT_COLUMNS}")
                .eq("user_id", str(user_id))
                .eq("day", day.isoformat())
                .limit(1)
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            _logger.exception("Daily count lookup failed")
            raise StoreFailureError from exc
        if not response.data:
            return None
        return _parse_row(response.data[0], user_id)

    def list_days(self, user_id: UUID) -> list[DailyIntake]:
        """Return all stored days for a user, newest first."""
        try:
            response = (
                self.client.table("water_counts")
                .select(f"day, {COUNT_COLUMNS}")
                .eq("user_id", str(user_id))
                .order("day", desc=True)
                .execute()
            )
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            _logger.exception("History lookup failed")
            raise StoreFailureError from exc
        return [_parse_row(row, user_id) for row in response.data or []]


def _parse_row(row: dict[str, object], user_id: UUID) -> DailyIntake:
    return DailyIntake(
        user_id=user_id,
        day=date.fromisoformat(str(row["day"])),
        counts={size: int(row.get(size.column) or 0) for size in BottleSize},
    )
