"""Domain models for daily water intake."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from uuid import UUID

from aqua_tracker.domain.errors import InvalidSizeError

ML_PER_LITER = 1000


class BottleSize(Enum):
    """Bottle sizes a user can log, valued in millilitres."""

    ML_330 = 330
    ML_500 = 500
    ML_750 = 750
    ML_1000 = 1000
    ML_1500 = 1500

    @property
    def ml(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Form value used by the counter page, e.g. ``500ml``."""
        return f"{self.value}ml"

    @property
    def column(self) -> str:
        """Store column holding the count for this size."""
        return f"count_{self.value}ml"

    @classmethod
    def from_label(cls, raw: str) -> "BottleSize":
        """Parse an exact form label, raising InvalidSizeError otherwise."""
        for size in cls:
            if size.label == raw:
                return size
        raise InvalidSizeError(raw)


def _zero_counts() -> dict[BottleSize, int]:
    return dict.fromkeys(BottleSize, 0)


@dataclass(frozen=True)
class DailyIntake:
    """Bottle counts for one user on one calendar day."""

    user_id: UUID
    day: date
    counts: Mapping[BottleSize, int] = field(default_factory=_zero_counts)

    def __post_init__(self) -> None:
        # Copy so the record cannot change through the caller's dict.
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    @classmethod
    def empty(cls, user_id: UUID, day: date) -> "DailyIntake":
        return cls(user_id=user_id, day=day)

    def count(self, size: BottleSize) -> int:
        return self.counts.get(size, 0)

    @property
    def total_ml(self) -> int:
        return sum(self.count(size) * size.ml for size in BottleSize)

    @property
    def total_liters(self) -> float:
        return self.total_ml / ML_PER_LITER


@dataclass(frozen=True)
class HistoryEntry:
    """Total volume logged on a single day."""

    day: date
    total_liters: float
