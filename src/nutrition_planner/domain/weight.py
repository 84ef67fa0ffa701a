"""Domain models for weight tracking."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class TrendDirection(str, Enum):
    """Direction of recent weight change."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class WeightLogEntry:
    """A single weigh-in."""

    id: UUID
    user_id: UUID
    weight: float
    logged_at: datetime
    note: str | None = None


@dataclass(frozen=True)
class WeightTrend:
    """Moving averages and direction over a lookback window."""

    current: float | None
    average_7_day: float | None
    average_30_day: float | None
    trend: TrendDirection
    change: float | None
