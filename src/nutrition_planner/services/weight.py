"""Weight logging and trend analysis."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.weight import (
    TrendDirection,
    WeightLogEntry,
    WeightTrend,
)
from nutrition_planner.services.calculator import round_half_up
from nutrition_planner.services.profiles import ProfileRepository

DEFAULT_LOOKBACK_DAYS = 30
DEFAULT_STABLE_THRESHOLD_KG = 0.5
MIN_TREND_ENTRIES = 2

_logger = logging.getLogger(__name__)


class WeightLogRepository(Protocol):
    """Persistence interface for weight logs."""

    def create_weight_log(
        self, user_id: UUID, weight: float, logged_at: datetime, note: str | None
    ) -> WeightLogEntry:
        """Insert a weight log and return it."""

    def list_weight_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightLogEntry]:
        """Return weight logs with start <= logged_at <= end."""

    def latest_weight_log(self, user_id: UUID) -> WeightLogEntry | None:
        """Return the most recent weigh-in by logged_at, if any."""


@dataclass
class WeightService:
    """Records weigh-ins and reports the trend."""

    repository: WeightLogRepository
    profile_repository: ProfileRepository
    lookback_days: int = DEFAULT_LOOKBACK_DAYS
    stable_threshold_kg: float = DEFAULT_STABLE_THRESHOLD_KG

    def log_weight(
        self,
        user_id: UUID,
        weight: float,
        logged_at: datetime,
        note: str | None = None,
    ) -> WeightLogEntry:
        """Store a weigh-in; the newest one becomes the profile's weight."""
        latest = self.repository.latest_weight_log(user_id)
        entry = self.repository.create_weight_log(user_id, weight, logged_at, note)
        if latest is None or logged_at >= latest.logged_at:
            self.profile_repository.update_current_weight(user_id, weight)
        _logger.info("Weight logged: user=%s weight=%s", user_id, weight)
        return entry

    def get_trend(
        self, user_id: UUID, now: datetime, days: int | None = None
    ) -> WeightTrend:
        """Return the weight trend over the lookback window ending at now."""
        lookback = days or self.lookback_days
        entries = self.repository.list_weight_logs(
            user_id, now - timedelta(days=lookback), now
        )
        return analyze_weight_trend(
            entries,
            now,
            days=lookback,
            stable_threshold_kg=self.stable_threshold_kg,
        )


def analyze_weight_trend(
    entries: list[WeightLogEntry],
    now: datetime,
    *,
    days: int = DEFAULT_LOOKBACK_DAYS,
    stable_threshold_kg: float = DEFAULT_STABLE_THRESHOLD_KG,
) -> WeightTrend:
    """Compare the latest weigh-in with the recent average.

    The baseline is the 7-day average when it covers at least two weigh-ins,
    otherwise the 30-day average, otherwise the whole window. A change
    smaller than the threshold is stable. Fewer than two weigh-ins is
    insufficient data.
    """
    window = sorted(
        (
            entry
            for entry in entries
            if now - timedelta(days=days) <= entry.logged_at <= now
        ),
        key=lambda entry: entry.logged_at,
        reverse=True,
    )
    if not window:
        return WeightTrend(
            current=None,
            average_7_day=None,
            average_30_day=None,
            trend=TrendDirection.INSUFFICIENT_DATA,
            change=None,
        )

    current = window[0].weight
    last_7 = _since(window, now - timedelta(days=7))
    last_30 = _since(window, now - timedelta(days=30))
    average_7_day = _mean(last_7)
    average_30_day = _mean(last_30)

    trend = TrendDirection.INSUFFICIENT_DATA
    change = None
    if len(window) >= MIN_TREND_ENTRIES:
        baseline_entries = next(
            group
            for group in (last_7, last_30, window)
            if len(group) >= MIN_TREND_ENTRIES
        )
        change = _round_tenth(current - _mean(baseline_entries))
        if abs(change) < stable_threshold_kg:
            trend = TrendDirection.STABLE
        elif change > 0:
            trend = TrendDirection.UP
        else:
            trend = TrendDirection.DOWN

    return WeightTrend(
        current=_round_tenth(current),
        average_7_day=_round_tenth(average_7_day),
        average_30_day=_round_tenth(average_30_day),
        trend=trend,
        change=change,
    )


def _since(entries: list[WeightLogEntry], start: datetime) -> list[WeightLogEntry]:
    return [entry for entry in entries if entry.logged_at >= start]


def _mean(entries: list[WeightLogEntry]) -> float | None:
    if not entries:
        return None
    return sum(entry.weight for entry in entries) / len(entries)


def _round_tenth(value: float | None) -> float | None:
    if value is None:
        return None
    return round_half_up(value * 10) / 10
