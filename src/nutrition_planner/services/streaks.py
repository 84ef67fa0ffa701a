"""Daily logging streak tracking."""

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.streaks import StreakState, StreakUpdate

_STREAK_BADGES = {7: "7-Day Streak!", 30: "30-Day Streak!", 100: "100-Day Streak!"}
_TOTAL_DAYS_BADGES = {
    10: "10 Days Logged!",
    50: "50 Days Logged!",
    100: "100 Days Logged!",
}
FIRST_LOG_BADGE = "First Log!"

_logger = logging.getLogger(__name__)


class StreakRepository(Protocol):
    """Persistence interface for streak state.

    Implementations must serialise writes per user.
    """

    def get_streak(self, user_id: UUID) -> StreakState | None:
        """Return the stored streak, if any."""

    def save_streak(self, user_id: UUID, state: StreakState) -> None:
        """Insert or replace the user's streak."""


@dataclass
class StreakService:
    """Applies streak transitions and reads streak state."""

    repository: StreakRepository

    def record_log_for_today(self, user_id: UUID, today: date) -> StreakUpdate:
        """Advance the streak for a log made on today."""
        current = self.repository.get_streak(user_id) or StreakState()
        update = advance_streak(current, today)
        if update.changed:
            self.repository.save_streak(user_id, update.state)
            _logger.info(
                "Streak advanced: user=%s current=%s longest=%s",
                user_id,
                update.state.current_streak,
                update.state.longest_streak,
            )
        return update

    def get_streak(self, user_id: UUID) -> StreakState:
        """Return the stored streak as-is."""
        return self.repository.get_streak(user_id) or StreakState()


def advance_streak(state: StreakState, today: date) -> StreakUpdate:
    """Return the state after a log on today.

    Logging again on the same day, or on a day before the last logged one,
    changes nothing. A log the day after the last one extends the streak;
    any longer gap restarts it at 1.
    """
    last = state.last_logged_date
    if last is not None and today <= last:
        return StreakUpdate(state=state, changed=False)

    if last is not None and last == today - timedelta(days=1):
        current = state.current_streak + 1
    else:
        current = 1
    new_state = replace(
        state,
        current_streak=current,
        longest_streak=max(state.longest_streak, current),
        total_days_logged=state.total_days_logged + 1,
        last_logged_date=today,
    )
    badge = FIRST_LOG_BADGE if last is None else _milestone_badge(new_state)
    return StreakUpdate(state=new_state, changed=True, badge=badge)


def _milestone_badge(state: StreakState) -> str | None:
    if state.current_streak in _STREAK_BADGES:
        return _STREAK_BADGES[state.current_streak]
    return _TOTAL_DAYS_BADGES.get(state.total_days_logged)
