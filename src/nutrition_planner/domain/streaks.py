"""Domain models for daily logging streaks."""

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class StreakState:
    """Persisted streak counters for one user."""

    current_streak: int = 0
    longest_streak: int = 0
    total_days_logged: int = 0
    last_logged_date: date | None = None

    def active_streak(self, today: date) -> int:
        """Return the streak as it stands today without changing state.

        A streak whose last log is older than yesterday is reported as 0;
        the stored counters only reset when the user logs again.
        """
        if self.last_logged_date is None:
            return 0
        if self.last_logged_date < today - timedelta(days=1):
            return 0
        return self.current_streak


@dataclass(frozen=True)
class StreakUpdate:
    """Outcome of recording a log for a day."""

    state: StreakState
    changed: bool
    badge: str | None = None
