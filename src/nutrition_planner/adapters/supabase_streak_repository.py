"""Supabase repository for logging streaks."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.streaks import StreakState
from nutrition_planner.services.streaks import StreakRepository


@dataclass
class SupabaseStreakRepository(StreakRepository):
    """Supabase implementation for streak state, one row per user."""

    client: Client

    def get_streak(self, user_id: UUID) -> StreakState | None:
        """Return the user's streak row."""
        response = (
            self.client.table("user_streaks")
            .select(
                "current_streak, longest_streak, total_days_logged, last_logged_date"
            )
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        last_logged = row.get("last_logged_date")
        return StreakState(
            current_streak=int(row.get("current_streak") or 0),
            longest_streak=int(row.get("longest_streak") or 0),
            total_days_logged=int(row.get("total_days_logged") or 0),
            last_logged_date=date.fromisoformat(str(last_logged))
            if last_logged
            else None,
        )

    def save_streak(self, user_id: UUID, state: StreakState) -> None:
        """Upsert the user's streak row."""
        self.client.table("user_streaks").upsert(
            {
                "user_id": str(user_id),
                "current_streak": state.current_streak,
                "longest_streak": state.longest_streak,
                "total_days_logged": state.total_days_logged,
                "last_logged_date": state.last_logged_date.isoformat()
                if state.last_logged_date
                else None,
            },
            on_conflict="user_id",
        ).execute()
