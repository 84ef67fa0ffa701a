"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.weight import WeightLogEntry
from nutrition_planner.services.weight import WeightLogRepository


@dataclass
class SupabaseWeightLogRepository(WeightLogRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def create_weight_log(
        self, user_id: UUID, weight: float, logged_at: datetime, note: str | None
    ) -> WeightLogEntry:
        """Insert a weight log row and return it."""
        response = (
            self.client.table("weight_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "weight": weight,
                    "logged_at": logged_at.isoformat(),
                    "note": note,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight log")
        return _parse_row(response.data[0])

    def list_weight_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightLogEntry]:
        """Return weight logs in the closed time range, newest first."""
        response = (
            self.client.table("weight_logs")
            .select("id, user_id, weight, logged_at, note")
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lte("logged_at", end.isoformat())
            .order("logged_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def latest_weight_log(self, user_id: UUID) -> WeightLogEntry | None:
        """Return the user's most recent weight log."""
        response = (
            self.client.table("weight_logs")
            .select("id, user_id, weight, logged_at, note")
            .eq("user_id", str(user_id))
            .order("logged_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> WeightLogEntry:
    return WeightLogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        weight=float(row.get("weight") or 0.0),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        note=row.get("note"),
    )
