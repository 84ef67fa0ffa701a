"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.profile import UserProfileRecord
from nutrition_planner.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfileRecord | None:
        """Return the physical data stored on the user row."""
        response = (
            self.client.table("users")
            .select("id, age, gender, weight, height, activity_level, fitness_goal")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfileRecord(
            user_id=UUID(str(row["id"])),
            age=row.get("age"),
            gender=row.get("gender"),
            weight=row.get("weight"),
            height=row.get("height"),
            activity_level=row.get("activity_level"),
            fitness_goal=row.get("fitness_goal"),
        )

    def update_current_weight(self, user_id: UUID, weight: float) -> None:
        """Update the user's current weight."""
        self.client.table("users").update({"weight": weight}).eq(
            "id", str(user_id)
        ).execute()
