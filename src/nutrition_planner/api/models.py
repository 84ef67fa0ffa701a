"""Pydantic models for API request payloads."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from nutrition_planner.domain.profile import (
    ActivityLevel,
    FitnessGoal,
    Gender,
    PhysicalProfile,
)


class PhysicalProfilePayload(BaseModel):
    """Physical data for an ad-hoc plan calculation."""

    age: int = Field(ge=0)
    gender: Literal["male", "female"]
    weight: float = Field(gt=0)
    height: float = Field(gt=0)
    activity_level: str
    fitness_goal: str

    def to_domain(self) -> PhysicalProfile:
        return PhysicalProfile(
            age=self.age,
            gender=Gender(self.gender),
            weight=self.weight,
            height=self.height,
            activity_level=ActivityLevel.parse(self.activity_level),
            fitness_goal=FitnessGoal.parse(self.fitness_goal),
        )


class LogFoodRequest(BaseModel):
    """Log servings of a catalog food."""

    food_id: UUID
    servings: float = Field(default=1.0, gt=0)
    meal_type: str = "snack"
    logged_at: datetime | None = None


class LogPresetRequest(BaseModel):
    """Log every item of a meal preset."""

    meal_type: str = "snack"
    logged_at: datetime | None = None


class UpdateLogRequest(BaseModel):
    """Partial update of a food log."""

    servings: float | None = Field(default=None, gt=0)
    meal_type: str | None = None
    logged_at: datetime | None = None


class LogWeightRequest(BaseModel):
    """Record a weigh-in."""

    weight: float = Field(gt=0)
    logged_at: datetime | None = None
    note: str | None = None


class StepsRequest(BaseModel):
    """Step count to convert into an energy estimate."""

    steps: int = Field(ge=0)
    weight_kg: float = Field(gt=0)
