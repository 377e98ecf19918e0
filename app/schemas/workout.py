"""WorkoutSession and WorkoutSet schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WorkoutSetCreate(BaseModel):
    """Raw set input. For cardio exercises weight_kg is the incline / resistance %."""

    exercise_id: UUID
    reps: int = Field(default=0, ge=0)
    weight_kg: float = Field(default=0.0, ge=0)
    speed_kmh: float | None = Field(default=None, ge=0)
    duration_minutes: float | None = Field(default=None, ge=0)
    rest_seconds: float | None = Field(default=None, ge=0)


class WorkoutSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_id: UUID
    exercise_name: str | None = None
    exercise_name_ja: str | None = None
    set_number: int
    reps: int
    weight_kg: float
    duration_minutes: float
    calories_burned: float
    speed_kmh: float = 0.0


class WorkoutSessionCreate(BaseModel):
    session_date: date
    body_weight_kg: float = Field(..., gt=0)
    note: str | None = None


class WorkoutSessionUpdate(BaseModel):
    note: str | None = None
    body_weight_kg: float | None = Field(default=None, gt=0)


class WorkoutSessionRead(BaseModel):
    """Session with its sets and totals recomputed from those sets."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    session_date: date
    body_weight_kg: float
    note: str | None = None
    sets: list[WorkoutSetRead] = []
    total_calories_burned: float = 0.0
    total_sets: int = 0
    total_volume: float = 0.0
    total_duration_minutes: float = 0.0
    created_at: datetime
    updated_at: datetime
