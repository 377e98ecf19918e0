"""Stateless tools: calorie estimate and set duration estimate."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.exercise import Exercise
from app.services.calorie_estimation import (
    DEFAULT_REST_SECONDS,
    calculate_calories,
    estimate_duration_from_set,
)

router = APIRouter()


# ---- Calorie estimate (looks up MET, stores nothing) ----


class CalorieEstimateRequest(BaseModel):
    exercise_id: uuid.UUID
    body_weight_kg: float = Field(gt=0)
    duration_minutes: float = Field(ge=0)
    weight_kg: float = Field(default=0.0, ge=0, description="External load in kg")
    incline_pct: float = Field(default=0.0, ge=0, description="Treadmill / machine incline %")
    speed_kmh: float = Field(default=0.0, ge=0, description="> 0 switches to the ACSM equation")


class CalorieEstimateResponse(BaseModel):
    exercise_id: uuid.UUID
    body_weight_kg: float
    duration_minutes: float
    estimated_calories: float


@router.post("/calorie-estimate", response_model=CalorieEstimateResponse)
async def calorie_estimate(
    payload: CalorieEstimateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Estimate calories for an exercise without logging a set."""
    exercise = await db.get(Exercise, payload.exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    calories = calculate_calories(
        exercise.met,
        payload.body_weight_kg,
        payload.duration_minutes,
        payload.weight_kg,
        payload.incline_pct,
        payload.speed_kmh,
    )
    return CalorieEstimateResponse(
        exercise_id=exercise.id,
        body_weight_kg=payload.body_weight_kg,
        duration_minutes=payload.duration_minutes,
        estimated_calories=calories,
    )


# ---- Set duration estimate (pure logic, no DB) ----


class SetDurationResponse(BaseModel):
    reps: int
    rest_seconds: float
    duration_minutes: float


@router.get("/set-duration", response_model=SetDurationResponse)
async def set_duration(reps: int = 0, rest_seconds: float = DEFAULT_REST_SECONDS):
    """Estimated set duration in minutes: 4 s per rep plus rest."""
    if reps < 0 or rest_seconds < 0:
        raise HTTPException(status_code=400, detail="reps and rest_seconds must be >= 0")
    return SetDurationResponse(
        reps=reps,
        rest_seconds=rest_seconds,
        duration_minutes=estimate_duration_from_set(reps, rest_seconds),
    )
