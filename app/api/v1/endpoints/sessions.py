"""Workout session endpoints: CRUD plus adding / removing sets."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.constants import DEFAULT_SESSION_PAGE_SIZE
from app.core.errors import InvalidValueError, NotFoundError
from app.db.session import get_db
from app.models.workout import WorkoutSession, WorkoutSet
from app.schemas.workout import (
    WorkoutSessionCreate,
    WorkoutSessionRead,
    WorkoutSessionUpdate,
    WorkoutSetCreate,
    WorkoutSetRead,
)
from app.services import workout_sets
from app.services.session_totals import compute_session_totals
from app.services.set_assembly import RawSetInput

router = APIRouter()


def _session_read(session: WorkoutSession) -> WorkoutSessionRead:
    """Build the response from loaded sets; totals are a fold over those sets."""
    totals = compute_session_totals(session.sets)
    return WorkoutSessionRead(
        id=session.id,
        session_date=session.session_date,
        body_weight_kg=session.body_weight_kg,
        note=session.note,
        sets=[
            WorkoutSetRead(
                id=s.id,
                exercise_id=s.exercise_id,
                exercise_name=s.exercise.name if s.exercise else None,
                exercise_name_ja=s.exercise.name_ja if s.exercise else None,
                set_number=s.set_number,
                reps=s.reps,
                weight_kg=s.weight_kg,
                duration_minutes=s.duration_minutes,
                calories_burned=s.calories_burned,
                speed_kmh=s.speed_kmh,
            )
            for s in sorted(session.sets, key=lambda s: s.set_number)
        ],
        total_calories_burned=totals.total_calories_burned,
        total_sets=totals.total_sets,
        total_volume=totals.total_volume,
        total_duration_minutes=totals.total_duration_minutes,
        created_at=session.created_at,
        updated_at=session.updated_at,
    )


@router.get("", response_model=list[WorkoutSessionRead])
async def list_sessions(
    db: AsyncSession = Depends(get_db),
    from_date: date | None = None,
    to_date: date | None = None,
    skip: int = 0,
    limit: int = DEFAULT_SESSION_PAGE_SIZE,
):
    """List sessions (newest first) with sets and totals, optionally filtered by date range."""
    stmt = select(WorkoutSession).options(
        selectinload(WorkoutSession.sets).selectinload(WorkoutSet.exercise)
    )
    if from_date:
        stmt = stmt.where(WorkoutSession.session_date >= from_date)
    if to_date:
        stmt = stmt.where(WorkoutSession.session_date <= to_date)
    stmt = (
        stmt.order_by(WorkoutSession.session_date.desc(), WorkoutSession.created_at.desc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(stmt)
    return [_session_read(s) for s in result.scalars().all()]


@router.post("", response_model=WorkoutSessionRead, status_code=201)
async def create_session(
    payload: WorkoutSessionCreate,
    db: AsyncSession = Depends(get_db),
):
    """Start a new session. body_weight_kg must be positive."""
    session = WorkoutSession(**payload.model_dump(), sets=[])
    db.add(session)
    await db.flush()
    await db.refresh(session, attribute_names=["created_at", "updated_at"])
    return _session_read(session)


@router.get("/{session_id}", response_model=WorkoutSessionRead)
async def get_session(
    session_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a session with all sets and totals."""
    try:
        session = await workout_sets.get_session_with_sets(db, session_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return _session_read(session)


@router.patch("/{session_id}", response_model=WorkoutSessionRead)
async def update_session(
    session_id: uuid.UUID,
    payload: WorkoutSessionUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update note and/or body weight. Already recorded set calories are kept as they are."""
    try:
        session = await workout_sets.get_session_with_sets(db, session_id, for_update=True)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    data = payload.model_dump(exclude_unset=True)
    if "body_weight_kg" in data and data["body_weight_kg"] is None:
        raise HTTPException(status_code=400, detail="Body weight must be positive")
    for k, v in data.items():
        setattr(session, k, v)
    session.updated_at = datetime.now(timezone.utc)
    await db.flush()
    return _session_read(session)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a session and its sets."""
    result = await db.execute(select(WorkoutSession).where(WorkoutSession.id == session_id))
    session = result.scalar_one_or_none()
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    await db.delete(session)
    return None


@router.post("/{session_id}/sets", response_model=WorkoutSessionRead, status_code=201)
async def add_set_to_session(
    session_id: uuid.UUID,
    payload: WorkoutSetCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add a set; duration (if omitted) and calories are derived from the exercise input type."""
    raw = RawSetInput(
        reps=payload.reps,
        weight_kg=payload.weight_kg,
        speed_kmh=payload.speed_kmh,
        duration_minutes=payload.duration_minutes,
        rest_seconds=payload.rest_seconds,
    )
    try:
        session = await workout_sets.add_set(db, session_id, payload.exercise_id, raw)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _session_read(session)


@router.delete("/{session_id}/sets/{set_id}", response_model=WorkoutSessionRead)
async def delete_set(
    session_id: uuid.UUID,
    set_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Remove a set; remaining sets are renumbered 1..n."""
    try:
        session = await workout_sets.remove_set(db, session_id, set_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _session_read(session)
