"""Add / remove sets on a stored workout session.

The session row is locked (SELECT ... FOR UPDATE) before the set count is read,
so concurrent adds on one session get distinct set numbers on PostgreSQL.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import asdict
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.errors import NotFoundError
from app.models.exercise import Exercise
from app.models.workout import WorkoutSession, WorkoutSet
from app.services.set_assembly import RawSetInput, assemble_set, renumber_sets

logger = logging.getLogger(__name__)


async def get_session_with_sets(
    db: AsyncSession,
    session_id: uuid.UUID,
    *,
    for_update: bool = False,
) -> WorkoutSession:
    """Load a session with its sets (and each set's exercise). Raises NotFoundError."""
    stmt = (
        select(WorkoutSession)
        .where(WorkoutSession.id == session_id)
        .options(selectinload(WorkoutSession.sets).selectinload(WorkoutSet.exercise))
    )
    if for_update:
        stmt = stmt.with_for_update()
    result = await db.execute(stmt)
    session = result.scalar_one_or_none()
    if session is None:
        logger.warning("Workout session %s not found", session_id)
        raise NotFoundError("Session", session_id)
    return session


async def add_set(
    db: AsyncSession,
    session_id: uuid.UUID,
    exercise_id: uuid.UUID,
    raw: RawSetInput,
) -> WorkoutSession:
    """Append a set built by the set assembly policy. Session and exercise are resolved first."""
    session = await get_session_with_sets(db, session_id, for_update=True)
    exercise = await db.get(Exercise, exercise_id)
    if exercise is None:
        logger.warning("Exercise %s not found", exercise_id)
        raise NotFoundError("Exercise", exercise_id)

    assembled = assemble_set(
        exercise.met,
        exercise.input_type,
        session.body_weight_kg,
        raw,
        current_set_count=len(session.sets),
    )
    set_ = WorkoutSet(exercise_id=exercise.id, **asdict(assembled))
    set_.exercise = exercise
    session.sets.append(set_)
    session.updated_at = datetime.now(timezone.utc)
    await db.flush()
    logger.info(
        "Added set %d to session %s (%s): %.1f kcal over %.2f min",
        set_.set_number,
        session.id,
        exercise.name,
        set_.calories_burned,
        set_.duration_minutes,
    )
    return session


async def remove_set(
    db: AsyncSession,
    session_id: uuid.UUID,
    set_id: uuid.UUID,
) -> WorkoutSession:
    """Delete a set and renumber the remaining sets 1..n."""
    session = await get_session_with_sets(db, session_id, for_update=True)
    target = next((s for s in session.sets if s.id == set_id), None)
    if target is None:
        logger.warning("Set %s not found in session %s", set_id, session_id)
        raise NotFoundError("Set", set_id)

    session.sets.remove(target)
    renumber_sets(session.sets)
    session.updated_at = datetime.now(timezone.utc)
    await db.flush()
    logger.info("Removed set %s from session %s; %d sets remain", set_id, session.id, len(session.sets))
    return session
