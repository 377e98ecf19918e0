"""In-memory workout store for guest / offline use.

Holds sessions for a client that has no database behind it. Set assembly,
renumbering and totals go through the same functions as the SQL-backed API,
so a guest session and a stored session give identical results.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from app.core.enums import InputType
from app.core.errors import InvalidValueError, NotFoundError
from app.core.exercise_catalog import EXERCISE_CATALOG
from app.services.session_totals import SessionTotals, compute_session_totals
from app.services.set_assembly import RawSetInput, assemble_set, renumber_sets

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ExerciseInfo:
    """What the guest store needs to know about an exercise."""

    met: float
    input_type: InputType = InputType.REPS_WEIGHT
    name: str = ""

    def __post_init__(self) -> None:
        if self.met <= 0:
            raise InvalidValueError("MET value must be positive")


def builtin_exercises() -> dict[str, ExerciseInfo]:
    """The built-in catalog keyed by `key`, as a GuestWorkoutStore lookup."""
    return {
        e.key: ExerciseInfo(met=e.met, input_type=e.input_type, name=e.name)
        for e in EXERCISE_CATALOG
    }


@dataclass
class GuestSet:
    exercise_id: str
    set_number: int
    reps: int
    weight_kg: float
    duration_minutes: float
    calories_burned: float
    speed_kmh: float = 0.0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class GuestSession:
    session_date: date
    body_weight_kg: float
    note: str | None = None
    sets: list[GuestSet] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def totals(self) -> SessionTotals:
        return compute_session_totals(self.sets)


class GuestWorkoutStore:
    """Sessions kept in process memory. One lock serializes all mutations."""

    def __init__(self, exercises: dict[str, ExerciseInfo]):
        self._exercises = dict(exercises)
        self._sessions: dict[str, GuestSession] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        session_date: date,
        body_weight_kg: float,
        note: str | None = None,
    ) -> GuestSession:
        if body_weight_kg <= 0:
            raise InvalidValueError("Body weight must be positive")
        session = GuestSession(session_date=session_date, body_weight_kg=body_weight_kg, note=note)
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get_session(self, session_id: str) -> GuestSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session

    def list_sessions(
        self,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[GuestSession]:
        """Sessions newest first, optionally limited to an inclusive date range."""
        sessions = [
            s
            for s in self._sessions.values()
            if (date_from is None or s.session_date >= date_from)
            and (date_to is None or s.session_date <= date_to)
        ]
        return sorted(sessions, key=lambda s: (s.session_date, s.created_at), reverse=True)

    def update_session(
        self,
        session_id: str,
        note: str | None = None,
        body_weight_kg: float | None = None,
    ) -> GuestSession:
        """Change note and/or body weight. Existing sets keep their recorded calories."""
        if body_weight_kg is not None and body_weight_kg <= 0:
            raise InvalidValueError("Body weight must be positive")
        with self._lock:
            session = self.get_session(session_id)
            if note is not None:
                session.note = note
            if body_weight_kg is not None:
                session.body_weight_kg = body_weight_kg
            session.updated_at = _utcnow()
        return session

    def delete_session(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise NotFoundError("Session", session_id)

    def add_set(self, session_id: str, exercise_id: str, raw: RawSetInput) -> GuestSession:
        with self._lock:
            session = self.get_session(session_id)
            exercise = self._exercises.get(exercise_id)
            if exercise is None:
                logger.warning("Guest add_set: exercise %s not found", exercise_id)
                raise NotFoundError("Exercise", exercise_id)
            assembled = assemble_set(
                exercise.met,
                exercise.input_type,
                session.body_weight_kg,
                raw,
                current_set_count=len(session.sets),
            )
            session.sets.append(
                GuestSet(
                    exercise_id=exercise_id,
                    set_number=assembled.set_number,
                    reps=assembled.reps,
                    weight_kg=assembled.weight_kg,
                    duration_minutes=assembled.duration_minutes,
                    calories_burned=assembled.calories_burned,
                    speed_kmh=assembled.speed_kmh,
                )
            )
            session.updated_at = _utcnow()
        return session

    def remove_set(self, session_id: str, set_id: str) -> GuestSession:
        with self._lock:
            session = self.get_session(session_id)
            remaining = [s for s in session.sets if s.id != set_id]
            if len(remaining) == len(session.sets):
                raise NotFoundError("Set", set_id)
            renumber_sets(remaining)
            session.sets = remaining
            session.updated_at = _utcnow()
        return session

    def totals(self, session_id: str) -> SessionTotals:
        return self.get_session(session_id).totals
