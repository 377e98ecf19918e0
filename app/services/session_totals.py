"""Session totals, always recomputed from the current list of sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from app.services.calorie_estimation import round_half_up


class SetLike(Protocol):
    reps: int
    weight_kg: float
    duration_minutes: float
    calories_burned: float


@dataclass(frozen=True)
class SessionTotals:
    total_calories_burned: float = 0.0
    total_sets: int = 0
    total_volume: float = 0.0  # sum of reps × weight_kg
    total_duration_minutes: float = 0.0


def compute_session_totals(sets: Iterable[SetLike]) -> SessionTotals:
    """Fold the sets into totals. No cached state, so add/remove history cannot drift."""
    calories = 0.0
    count = 0
    volume = 0.0
    duration = 0.0
    for s in sets:
        calories += float(s.calories_burned)
        count += 1
        volume += int(s.reps) * float(s.weight_kg)
        duration += float(s.duration_minutes)
    return SessionTotals(
        total_calories_burned=round_half_up(calories, 1),
        total_sets=count,
        total_volume=round_half_up(volume, 2),
        total_duration_minutes=round_half_up(duration, 2),
    )
