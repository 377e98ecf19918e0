"""Set assembly: turn raw set input into a set with duration and calories.

The exercise input type decides how the raw fields map onto the calorie
calculator. Every InputType has exactly one derivation in CALC_PARAM_DERIVERS;
a new modality is a new enum member plus one entry there.

| input_type             | duration                       | load   | incline  | speed |
|------------------------|--------------------------------|--------|----------|-------|
| reps_weight, reps_only | explicit or reps/rest estimate | weight | 0        | 0     |
| duration               | explicit or 1 min              | 0      | 0        | 0     |
| cardio                 | explicit or 1 min              | 0      | weight % | speed |
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import NamedTuple, Protocol

from app.core.constants import DEFAULT_DURATION_MINUTES
from app.core.enums import InputType
from app.core.errors import InvalidValueError
from app.services.calorie_estimation import (
    DEFAULT_REST_SECONDS,
    calculate_calories,
    estimate_duration_from_set,
)


@dataclass(frozen=True)
class RawSetInput:
    """Set fields as the user entered them. weight_kg is incline/resistance % for cardio."""

    reps: int
    weight_kg: float
    speed_kmh: float | None = None
    duration_minutes: float | None = None
    rest_seconds: float | None = None


class CalcParams(NamedTuple):
    duration_minutes: float
    weight_for_calc: float
    incline_pct: float
    speed_kmh: float


@dataclass
class AssembledSet:
    """A validated set ready to be stored. weight_kg keeps the raw input value."""

    set_number: int
    reps: int
    weight_kg: float
    duration_minutes: float
    calories_burned: float
    speed_kmh: float = 0.0

    def __post_init__(self) -> None:
        if self.set_number < 1:
            raise InvalidValueError("Set number must be >= 1")
        if self.reps < 0:
            raise InvalidValueError("Reps must be >= 0")
        if self.weight_kg < 0:
            raise InvalidValueError("Weight must be >= 0")
        if self.duration_minutes < 0:
            raise InvalidValueError("Duration must be >= 0")


class NumberedSet(Protocol):
    set_number: int


def _derive_rep_based(raw: RawSetInput) -> CalcParams:
    duration = raw.duration_minutes
    if duration is None:
        rest = raw.rest_seconds if raw.rest_seconds is not None else DEFAULT_REST_SECONDS
        duration = estimate_duration_from_set(raw.reps, rest)
    return CalcParams(duration, raw.weight_kg, 0.0, 0.0)


def _derive_timed(raw: RawSetInput) -> CalcParams:
    duration = raw.duration_minutes if raw.duration_minutes is not None else DEFAULT_DURATION_MINUTES
    return CalcParams(duration, 0.0, 0.0, 0.0)


def _derive_cardio(raw: RawSetInput) -> CalcParams:
    # weight_kg carries the machine incline / resistance percentage
    duration = raw.duration_minutes if raw.duration_minutes is not None else DEFAULT_DURATION_MINUTES
    speed = raw.speed_kmh if raw.speed_kmh is not None else 0.0
    return CalcParams(duration, 0.0, raw.weight_kg, speed)


CALC_PARAM_DERIVERS: dict[InputType, Callable[[RawSetInput], CalcParams]] = {
    InputType.REPS_WEIGHT: _derive_rep_based,
    InputType.REPS_ONLY: _derive_rep_based,
    InputType.DURATION: _derive_timed,
    InputType.CARDIO: _derive_cardio,
}


def derive_calc_params(input_type: InputType | str, raw: RawSetInput) -> CalcParams:
    """Map raw input onto calculator parameters for the given input type."""
    return CALC_PARAM_DERIVERS[InputType(input_type)](raw)


def assemble_set(
    met: float,
    input_type: InputType | str,
    body_weight_kg: float,
    raw: RawSetInput,
    current_set_count: int,
) -> AssembledSet:
    """
    Build the next set of a session: derive parameters, estimate calories and
    number it current_set_count + 1. Raises InvalidValueError for negative fields.
    """
    params = derive_calc_params(input_type, raw)
    calories = calculate_calories(
        met,
        body_weight_kg,
        params.duration_minutes,
        params.weight_for_calc,
        params.incline_pct,
        params.speed_kmh,
    )
    return AssembledSet(
        set_number=current_set_count + 1,
        reps=raw.reps,
        weight_kg=raw.weight_kg,
        duration_minutes=params.duration_minutes,
        calories_burned=calories,
        speed_kmh=params.speed_kmh,
    )


def renumber_sets(sets: Iterable[NumberedSet]) -> None:
    """Renumber sets 1..n in their current order (applied after a set is removed)."""
    for number, set_ in enumerate(sets, start=1):
        set_.set_number = number
