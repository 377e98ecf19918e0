"""Calorie estimation for workout sets.

Current approach: MET-based formula scaled by body weight and time, with two
refinements:
- Speed-based cardio (treadmill, walking, running) uses the ACSM metabolic
  equation instead of the flat MET table value, since VO2 follows speed and grade.
- External load (barbell, dumbbell, machine stack) multiplies the result by a
  load factor relative to body weight, capped at 1.5x.

Both the SQL-backed API and the in-memory guest store call these functions, so
a set gets the same calories whichever path records it.
"""

from __future__ import annotations

import math

# Fixed metabolic efficiency correction applied to every estimate.
METABOLIC_EFFICIENCY = 1.05

# ACSM metabolic equation (VO2 in ml/kg/min). 3.5 ml/kg/min == 1 MET.
RESTING_VO2 = 3.5
RUNNING_SPEED_KMH = 8.0  # >= 8 km/h uses the running coefficients
RUNNING_HORIZONTAL_COEFF = 0.2
RUNNING_VERTICAL_COEFF = 0.9
WALKING_HORIZONTAL_COEFF = 0.1
WALKING_VERTICAL_COEFF = 1.8

# Flat MET bump per incline percent when no speed is given.
MET_PER_INCLINE_PCT = 0.5

# Load factor: 1 + min(load / body weight, cap) * weight. Max 1.5x.
LOAD_RATIO_CAP = 1.0
LOAD_FACTOR_WEIGHT = 0.5

# Set duration heuristic when the user does not report one.
SECONDS_PER_REP = 4  # average concentric + eccentric tempo
DEFAULT_REST_SECONDS = 60.0  # typical hypertrophy rest interval


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to `digits` decimals, halves away from zero for positives (2.25 -> 2.3)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def acsm_met(speed_kmh: float, incline_pct: float = 0.0) -> float:
    """
    MET from the ACSM walking/running equation.

    speed_mpm = km/h converted to m/min, grade = incline as a fraction.
    VO2 = speed_mpm * h + speed_mpm * grade * v + 3.5, MET = VO2 / 3.5.
    """
    speed_mpm = speed_kmh * (1000 / 60)
    grade = incline_pct / 100
    if speed_kmh >= RUNNING_SPEED_KMH:
        h_coeff, v_coeff = RUNNING_HORIZONTAL_COEFF, RUNNING_VERTICAL_COEFF
    else:
        h_coeff, v_coeff = WALKING_HORIZONTAL_COEFF, WALKING_VERTICAL_COEFF
    vo2 = speed_mpm * h_coeff + speed_mpm * grade * v_coeff + RESTING_VO2
    return vo2 / RESTING_VO2


def get_load_factor(weight_kg: float, body_weight_kg: float) -> float:
    """Multiplier for external load. 1.0 without load or body weight, 1.5 at or above body weight."""
    if weight_kg > 0 and body_weight_kg > 0:
        return 1 + min(weight_kg / body_weight_kg, LOAD_RATIO_CAP) * LOAD_FACTOR_WEIGHT
    return 1.0


def calculate_calories(
    met: float,
    body_weight_kg: float,
    duration_minutes: float,
    weight_kg: float = 0.0,
    incline_pct: float = 0.0,
    speed_kmh: float = 0.0,
) -> float:
    """
    Estimate calories burned for one set, rounded to 0.1 kcal.

    With speed_kmh > 0 the exercise MET is replaced by the ACSM estimate for that
    speed and incline. Otherwise incline adds 0.5 MET per percent.
    kcal = adjusted MET × body weight × hours × 1.05 × load factor.

    Never raises: zero duration or zero body weight yields 0.0, and input
    validation belongs to the caller.
    """
    if speed_kmh > 0:
        adjusted_met = acsm_met(speed_kmh, incline_pct)
    else:
        adjusted_met = met + incline_pct * MET_PER_INCLINE_PCT
    load_factor = get_load_factor(weight_kg, body_weight_kg)
    base = adjusted_met * body_weight_kg * (duration_minutes / 60) * METABOLIC_EFFICIENCY
    return round_half_up(base * load_factor, 1)


def estimate_duration_from_set(reps: int, rest_seconds: float = DEFAULT_REST_SECONDS) -> float:
    """
    Estimate set duration in minutes (rounded to 0.01) from reps and rest.
    Heuristic: 4 seconds per rep plus the rest interval after the set.
    """
    total_seconds = reps * SECONDS_PER_REP + rest_seconds
    return round_half_up(total_seconds / 60, 2)
