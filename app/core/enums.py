"""Shared enums for models and API."""

from enum import Enum


class InputType(str, Enum):
    """How sets of an exercise are logged, and how their raw fields feed the calorie estimate."""

    REPS_WEIGHT = "reps_weight"  # Reps & load in kg
    REPS_ONLY = "reps_only"  # Bodyweight reps (e.g. Push Up)
    DURATION = "duration"  # Timed hold (e.g. Plank)
    CARDIO = "cardio"  # Machine cardio: minutes + incline % (stored in weight_kg) + speed


class MuscleGroup(str, Enum):
    """Primary muscle group of an exercise."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    FULL_BODY = "full_body"
    CARDIO = "cardio"
