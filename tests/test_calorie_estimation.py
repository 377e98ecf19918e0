"""Unit tests for the calorie / duration estimation functions."""

import pytest

from app.services.calorie_estimation import (
    acsm_met,
    calculate_calories,
    estimate_duration_from_set,
    get_load_factor,
    round_half_up,
)


# =============================================================================
# calculate_calories: MET branch
# =============================================================================


def test_met_times_weight_times_hours():
    # 6.0 × 70 × 0.5 h × 1.05
    assert calculate_calories(6.0, 70, 30) == 220.5


def test_high_met_rounds_half_up_to_one_decimal():
    # 11.0 × 65 × (20/60) × 1.05 = 250.25
    assert calculate_calories(11.0, 65, 20) == 250.3


def test_incline_without_speed_adds_half_met_per_percent():
    with_incline = calculate_calories(8.0, 70, 30, 0, 5, 0)
    without_incline = calculate_calories(8.0, 70, 30, 0, 0, 0)
    assert with_incline > without_incline
    # adjusted MET 10.5 → 385.875
    assert with_incline == 385.9


def test_zero_incline_same_as_default():
    assert calculate_calories(8.0, 70, 30, 0, 0) == calculate_calories(8.0, 70, 30)


# =============================================================================
# calculate_calories: ACSM branch (speed > 0)
# =============================================================================


def test_running_speed_uses_acsm_running_equation():
    # VO2 = 166.667×0.2 + 166.667×0.05×0.9 + 3.5 = 44.333 → 12.667 MET
    assert calculate_calories(8.0, 70, 30, 0, 5, 10) == 465.5


def test_walking_speed_uses_acsm_walking_equation():
    # VO2 = 83.333×0.1 + 83.333×0.05×1.8 + 3.5 = 19.333 → 5.524 MET
    assert calculate_calories(4.0, 70, 30, 0, 5, 5) == 203.0


def test_speed_ignores_exercise_met():
    assert calculate_calories(2.0, 70, 30, 0, 5, 10) == calculate_calories(20.0, 70, 30, 0, 5, 10)


def test_faster_speed_burns_more():
    assert calculate_calories(8.0, 70, 30, 0, 0, 12) > calculate_calories(8.0, 70, 30, 0, 0, 8)


def test_running_threshold_is_eight_kmh():
    assert acsm_met(8.0) == pytest.approx((8.0 * 1000 / 60 * 0.2 + 3.5) / 3.5)
    assert acsm_met(7.9) == pytest.approx((7.9 * 1000 / 60 * 0.1 + 3.5) / 3.5)


# =============================================================================
# calculate_calories: load factor
# =============================================================================


def test_load_factor_applied_for_weighted_sets():
    # load factor 1 + 60/70 × 0.5
    assert calculate_calories(6.0, 70, 30, 60) == 315.0


def test_load_equal_to_body_weight_hits_cap():
    # 220.5 × 1.5 = 330.75
    assert calculate_calories(6.0, 70, 30, 70) == 330.8


def test_load_above_body_weight_is_capped():
    assert calculate_calories(6.0, 70, 30, 140) == calculate_calories(6.0, 70, 30, 70)
    assert get_load_factor(500, 70) == 1.5


def test_load_factor_is_one_without_body_weight():
    assert get_load_factor(60, 0) == 1.0
    assert get_load_factor(0, 70) == 1.0


# =============================================================================
# calculate_calories: zero / degenerate input
# =============================================================================


@pytest.mark.parametrize("met", [1.0, 6.0, 12.5])
@pytest.mark.parametrize("body_weight", [0, 55, 70, 120])
def test_zero_duration_is_zero_calories(met, body_weight):
    assert calculate_calories(met, body_weight, 0, 40, 3, 0) == 0
    assert calculate_calories(met, body_weight, 0, 0, 3, 9) == 0


@pytest.mark.parametrize("duration", [0, 1, 30, 90])
def test_zero_body_weight_is_zero_calories(duration):
    assert calculate_calories(6.0, 0, duration, 60) == 0
    assert calculate_calories(8.0, 0, duration, 0, 5, 10) == 0


def test_negative_input_does_not_raise():
    result = calculate_calories(6.0, -70, -30, -10, -5, -3)
    assert isinstance(result, float)


def test_monotonic_in_met_duration_and_body_weight():
    base = calculate_calories(6.0, 70, 30, 20)
    assert calculate_calories(7.0, 70, 30, 20) > base
    assert calculate_calories(6.0, 70, 40, 20) > base
    assert calculate_calories(6.0, 80, 30, 20) > base


# =============================================================================
# estimate_duration_from_set
# =============================================================================


def test_duration_from_reps_with_default_rest():
    # 10 × 4 s + 60 s = 100 s
    assert estimate_duration_from_set(10) == pytest.approx(1.67, abs=0.005)
    assert estimate_duration_from_set(10, 60) == 1.67


def test_duration_with_custom_rest():
    # 8 × 4 s + 90 s = 122 s
    assert estimate_duration_from_set(8, 90) == 2.03


def test_duration_zero_reps_is_rest_only():
    assert estimate_duration_from_set(0, 60) == 1.0


def test_duration_zero_rest_is_reps_only():
    assert estimate_duration_from_set(15, 0) == 1.0


# =============================================================================
# round_half_up
# =============================================================================


def test_round_half_up_rounds_halves_up():
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(2.5, 0) == 3.0
    assert round_half_up(1.005 + 1e-9, 2) == 1.01
