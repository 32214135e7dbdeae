"""Tests for the step and calorie estimation formulas."""

import pytest

from snatched.analytics.estimation import estimate, pounds_to_kg
from snatched.errors import InvalidInputError
from snatched.schemas.workout import WorkoutConfiguration, WorkoutType


def _config(
    workout_type: WorkoutType = WorkoutType.STAIR_MASTER,
    level_or_speed: float = 5,
    incline: float = 0.0,
    duration_minutes: float = 20,
    weight_kg: float = 70,
) -> WorkoutConfiguration:
    return WorkoutConfiguration(
        workout_type=workout_type,
        level_or_speed=level_or_speed,
        incline=incline,
        duration_minutes=duration_minutes,
        weight_kg=weight_kg,
    )


class TestStairMaster:
    def test_reference_values(self) -> None:
        result = estimate(_config())
        assert result.steps == 3000
        assert result.calories_burned == pytest.approx(119.0)

    def test_incline_is_ignored(self) -> None:
        flat = estimate(_config(incline=0))
        inclined = estimate(_config(incline=10))
        assert flat == inclined

    def test_steps_are_floored(self) -> None:
        # 2.5 min * level 3 * 30 = 225.0; 2.55 min -> 229.5
        assert estimate(_config(level_or_speed=3, duration_minutes=2.55)).steps == 229


class TestTreadmill:
    def test_reference_values(self) -> None:
        result = estimate(
            _config(WorkoutType.TREADMILL, level_or_speed=4, duration_minutes=30)
        )
        assert result.steps == 4000
        assert result.calories_burned == pytest.approx(210.0)

    def test_incline_increases_calories(self) -> None:
        result = estimate(
            _config(WorkoutType.TREADMILL, level_or_speed=4, incline=10, duration_minutes=30)
        )
        # factor 1 + 10/100*1.5 = 1.15
        assert result.calories_burned == pytest.approx(241.5)
        assert result.steps == 4000

    def test_steps_are_floored(self) -> None:
        # 2000 * 2.5 mph * 1/60 h = 83.33
        result = estimate(
            _config(WorkoutType.TREADMILL, level_or_speed=2.5, duration_minutes=1)
        )
        assert result.steps == 83

    def test_decline_reduces_calories(self) -> None:
        result = estimate(
            _config(WorkoutType.TREADMILL, level_or_speed=4, incline=-2, duration_minutes=30)
        )
        # factor 1 - 2/100*1.5 = 0.985
        assert result.calories_burned == pytest.approx(206.85)
        assert result.steps == 4000

    def test_decline_with_negative_factor_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="Incline"):
            estimate(_config(WorkoutType.TREADMILL, incline=-70))


class TestValidation:
    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("duration_minutes", 0, "Duration"),
            ("duration_minutes", -1, "Duration"),
            ("weight_kg", 0, "Weight"),
            ("level_or_speed", 0, "Level/speed"),
            ("level_or_speed", -2.5, "Level/speed"),
        ],
    )
    def test_non_positive_inputs(self, field: str, value: float, message: str) -> None:
        with pytest.raises(InvalidInputError, match=message):
            estimate(_config(**{field: value}))

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            estimate(_config(weight_kg=-70))


def test_estimate_is_deterministic() -> None:
    config = _config(WorkoutType.TREADMILL, level_or_speed=3.7, incline=4, duration_minutes=42)
    assert estimate(config) == estimate(config)


def test_pounds_to_kg() -> None:
    assert pounds_to_kg(100) == pytest.approx(45.359237)
    assert pounds_to_kg(0) == 0
