"""Step and calorie estimates for stair-master and treadmill sessions."""

import math

from snatched.errors import InvalidInputError
from snatched.schemas.workout import WorkoutConfiguration, WorkoutResult, WorkoutType

KG_PER_POUND = 0.45359237
STEPS_PER_MILE = 2000.0
# Below this grade the treadmill incline factor turns negative
MIN_INCLINE = -200 / 3


def pounds_to_kg(pounds: float) -> float:
    return pounds * KG_PER_POUND


def _validate(config: WorkoutConfiguration) -> None:
    if config.duration_minutes <= 0:
        raise InvalidInputError(f"Duration must be positive, got {config.duration_minutes}")
    if config.weight_kg <= 0:
        raise InvalidInputError(f"Weight must be positive, got {config.weight_kg}")
    if config.level_or_speed <= 0:
        raise InvalidInputError(f"Level/speed must be positive, got {config.level_or_speed}")
    if config.workout_type is WorkoutType.TREADMILL and config.incline < MIN_INCLINE:
        raise InvalidInputError(
            f"Incline must be at least {MIN_INCLINE:.1f}%, got {config.incline}"
        )


def estimate(config: WorkoutConfiguration) -> WorkoutResult:
    """Estimate steps and calories burned for a workout.

    Stair master: `level_or_speed` is the machine level.
    Treadmill: `level_or_speed` is miles per hour and `incline` a percentage.

    Raises:
        InvalidInputError: duration, weight or level/speed is not positive, or a
            treadmill decline is steep enough to make calories negative.
    """
    _validate(config)
    minutes = config.duration_minutes

    if config.workout_type is WorkoutType.STAIR_MASTER:
        steps = math.floor(minutes * config.level_or_speed * 30)
        calories = config.weight_kg * 0.17 * minutes * (config.level_or_speed / 10)
    else:
        base_calories_per_minute = 0.1 * config.weight_kg * (config.level_or_speed / 4)
        incline_factor = max(0.0, 1 + (config.incline / 100 * 1.5))
        calories = base_calories_per_minute * minutes * incline_factor
        steps = math.floor(STEPS_PER_MILE * config.level_or_speed * (minutes / 60))

    return WorkoutResult(steps=steps, calories_burned=calories)
