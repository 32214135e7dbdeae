from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from snatched.schemas.workout import WorkoutRecord, WorkoutType

NOT_APPLICABLE = "N/A"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class DayStats(_Frozen):
    day_name: str  # abbreviated weekday, e.g. "Mon"
    date: date
    calories: float
    steps: int
    workout_count: int


class WeeklyStats(_Frozen):
    total_calories: float
    total_steps: int
    workout_count: int
    average_calories_per_workout: float
    most_active_day: str  # full weekday name or NOT_APPLICABLE
    daily_breakdown: list[DayStats]


class MonthlyStats(_Frozen):
    total_calories: float
    total_steps: int
    workout_count: int
    streak_days: int
    average_workouts_per_week: float


class OverallStats(_Frozen):
    total_workouts: int
    total_calories_burned: float
    total_steps: int
    current_streak: int
    longest_streak: int
    favorite_workout_type: WorkoutType | None
    average_calories_per_workout: float


class ChartDataPoint(_Frozen):
    date: date
    value: float
    label: str  # MM/dd


class DailySeries(_Frozen):
    """Parallel 30-day calorie and step series, oldest day first."""

    calories: list[ChartDataPoint]
    steps: list[ChartDataPoint]


class WorkoutTypeBreakdown(_Frozen):
    workout_type: WorkoutType
    count: int
    total_calories: float
    percentage: float


class AnalyticsSnapshot(_Frozen):
    generated_at: datetime
    weekly: WeeklyStats
    monthly: MonthlyStats
    overall: OverallStats
    daily_series: DailySeries
    type_breakdown: list[WorkoutTypeBreakdown]
    recent_records: list[WorkoutRecord]


class StreakSummary(_Frozen):
    current_streak: int
    longest_streak: int


class ContributionCell(_Frozen):
    date: date
    workout_count: int
    calories: float
    intensity: float


class ContributionGrid(_Frozen):
    weeks: int
    current_streak: int
    month_labels: list[str]
    cells: list[ContributionCell]
