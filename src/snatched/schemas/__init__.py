from snatched.schemas.analytics import (
    NOT_APPLICABLE,
    AnalyticsSnapshot,
    ChartDataPoint,
    ContributionCell,
    ContributionGrid,
    DailySeries,
    DayStats,
    MonthlyStats,
    OverallStats,
    StreakSummary,
    WeeklyStats,
    WorkoutTypeBreakdown,
)
from snatched.schemas.workout import (
    WorkoutConfiguration,
    WorkoutEstimateRequest,
    WorkoutRecord,
    WorkoutRecordCreate,
    WorkoutResult,
    WorkoutType,
)

__all__ = [
    "NOT_APPLICABLE",
    "AnalyticsSnapshot",
    "ChartDataPoint",
    "ContributionCell",
    "ContributionGrid",
    "DailySeries",
    "DayStats",
    "MonthlyStats",
    "OverallStats",
    "StreakSummary",
    "WeeklyStats",
    "WorkoutConfiguration",
    "WorkoutEstimateRequest",
    "WorkoutRecord",
    "WorkoutRecordCreate",
    "WorkoutResult",
    "WorkoutType",
    "WorkoutTypeBreakdown",
]
