"""Windowed workout statistics, chart series and type breakdowns.

`aggregate` is a pure function of the record history, the reference instant
and the timezone used for calendar days. It always rebuilds the full
snapshot; nothing is carried over from a previous run.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta, tzinfo

from snatched.analytics.calendar import (
    DAY_NAMES,
    SHORT_DAY_NAMES,
    chart_label,
    ensure_aware,
    group_by_day,
    local_day,
    one_month_before,
    trailing_days,
)
from snatched.analytics.streaks import consecutive_days, longest_streak
from snatched.schemas.analytics import (
    NOT_APPLICABLE,
    AnalyticsSnapshot,
    ChartDataPoint,
    DailySeries,
    DayStats,
    MonthlyStats,
    OverallStats,
    WeeklyStats,
    WorkoutTypeBreakdown,
)
from snatched.schemas.workout import WorkoutRecord, WorkoutType

logger = logging.getLogger(__name__)

WEEK = timedelta(days=7)
WEEKS_PER_MONTH = 4.0  # fixed approximation, not days-in-month / 7
BREAKDOWN_DAYS = 7
SERIES_DAYS = 30
RECENT_LIMIT = 10

DayIndex = dict[date, list[WorkoutRecord]]


def _total_calories(records: Sequence[WorkoutRecord]) -> float:
    return sum(r.calories_burned for r in records)


def _total_steps(records: Sequence[WorkoutRecord]) -> int:
    return sum(r.steps for r in records)


def _average_calories(records: Sequence[WorkoutRecord]) -> float:
    return _total_calories(records) / len(records) if records else 0.0


def _most_active_day(records: Sequence[WorkoutRecord], tz: tzinfo) -> str:
    counts: dict[str, int] = {}
    for record in records:
        name = DAY_NAMES[local_day(record.timestamp, tz).weekday()]
        counts[name] = counts.get(name, 0) + 1
    if not counts:
        return NOT_APPLICABLE
    # max() keeps the first of equal counts, i.e. the first day seen.
    return max(counts, key=counts.__getitem__)


def _daily_breakdown(by_day: DayIndex, today: date) -> list[DayStats]:
    breakdown = []
    for day in trailing_days(today, BREAKDOWN_DAYS):
        day_records = by_day.get(day, [])
        breakdown.append(
            DayStats(
                day_name=SHORT_DAY_NAMES[day.weekday()],
                date=day,
                calories=_total_calories(day_records),
                steps=_total_steps(day_records),
                workout_count=len(day_records),
            )
        )
    return breakdown


def weekly_stats(
    records: Sequence[WorkoutRecord], now: datetime, tz: tzinfo, by_day: DayIndex | None = None
) -> WeeklyStats:
    """Stats for records in [now - 7 days, now) plus a 7-day breakdown ending today."""
    now = ensure_aware(now)
    window_start = now - WEEK
    week = [r for r in records if window_start <= r.timestamp < now]
    if by_day is None:
        by_day = group_by_day(records, tz)

    return WeeklyStats(
        total_calories=_total_calories(week),
        total_steps=_total_steps(week),
        workout_count=len(week),
        average_calories_per_workout=_average_calories(week),
        most_active_day=_most_active_day(week, tz),
        daily_breakdown=_daily_breakdown(by_day, local_day(now, tz)),
    )


def monthly_stats(records: Sequence[WorkoutRecord], now: datetime, tz: tzinfo) -> MonthlyStats:
    """Stats for records since the same instant one calendar month ago.

    The streak figure is computed over the whole history, not only the month.
    """
    window_start = one_month_before(now, tz)
    month = [r for r in records if r.timestamp >= window_start]
    return MonthlyStats(
        total_calories=_total_calories(month),
        total_steps=_total_steps(month),
        workout_count=len(month),
        streak_days=consecutive_days(records, now, tz),
        average_workouts_per_week=len(month) / WEEKS_PER_MONTH,
    )


def _type_counts(records: Sequence[WorkoutRecord]) -> dict[WorkoutType, list[WorkoutRecord]]:
    groups: dict[WorkoutType, list[WorkoutRecord]] = {}
    for record in records:
        groups.setdefault(record.workout_type, []).append(record)
    return groups


def overall_stats(records: Sequence[WorkoutRecord], now: datetime, tz: tzinfo) -> OverallStats:
    groups = _type_counts(records)
    favorite = max(groups, key=lambda t: len(groups[t])) if groups else None
    return OverallStats(
        total_workouts=len(records),
        total_calories_burned=_total_calories(records),
        total_steps=_total_steps(records),
        current_streak=consecutive_days(records, now, tz),
        longest_streak=longest_streak(records, tz),
        favorite_workout_type=favorite,
        average_calories_per_workout=_average_calories(records),
    )


def daily_series(
    records: Sequence[WorkoutRecord], now: datetime, tz: tzinfo, by_day: DayIndex | None = None
) -> DailySeries:
    """Calorie and step totals for each of the 30 days ending today, with no gaps."""
    if by_day is None:
        by_day = group_by_day(records, tz)

    calories: list[ChartDataPoint] = []
    steps: list[ChartDataPoint] = []
    for day in trailing_days(local_day(now, tz), SERIES_DAYS):
        day_records = by_day.get(day, [])
        label = chart_label(day)
        calories.append(ChartDataPoint(date=day, value=_total_calories(day_records), label=label))
        steps.append(ChartDataPoint(date=day, value=float(_total_steps(day_records)), label=label))
    return DailySeries(calories=calories, steps=steps)


def type_breakdown(records: Sequence[WorkoutRecord]) -> list[WorkoutTypeBreakdown]:
    """One entry per workout type present, most frequent first."""
    total = len(records)
    entries = [
        WorkoutTypeBreakdown(
            workout_type=workout_type,
            count=len(group),
            total_calories=_total_calories(group),
            percentage=len(group) / total * 100 if total else 0.0,
        )
        for workout_type, group in _type_counts(records).items()
    ]
    return sorted(entries, key=lambda e: e.count, reverse=True)


def recent_records(
    records: Sequence[WorkoutRecord], limit: int = RECENT_LIMIT
) -> list[WorkoutRecord]:
    return sorted(records, key=lambda r: r.timestamp, reverse=True)[:limit]


def aggregate(
    records: Sequence[WorkoutRecord],
    now: datetime,
    tz: tzinfo,
    recent_limit: int = RECENT_LIMIT,
) -> AnalyticsSnapshot:
    """Build a complete analytics snapshot. An empty history yields zeroed stats."""
    now = ensure_aware(now)
    by_day = group_by_day(records, tz)

    snapshot = AnalyticsSnapshot(
        generated_at=now,
        weekly=weekly_stats(records, now, tz, by_day),
        monthly=monthly_stats(records, now, tz),
        overall=overall_stats(records, now, tz),
        daily_series=daily_series(records, now, tz, by_day),
        type_breakdown=type_breakdown(records),
        recent_records=recent_records(records, recent_limit),
    )
    logger.debug("Aggregated %d records as of %s", len(records), now.isoformat())
    return snapshot
