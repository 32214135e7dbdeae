"""Consecutive-day streaks and the day-by-day contribution grid."""

from collections.abc import Sequence
from datetime import date, datetime, timedelta, tzinfo

from snatched.analytics.calendar import (
    SHORT_MONTH_NAMES,
    ensure_aware,
    group_by_day,
    local_day,
)
from snatched.schemas.analytics import ContributionCell, ContributionGrid
from snatched.schemas.workout import WorkoutRecord

# Cell intensity by number of workouts on the day; 4 or more saturates.
INTENSITY_LEVELS = [0.15, 0.4, 0.6, 0.8, 1.0]


def _workout_days(records: Sequence[WorkoutRecord], tz: tzinfo) -> set[date]:
    return {local_day(record.timestamp, tz) for record in records}


def consecutive_days(
    records: Sequence[WorkoutRecord], as_of: datetime, tz: tzinfo
) -> int:
    """Length of the run of consecutive workout days ending at the latest workout day.

    The latest workout day does not have to be today: a run that ended last
    week still reports its length. Several workouts on one day count once.
    Records timestamped after `as_of` are ignored.
    """
    as_of = ensure_aware(as_of)
    days = _workout_days([r for r in records if r.timestamp <= as_of], tz)
    if not days:
        return 0

    current = max(days)
    streak = 1
    while current - timedelta(days=1) in days:
        current -= timedelta(days=1)
        streak += 1
    return streak


def longest_streak(records: Sequence[WorkoutRecord], tz: tzinfo) -> int:
    """Longest run of consecutive workout days anywhere in the history."""
    longest = 0
    run = 0
    previous: date | None = None
    for day in sorted(_workout_days(records, tz)):
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        longest = max(longest, run)
        previous = day
    return longest


def _intensity(workout_count: int) -> float:
    return INTENSITY_LEVELS[min(workout_count, len(INTENSITY_LEVELS) - 1)]


def _month_labels(first: date, last: date) -> list[str]:
    """Short name of each month touched by the days `first` through `last`."""
    labels: list[str] = []
    year, month = first.year, first.month
    while (year, month) <= (last.year, last.month):
        labels.append(SHORT_MONTH_NAMES[month - 1])
        year, month = (year, month + 1) if month < 12 else (year + 1, 1)
    return labels


def contribution_grid(
    records: Sequence[WorkoutRecord], now: datetime, tz: tzinfo, weeks: int = 30
) -> ContributionGrid:
    """Heat-map cells for the `weeks * 7` days before today, oldest first.

    Today itself is not part of the grid, but the month labels run through
    today's month.
    """
    today = local_day(now, tz)
    by_day = group_by_day(records, tz)
    total_days = weeks * 7

    cells: list[ContributionCell] = []
    for index in range(total_days):
        day = today - timedelta(days=total_days - index)
        day_records = by_day.get(day, [])
        cells.append(
            ContributionCell(
                date=day,
                workout_count=len(day_records),
                calories=sum(r.calories_burned for r in day_records),
                intensity=_intensity(len(day_records)),
            )
        )

    return ContributionGrid(
        weeks=weeks,
        current_streak=consecutive_days(records, now, tz),
        month_labels=_month_labels(today - timedelta(days=total_days), today),
        cells=cells,
    )
