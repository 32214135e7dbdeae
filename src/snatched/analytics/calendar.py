"""Calendar-day helpers. Every day boundary is taken in an explicit timezone."""

import calendar
from collections import defaultdict
from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta, tzinfo

from snatched.schemas.workout import WorkoutRecord

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
SHORT_DAY_NAMES = [name[:3] for name in DAY_NAMES]
SHORT_MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]


def ensure_aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=UTC)


def local_day(moment: datetime, tz: tzinfo) -> date:
    """Calendar day of `moment` in `tz`. Naive datetimes are read as UTC."""
    return ensure_aware(moment).astimezone(tz).date()


def one_month_before(moment: datetime, tz: tzinfo) -> datetime:
    """Same wall-clock time one calendar month earlier, clamped to the month's last day."""
    local = ensure_aware(moment).astimezone(tz)
    year, month = (local.year, local.month - 1) if local.month > 1 else (local.year - 1, 12)
    day = min(local.day, calendar.monthrange(year, month)[1])
    return local.replace(year=year, month=month, day=day)


def trailing_days(today: date, count: int) -> list[date]:
    """The `count` calendar days ending at `today`, oldest first."""
    return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def group_by_day(
    records: Iterable[WorkoutRecord], tz: tzinfo
) -> dict[date, list[WorkoutRecord]]:
    days: dict[date, list[WorkoutRecord]] = defaultdict(list)
    for record in records:
        days[local_day(record.timestamp, tz)].append(record)
    return days


def chart_label(day: date) -> str:
    return day.strftime("%m/%d")
