"""Analytics endpoints: published snapshot, streaks, and the contribution grid."""

from fastapi import APIRouter, Depends, Query

from snatched.analytics.service import AnalyticsService
from snatched.analytics.streaks import contribution_grid
from snatched.api.dependencies import get_analytics
from snatched.config import get_settings
from snatched.schemas.analytics import AnalyticsSnapshot, ContributionGrid, StreakSummary

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsSnapshot)
async def get_snapshot(
    analytics: AnalyticsService = Depends(get_analytics),
) -> AnalyticsSnapshot:
    """Get the latest published analytics snapshot."""
    return analytics.snapshot


@router.get("/streak", response_model=StreakSummary)
async def get_streak(
    analytics: AnalyticsService = Depends(get_analytics),
) -> StreakSummary:
    return analytics.streak()


@router.get("/contributions", response_model=ContributionGrid)
async def get_contributions(
    weeks: int | None = Query(default=None, ge=1, le=104),
    analytics: AnalyticsService = Depends(get_analytics),
) -> ContributionGrid:
    """Get per-day workout counts and intensities for the last N weeks."""
    weeks = weeks or get_settings().contribution_weeks
    return contribution_grid(analytics.records, analytics.now(), analytics.tz, weeks=weeks)
