"""Workout endpoints: estimate, save, and list recent workouts."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from snatched.analytics.aggregation import recent_records
from snatched.analytics.estimation import estimate, pounds_to_kg
from snatched.analytics.service import AnalyticsService
from snatched.api.dependencies import get_analytics, get_record_store
from snatched.errors import InvalidInputError, StoreUnavailableError
from snatched.schemas.workout import (
    WorkoutConfiguration,
    WorkoutEstimateRequest,
    WorkoutRecord,
    WorkoutRecordCreate,
    WorkoutResult,
)
from snatched.store.base import RecordStore

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.post("/estimate", response_model=WorkoutResult)
async def estimate_workout(body: WorkoutEstimateRequest) -> WorkoutResult:
    """Estimate steps and calories. Weight may be given in kg or lb."""
    weight_kg = pounds_to_kg(body.weight) if body.weight_unit == "lb" else body.weight
    config = WorkoutConfiguration(
        workout_type=body.workout_type,
        level_or_speed=body.level_or_speed,
        incline=body.incline,
        duration_minutes=body.duration_minutes,
        weight_kg=weight_kg,
    )
    try:
        return estimate(config)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None


@router.post("", response_model=WorkoutRecord, status_code=status.HTTP_201_CREATED)
async def save_workout(
    body: WorkoutRecordCreate,
    analytics: AnalyticsService = Depends(get_analytics),
) -> WorkoutRecord:
    """Save a workout to the history; analytics are recomputed before returning."""
    result = WorkoutResult(steps=body.steps, calories_burned=body.calories_burned)
    try:
        return await analytics.log_workout(body.workout_type, result)
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e)) from None


@router.get("", response_model=list[WorkoutRecord])
async def list_workouts(
    limit: int = Query(default=20, ge=1, le=500),
    store: RecordStore = Depends(get_record_store),
) -> list[WorkoutRecord]:
    """List the most recent workouts, newest first."""
    try:
        records = await store.load_all()
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e)) from None
    return recent_records(records, limit)
