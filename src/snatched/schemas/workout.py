import uuid
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutType(str, Enum):
    STAIR_MASTER = "stairMaster"
    TREADMILL = "treadmill"

    @property
    def display_name(self) -> str:
        return "Stair Master" if self is WorkoutType.STAIR_MASTER else "Treadmill"


class WorkoutConfiguration(BaseModel):
    """Input to the estimation engine. Weight must already be in kilograms."""

    workout_type: WorkoutType
    level_or_speed: float  # stair-master level or treadmill mph
    incline: float = 0.0  # percent, treadmill only
    duration_minutes: float
    weight_kg: float


class WorkoutResult(BaseModel):
    steps: int = Field(ge=0)
    calories_burned: float = Field(ge=0)


class WorkoutRecord(BaseModel):
    """A saved workout. Immutable once created."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    timestamp: datetime
    workout_type: WorkoutType
    steps: int = Field(ge=0)
    calories_burned: float = Field(ge=0)

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; they are always stored as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @classmethod
    def from_result(
        cls, workout_type: WorkoutType, result: WorkoutResult, timestamp: datetime
    ) -> "WorkoutRecord":
        return cls(
            timestamp=timestamp,
            workout_type=workout_type,
            steps=result.steps,
            calories_burned=result.calories_burned,
        )


# ── API bodies ──────────────────────────────────────────────────────


class WorkoutEstimateRequest(BaseModel):
    workout_type: WorkoutType
    level_or_speed: float
    incline: float = Field(default=0.0, ge=0, le=15)
    duration_minutes: float
    weight: float
    weight_unit: str = Field(default="kg", pattern=r"^(kg|lb)$")


class WorkoutRecordCreate(BaseModel):
    workout_type: WorkoutType
    steps: int = Field(ge=0)
    calories_burned: float = Field(ge=0)
