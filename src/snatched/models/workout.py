from datetime import datetime

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from snatched.database import Base


class Workout(Base):
    __tablename__ = "workouts"

    # Autoincrement sequence keeps append order for equal timestamps
    seq: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True)  # UUID
    timestamp: Mapped[datetime] = mapped_column(index=True)  # UTC, naive
    workout_type: Mapped[str] = mapped_column(String(20))  # stairMaster, treadmill
    steps: Mapped[int]
    calories_burned: Mapped[float] = mapped_column(Float)
