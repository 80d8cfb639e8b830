from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fitlog.core.time_utils import time_to_hhmm


class DailyLogBase(BaseModel):
    weight: Optional[float] = Field(None, gt=0)          # kg
    steps: Optional[int] = Field(None, ge=0)
    calories: Optional[float] = Field(None, ge=0)        # rounded to int on save
    water_liters: Optional[float] = None
    workout_done: Optional[bool] = None
    workout_type: Optional[str] = Field(None, max_length=40)
    wake_time: Optional[str] = None   # 'HH:MM'
    sleep_time: Optional[str] = None  # 'HH:MM'
    notes: Optional[str] = None


class DailyLogUpsert(DailyLogBase):
    """Partial update for one day; only fields the client sends are written."""

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")


class DailyLogRead(DailyLogBase):
    """Schema returned to the frontend when reading a log."""

    id: int
    date: date
    calories: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "DailyLogRead":
        return cls(
            id=row.id,
            date=row.date,
            weight=float(row.weight) if row.weight is not None else None,
            steps=row.steps,
            calories=row.calories,
            water_liters=float(row.water_liters) if row.water_liters is not None else None,
            workout_done=row.workout_done,
            workout_type=row.workout_type,
            wake_time=time_to_hhmm(row.wake_time),
            sleep_time=time_to_hhmm(row.sleep_time),
            notes=row.notes,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
