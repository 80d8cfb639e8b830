from datetime import date
from typing import Optional

from pydantic import BaseModel


class ReportSummaryRead(BaseModel):
    start_date: date
    end_date: date
    count: int
    weight_entries: int
    workout_days: int
    avg_steps: int


class ConsistencyRead(BaseModel):
    goal: Optional[str] = None
    score: int
    streak: int
    days: int


class CalendarDay(BaseModel):
    date: date
    status: str  # empty, met, not-met


class CalendarRead(BaseModel):
    month: str
    goal: str
    streak: int
    days: list[CalendarDay]
