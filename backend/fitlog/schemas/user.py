from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=8)
    name: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserGoals(BaseModel):
    weight_goal: Optional[float] = None
    steps_goal: Optional[int] = Field(None, ge=0)
    water_goal_liters: Optional[float] = Field(None, ge=0)
    workout_days_goal: Optional[int] = Field(None, ge=0, le=7)
    sleep_goal_hours: Optional[float] = Field(None, ge=0, le=24)


class UserGoalsUpdate(UserGoals):
    model_config = ConfigDict(extra="ignore")


class PreferencesUpdate(BaseModel):
    dark_mode: bool


class UserRead(UserGoals):
    id: int
    email: str
    name: Optional[str] = None
    height_cm: Optional[float] = None
    dark_mode: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
