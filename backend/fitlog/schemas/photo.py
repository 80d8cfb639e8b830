from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class PhotoRead(BaseModel):
    id: int
    week_start: date
    image_url: str            # storage path, not a URL
    signed_url: Optional[str] = None
    created_at: Optional[datetime] = None


class PhotoReminderRead(BaseModel):
    due: bool
    shown: bool
    week_start: date
    message: Optional[str] = None
