from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from fitlog.db import Base


class WeeklyPhoto(Base):
    __tablename__ = "weekly_photos"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Monday of the week (local); several photos per week are allowed
    week_start = Column(Date, nullable=False, index=True)

    # Bucket-relative storage path, resolved to a signed URL on read
    image_url = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
