from sqlalchemy import (
    Column, Integer, String, Boolean, Date, DateTime, Numeric, Time, ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.sql import func
from fitlog.db import Base


class DailyLog(Base):
    __tablename__ = "daily_logs"
    # At most one log per user per calendar day
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_daily_logs_user_date"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    date = Column(Date, nullable=False)

    weight = Column(Numeric(5, 2), nullable=True)        # kg
    steps = Column(Integer, nullable=True)
    calories = Column(Integer, nullable=True)
    water_liters = Column(Numeric(4, 2), nullable=True)

    workout_done = Column(Boolean, nullable=True)
    workout_type = Column(String(40), nullable=True)   # only kept when workout_done

    # Wall-clock times, no date attached; sleep may be the previous evening
    wake_time = Column(Time, nullable=True)
    sleep_time = Column(Time, nullable=True)

    notes = Column(String, nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
