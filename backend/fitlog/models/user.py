from sqlalchemy import Column, Integer, String, Boolean, DateTime, Numeric, false
from sqlalchemy.sql import func
from fitlog.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=True)
    height_cm = Column(Numeric(5, 1), nullable=True)

    # Goals (all optional; unset steps/water goals count as met)
    weight_goal = Column(Numeric(5, 2), nullable=True)        # kg
    steps_goal = Column(Integer, nullable=True)
    water_goal_liters = Column(Numeric(4, 2), nullable=True)
    workout_days_goal = Column(Integer, nullable=True)        # per week
    sleep_goal_hours = Column(Numeric(3, 1), nullable=True)

    # UI preference, persisted instead of living in browser storage
    dark_mode = Column(Boolean, nullable=False, server_default=false())

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
