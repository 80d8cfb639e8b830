from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from fitlog.db import Base


class ReminderLog(Base):
    __tablename__ = "reminders_log"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    type = Column(String(10), nullable=False)  # daily, weekly, monthly
    sent_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
