"""Morning nudge: users with nothing logged today get a push."""
import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from fitlog.core.reminders import morning_message
from fitlog.core.time_utils import today_key
from fitlog.db import SessionLocal
from fitlog.jobs.common import (
    Sender,
    configure_logging,
    for_each_user,
    notify_user,
    record_reminder,
    resolve_sender,
)
from fitlog.models.daily_log import DailyLog

logger = logging.getLogger(__name__)


def run(db: Session, today: Optional[date] = None, sender: Optional[Sender] = None) -> dict:
    today = today or date.fromisoformat(today_key())
    sender = resolve_sender(sender)

    def handle(db: Session, user) -> bool:
        log = (
            db.query(DailyLog)
            .filter(DailyLog.user_id == user.id, DailyLog.date == today)
            .first()
        )
        if log is not None:
            return False
        message = morning_message(user.name)
        notify_user(db, user, "Morning Reminder", message, "/dashboard", sender)
        record_reminder(db, user.id, "daily")
        logger.info("Morning reminder for %s: %s", user.email, message)
        return True

    result = for_each_user(db, handle)
    logger.info("Morning reminders processed: %s", result)
    return result


def main():
    configure_logging()
    db = SessionLocal()
    try:
        run(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
