"""Weekly check-in: once per ISO week, nudge users about progress photos."""
import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from fitlog.core.metrics import summarize
from fitlog.core.reminders import weekly_message
from fitlog.core.time_utils import monday_of, today_key
from fitlog.db import SessionLocal
from fitlog.jobs.common import (
    Sender,
    configure_logging,
    for_each_user,
    notify_user,
    record_reminder,
    reminder_sent_since,
    resolve_sender,
)
from fitlog.models.daily_log import DailyLog
from fitlog.models.weekly_photo import WeeklyPhoto

logger = logging.getLogger(__name__)


def run(db: Session, today: Optional[date] = None, sender: Optional[Sender] = None) -> dict:
    today = today or date.fromisoformat(today_key())
    sender = resolve_sender(sender)
    current_week = monday_of(today)
    last_week_start = current_week - timedelta(days=7)
    last_week_end = current_week - timedelta(days=1)

    def handle(db: Session, user) -> bool:
        if reminder_sent_since(db, user.id, "weekly", current_week):
            return False

        last_week = (
            db.query(DailyLog)
            .filter(
                DailyLog.user_id == user.id,
                DailyLog.date >= last_week_start,
                DailyLog.date <= last_week_end,
            )
            .all()
        )
        stats = summarize(last_week)
        photo_count = (
            db.query(WeeklyPhoto)
            .filter(WeeklyPhoto.user_id == user.id, WeeklyPhoto.week_start == current_week)
            .count()
        )
        title, body = weekly_message(photo_count)
        notify_user(db, user, title, body, "/photos", sender)
        record_reminder(db, user.id, "weekly")
        logger.info(
            "Weekly reminder for %s: %s (last week: %d workouts, %d avg steps)",
            user.email, body, stats.workout_days, stats.avg_steps,
        )
        return True

    result = for_each_user(db, handle)
    logger.info("Weekly reminders processed: %s", result)
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
