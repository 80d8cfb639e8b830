"""Monthly report: once per calendar month, summarize each user's logs."""
import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from fitlog.core.metrics import month_bounds, monthly_summary
from fitlog.core.reminders import monthly_report_text
from fitlog.core.time_utils import today_key
from fitlog.db import SessionLocal
from fitlog.jobs.common import configure_logging, for_each_user, record_reminder, reminder_sent_since
from fitlog.models.daily_log import DailyLog

logger = logging.getLogger(__name__)


def run(db: Session, today: Optional[date] = None) -> dict:
    today = today or date.fromisoformat(today_key())
    month_start, month_end = month_bounds(today)
    month_label = today.strftime("%B %Y")
    reports: dict[int, str] = {}

    def handle(db: Session, user) -> bool:
        if reminder_sent_since(db, user.id, "monthly", month_start):
            return False
        logs = (
            db.query(DailyLog)
            .filter(
                DailyLog.user_id == user.id,
                DailyLog.date >= month_start,
                DailyLog.date <= month_end,
            )
            .all()
        )
        text = monthly_report_text(user.name, month_label, monthly_summary(logs))
        record_reminder(db, user.id, "monthly")
        reports[user.id] = text
        # TODO: deliver by email once an outbound mail provider is configured
        logger.info("Monthly report for %s:\n%s", user.email, text)
        return True

    result = for_each_user(db, handle)
    result["reports"] = reports
    logger.info("Monthly reports processed: %d sent", len(reports))
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
