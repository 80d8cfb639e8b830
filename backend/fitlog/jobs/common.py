"""Shared plumbing for the scheduled reminder jobs.

Each job walks all users one by one. A failure for one user is logged
and rolled back; the loop then moves on to the next user.
"""
import logging
from datetime import date, datetime, time, timezone
from typing import Callable, Optional

from sqlalchemy.orm import Session

from fitlog.core.config import settings
from fitlog.core.exceptions import PushDeliveryError, SubscriptionGone
from fitlog.core.push import build_payload, push_configured, send_push
from fitlog.models.push_subscription import PushSubscription
from fitlog.models.reminder_log import ReminderLog
from fitlog.models.user import User

logger = logging.getLogger(__name__)

Sender = Callable[[str, str, str, dict], None]


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_sender(sender: Optional[Sender]) -> Optional[Sender]:
    """Explicit sender wins; otherwise Web Push when VAPID keys are set."""
    if sender is not None:
        return sender
    if push_configured():
        return send_push
    logger.warning("VAPID keys not configured, skipping push notifications")
    return None


def notify_user(
    db: Session,
    user: User,
    title: str,
    body: str,
    url: str,
    sender: Optional[Sender],
) -> int:
    """Push to every subscription of `user`; returns how many were delivered."""
    if sender is None:
        return 0
    subscriptions = db.query(PushSubscription).filter(PushSubscription.user_id == user.id).all()
    payload = build_payload(title, body, url)
    delivered = 0
    for sub in subscriptions:
        try:
            sender(sub.endpoint, sub.p256dh, sub.auth, payload)
            delivered += 1
        except SubscriptionGone:
            logger.info("Removing expired push subscription %s for user %s", sub.id, user.id)
            db.delete(sub)
            db.commit()
        except PushDeliveryError as e:
            logger.error("Failed to send push to %s: %s", user.email, e)
    return delivered


def record_reminder(db: Session, user_id: int, kind: str) -> None:
    db.add(ReminderLog(user_id=user_id, type=kind, sent_at=datetime.now(timezone.utc)))
    db.commit()


def reminder_sent_since(db: Session, user_id: int, kind: str, since: date) -> bool:
    cutoff = datetime.combine(since, time.min, tzinfo=timezone.utc)
    return (
        db.query(ReminderLog)
        .filter(
            ReminderLog.user_id == user_id,
            ReminderLog.type == kind,
            ReminderLog.sent_at >= cutoff,
        )
        .first()
        is not None
    )


def for_each_user(db: Session, handle: Callable[[Session, User], bool]) -> dict:
    """Run `handle` per user. Returns counts of users seen, notified and failed."""
    users = db.query(User).order_by(User.id).all()
    notified = 0
    failed = 0
    for user in users:
        try:
            if handle(db, user):
                notified += 1
        except Exception:
            db.rollback()
            failed += 1
            logger.exception("Reminder failed for user %s", user.id)
    return {"count": len(users), "notified": notified, "failed": failed}
