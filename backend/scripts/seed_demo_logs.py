from datetime import date, time, timedelta
import logging
import random

from fitlog.core.security import hash_password
from fitlog.core.constants import WORKOUT_TYPES
from fitlog.db import Base, SessionLocal, engine
from fitlog.models.daily_log import DailyLog
from fitlog.models.user import User

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@example.com"


def get_demo_user(db) -> User:
    """Fetch (or create) the demo account with a typical set of goals."""
    user = db.query(User).filter(User.email == DEMO_EMAIL).first()
    if user:
        return user
    user = User(
        email=DEMO_EMAIL,
        password_hash=hash_password("demo-password"),
        name="Demo",
        steps_goal=10000,
        water_goal_liters=2.5,
        workout_days_goal=4,
        sleep_goal_hours=8,
        weight_goal=75,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def clear_recent_logs(db, user_id: int, days: int = 120) -> None:
    """Delete logs in the last N days so we can reseed cleanly."""
    cutoff = date.today() - timedelta(days=days)
    db.query(DailyLog).filter(DailyLog.user_id == user_id, DailyLog.date >= cutoff).delete()
    db.commit()


def seed_demo_logs(db, user_id: int, days: int = 84) -> None:
    """Insert one log per day for the last `days` days, skipping a few."""
    today = date.today()
    weight = 82.0
    logs_to_add = []

    for offset in range(days, -1, -1):
        d = today - timedelta(days=offset)
        # roughly one missed day a week
        if random.random() < 0.14:
            continue

        weight = round(weight - random.uniform(-0.2, 0.35), 1)
        workout = d.weekday() in (0, 2, 4, 5) and random.random() < 0.85
        logs_to_add.append(
            DailyLog(
                user_id=user_id,
                date=d,
                weight=weight if d.weekday() == 0 else None,
                steps=random.randint(4000, 14000),
                calories=random.randint(1700, 2600),
                water_liters=round(random.uniform(1.5, 3.5), 1),
                workout_done=workout,
                workout_type=random.choice(WORKOUT_TYPES[:-1]) if workout else None,
                sleep_time=time(random.choice([22, 23, 0]), random.choice([0, 15, 30, 45])),
                wake_time=time(random.choice([6, 7]), random.choice([0, 15, 30])),
            )
        )

    if logs_to_add:
        db.add_all(logs_to_add)
        db.commit()

    logger.info("Seeded %d demo logs", len(logs_to_add))


def main():
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = get_demo_user(db)
        clear_recent_logs(db, user.id, days=150)
        seed_demo_logs(db, user.id)
    finally:
        db.close()


if __name__ == "__main__":
    main()
