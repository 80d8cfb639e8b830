#!/usr/bin/env python3
"""
Seed a few weeks of daily logs into the fitlog API.

Pattern per week (Mon–Sun):
  - Mon/Wed/Fri: strength workout (Push, Pull, Legs)
  - Sat: cardio
  - Tue/Thu/Sun: rest days

Steps ramp up week over week so the trend charts have something to show:
  [6000, 7000, 8000, 9000, 10000, 11000, 12000, 12000]

Usage examples:
  - Against a local backend (registers the account if needed):
      python scripts/seed_weeks.py --base-url http://localhost:8000 \
          --email demo@example.com --password demo-password
  - Against port-forwarded backend:
      kubectl -n fitlog port-forward svc/fitlog-backend 8080:80 &
      python scripts/seed_weeks.py --base-url http://localhost:8080 --email ... --password ...
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
from typing import Dict, Tuple

import requests

logger = logging.getLogger("seed_weeks")

WEEKLY_STEPS = [6000, 7000, 8000, 9000, 10000, 11000, 12000, 12000]

WORKOUTS: Dict[int, str] = {0: "Push", 2: "Pull", 4: "Legs", 5: "Cardio"}


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def round1(x: float) -> float:
    return round(x + 1e-9, 1)


def login(base_url: str, email: str, password: str) -> str:
    """Return a bearer token, registering the account on first use."""
    url = f"{base_url.rstrip('/')}/auth/login"
    r = requests.post(url, json={"email": email, "password": password}, timeout=15)
    if r.status_code == 401:
        r = requests.post(
            f"{base_url.rstrip('/')}/auth/register",
            json={"email": email, "password": password, "name": "Seed"},
            timeout=15,
        )
    if r.status_code >= 300:
        raise RuntimeError(f"auth -> HTTP {r.status_code}: {r.text}")
    return r.json()["access_token"]


def put_json(base_url: str, token: str, path: str, payload: dict) -> None:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.put(url, json=payload, headers={"Authorization": f"Bearer {token}"}, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")


def sleep_window(dow: int) -> Tuple[str, str]:
    """(sleep_time, wake_time); later nights on Fri/Sat."""
    if dow in (4, 5):
        return "00:30", "08:00"
    return "23:00", "06:45"


def seed_week(base_url: str, token: str, week_start: dt.date, steps: int, weight: float) -> float:
    for dow in range(7):
        day = week_start + dt.timedelta(days=dow)
        if day > dt.date.today():
            break
        workout = WORKOUTS.get(dow)
        sleep, wake = sleep_window(dow)
        payload = {
            "weight": round1(weight) if dow == 0 else None,
            "steps": steps + (dow * 250),
            "calories": 2100 if workout else 1900,
            "water_liters": 2.5 if workout else 2.0,
            "workout_done": workout is not None,
            "workout_type": workout,
            "sleep_time": sleep,
            "wake_time": wake,
            "notes": "seed",
        }
        put_json(base_url, token, f"logs/{day.isoformat()}", payload)
    return weight - 0.4


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    ap = argparse.ArgumentParser(description="Seed weeks of daily logs and goals")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    args = ap.parse_args()

    base_url = args.base_url
    token = login(base_url, args.email, args.password)

    put_json(base_url, token, "users/me/goals", {
        "steps_goal": 10000,
        "water_goal_liters": 2.5,
        "workout_days_goal": 4,
        "sleep_goal_hours": 7.5,
        "weight_goal": 76,
    })

    this_monday = monday_of_week(dt.date.today())
    weeks = len(WEEKLY_STEPS)
    week_starts = [this_monday - dt.timedelta(weeks=weeks - 1 - i) for i in range(weeks)]

    weight = 82.0
    for ws, steps in zip(week_starts, WEEKLY_STEPS):
        weight = seed_week(base_url, token, ws, steps, weight)

    logger.info("Seed complete: %d weeks created.", weeks)


if __name__ == "__main__":
    main()
