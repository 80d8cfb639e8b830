"""Derived metrics over daily logs.

Every function here is pure: it takes already-fetched records (ORM rows or
pydantic schemas, anything exposing the DailyLog attributes) and returns
plain values. Missing data never raises; it produces False or 0.
"""
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Optional, Sequence

from fitlog.core.time_utils import sleep_hours, sleep_minutes, time_to_hhmm, to_date_key


class GoalType(str, Enum):
    workout = "workout"
    steps = "steps"
    water = "water"
    sleep = "sleep"


@dataclass(frozen=True)
class DayStatus:
    date: str
    met_goal: bool


@dataclass(frozen=True)
class ReportSummary:
    count: int
    weight_entries: int
    workout_days: int
    avg_steps: int


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards
    return int(math.floor(value + 0.5))


def log_sleep_hours(log) -> Optional[float]:
    wake = time_to_hhmm(getattr(log, "wake_time", None))
    sleep = time_to_hhmm(getattr(log, "sleep_time", None))
    if not wake or not sleep:
        return None
    return sleep_hours(wake, sleep)


def goal_met(log, goals, goal_type: GoalType | str) -> bool:
    """Decide whether `log` meets the user's goal of `goal_type`.

    Steps and water count as met when the user never set a threshold.
    Workout and sleep always need recorded data.
    """
    if log is None or goals is None:
        return False

    goal_type = GoalType(goal_type)
    if goal_type is GoalType.workout:
        return getattr(log, "workout_done", None) is True

    if goal_type is GoalType.steps:
        target = getattr(goals, "steps_goal", None)
        if not target:
            return True
        return (getattr(log, "steps", None) or 0) >= target

    if goal_type is GoalType.water:
        target = getattr(goals, "water_goal_liters", None)
        if not target:
            return True
        return float(getattr(log, "water_liters", None) or 0) >= float(target)

    # sleep, compared unrounded: 7h57m does not meet an 8h goal
    target = getattr(goals, "sleep_goal_hours", None)
    wake = time_to_hhmm(getattr(log, "wake_time", None))
    sleep = time_to_hhmm(getattr(log, "sleep_time", None))
    if not target or not wake or not sleep:
        return False
    return sleep_minutes(wake, sleep) >= float(target) * 60


def annotate_days(logs: Iterable, goals, goal_type: GoalType | str) -> list[DayStatus]:
    """Map each log to a DayStatus, keeping the input order."""
    return [
        DayStatus(date=to_date_key(log.date), met_goal=goal_met(log, goals, goal_type))
        for log in logs
    ]


def current_streak(days: Sequence[DayStatus]) -> int:
    """Count consecutive met days from the front of `days`.

    `days` MUST already be sorted by date, most recent first. Nothing is
    sorted here; an unsorted input gives a meaningless count.
    """
    streak = 0
    for day in days:
        if day.met_goal is not True:
            break
        streak += 1
    return streak


def consistency_score(days: Sequence[DayStatus]) -> int:
    """Percentage (0..100) of days meeting the goal; 0 for no days."""
    if not days:
        return 0
    met = sum(1 for d in days if d.met_goal is True)
    return round_half_up(100 * met / len(days))


def summarize(logs: Sequence) -> ReportSummary:
    count = len(logs)
    if count == 0:
        return ReportSummary(count=0, weight_entries=0, workout_days=0, avg_steps=0)
    total_steps = sum(getattr(log, "steps", None) or 0 for log in logs)
    return ReportSummary(
        count=count,
        weight_entries=sum(1 for log in logs if getattr(log, "weight", None)),
        workout_days=sum(1 for log in logs if getattr(log, "workout_done", None)),
        avg_steps=round_half_up(total_steps / count),
    )


# --------- Analytics --------- #

def completeness_score(log) -> int:
    """How much of a day was filled in, in steps of 25."""
    score = 0
    if getattr(log, "steps", None):
        score += 25
    if getattr(log, "water_liters", None):
        score += 25
    if getattr(log, "workout_done", None) is not None:
        score += 25
    if getattr(log, "wake_time", None) and getattr(log, "sleep_time", None):
        score += 25
    return score


def logged_consistency(logs: Iterable) -> int:
    """Share of days with both steps and water recorded (> 0)."""
    days = [
        DayStatus(
            date=to_date_key(log.date),
            met_goal=(log.steps or 0) > 0 and float(log.water_liters or 0) > 0,
        )
        for log in logs
    ]
    return consistency_score(days)


def trend_series(logs: Iterable) -> dict[str, list[dict]]:
    """Chart-ready series keyed by metric, in input order."""
    series: dict[str, list[dict]] = {
        "weight": [],
        "steps": [],
        "calories": [],
        "water": [],
        "workout": [],
        "sleep": [],
        "completeness": [],
    }
    for log in logs:
        key = to_date_key(log.date)
        if log.weight:
            series["weight"].append({"date": key, "weight": float(log.weight)})
        series["steps"].append({"date": key, "steps": log.steps or 0})
        if log.calories:
            series["calories"].append({"date": key, "calories": log.calories})
        series["water"].append({"date": key, "water": float(log.water_liters or 0)})
        series["workout"].append({
            "date": key,
            "workout": 1 if log.workout_done else 0,
            "type": log.workout_type or "None",
        })
        hours = log_sleep_hours(log)
        if hours is not None:
            series["sleep"].append({"date": key, "hours": hours})
        series["completeness"].append({"date": key, "score": completeness_score(log)})
    return series


def _fully_logged(log) -> bool:
    return bool(log.steps and log.water_liters and log.workout_done)


def monthly_summary(logs: Sequence) -> dict:
    """Totals and averages for a month of logs.

    The streak here counts days with steps, water and a workout all
    recorded, walking back from the latest logged day.
    """
    count = len(logs)
    total_steps = sum(log.steps or 0 for log in logs)
    total_calories = sum(log.calories or 0 for log in logs)
    ordered = sorted(logs, key=lambda log: to_date_key(log.date), reverse=True)
    days = [DayStatus(date=to_date_key(log.date), met_goal=_fully_logged(log)) for log in ordered]
    return {
        "workout_days": sum(1 for log in logs if log.workout_done),
        "total_steps": total_steps,
        "avg_steps": round_half_up(total_steps / count) if count else 0,
        "total_calories": total_calories,
        "avg_calories": round_half_up(total_calories / count) if count else 0,
        "streak": current_streak(days),
    }


def month_bounds(day: date) -> tuple[date, date]:
    import calendar
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)
