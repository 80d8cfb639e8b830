"""Reminder wording and the in-app photo reminder check.

Message builders are pure so the scheduled jobs and the API produce the
same text. The "already shown this session" flag is carried by an
explicit `PhotoReminderState` handed in by the caller.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from fitlog.core.time_utils import to_date_key, week_start_key


@dataclass
class PhotoReminderState:
    shown: bool = False


def display_name(name: Optional[str]) -> str:
    return name or "there"


def morning_message(name: Optional[str]) -> str:
    return (
        f"Good morning {display_name(name)}! Don't forget to log your fitness data today. "
        "Track your weight, steps, and workouts to stay on track!"
    )


def missing_items(log, water_goal_liters) -> list[str]:
    """What the evening check should nag about for today's log (may be None)."""
    items: list[str] = []
    if log is None or not log.steps:
        items.append("No steps logged today")
    if log is None or not log.workout_done:
        items.append("No workout logged today")
    water = float(log.water_liters or 0) if log is not None else 0.0
    goal = float(water_goal_liters or 0)
    if log is None or water < goal:
        items.append(f"Water intake below goal ({water:g}L / {goal:g}L)")
    return items


def evening_message(name: Optional[str], items: list[str]) -> str:
    return (
        f"Evening reminder for {display_name(name)}: {', '.join(items)}. "
        "Don't forget to log your data before the day ends!"
    )


def weekly_message(photo_count: int) -> tuple[str, str]:
    """(title, body) for the weekly check-in."""
    if photo_count > 0:
        return (
            "Weekly Check-in",
            f"Great job! You've uploaded {photo_count} photo(s) this week. Keep tracking your progress!",
        )
    return (
        "Weekly Photo Reminder",
        "Weekly Photo Reminder: Don't forget to upload your progress photo this week! "
        "Track your transformation over time.",
    )


def monthly_report_text(name: Optional[str], month_label: str, summary: dict) -> str:
    return (
        f"Hi {display_name(name)},\n\n"
        f"Your monthly fitness report for {month_label}:\n\n"
        "Summary:\n"
        f"- Workouts completed: {summary['workout_days']} days\n"
        f"- Average daily steps: {summary['avg_steps']}\n"
        f"- Average daily calories: {summary['avg_calories']}\n"
        f"- Current streak: {summary['streak']} days\n\n"
        "Trends:\n"
        f"- Total steps: {summary['total_steps']:,}\n"
        f"- Total calories logged: {summary['total_calories']:,}\n\n"
        "Keep up the amazing work! Your consistency is building strong habits."
    )


def photo_reminder_due(photos: Iterable, today, state: PhotoReminderState) -> bool:
    """True once per session when no photo exists for the week of `today`.

    Marks `state.shown` when it returns True.
    """
    if state.shown:
        return False
    current_week = week_start_key(today)
    if any(to_date_key(p.week_start) == current_week for p in photos):
        return False
    state.shown = True
    return True
