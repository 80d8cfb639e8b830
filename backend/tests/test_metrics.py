from datetime import date
from types import SimpleNamespace

import pytest

from fitlog.core.metrics import (
    DayStatus,
    GoalType,
    annotate_days,
    completeness_score,
    consistency_score,
    current_streak,
    goal_met,
    logged_consistency,
    month_bounds,
    monthly_summary,
    summarize,
    trend_series,
)
from fitlog.core.time_utils import sleep_hours


def make_log(**overrides):
    fields = dict(
        date="2025-01-06",
        weight=None,
        steps=None,
        calories=None,
        water_liters=None,
        workout_done=None,
        workout_type=None,
        wake_time=None,
        sleep_time=None,
        notes=None,
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_goals(**overrides):
    fields = dict(steps_goal=None, water_goal_liters=None, sleep_goal_hours=None)
    fields.update(overrides)
    return SimpleNamespace(**fields)


def days(*flags):
    return [DayStatus(date=f"2025-01-{20 - i:02d}", met_goal=f) for i, f in enumerate(flags)]


@pytest.mark.parametrize("goal_type", list(GoalType))
def test_missing_log_never_meets_goal(goal_type):
    assert goal_met(None, make_goals(steps_goal=0), goal_type) is False


def test_missing_goals_never_meet_goal():
    assert goal_met(make_log(workout_done=True), None, "workout") is False


def test_workout_requires_explicit_true():
    goals = make_goals()
    assert goal_met(make_log(workout_done=True), goals, GoalType.workout)
    assert not goal_met(make_log(workout_done=False), goals, GoalType.workout)
    assert not goal_met(make_log(workout_done=None), goals, GoalType.workout)


@pytest.mark.parametrize("steps", [None, 0, 500, 20000])
def test_unset_steps_goal_is_always_met(steps):
    assert goal_met(make_log(steps=steps), make_goals(steps_goal=None), "steps")
    assert goal_met(make_log(steps=steps), make_goals(steps_goal=0), "steps")


def test_steps_goal_threshold():
    goals = make_goals(steps_goal=10000)
    assert goal_met(make_log(steps=10000), goals, "steps")
    assert not goal_met(make_log(steps=9999), goals, "steps")
    assert not goal_met(make_log(steps=None), goals, "steps")


def test_water_goal_threshold_and_default():
    assert goal_met(make_log(water_liters=None), make_goals(), "water")
    goals = make_goals(water_goal_liters=2.5)
    assert goal_met(make_log(water_liters=2.5), goals, "water")
    assert not goal_met(make_log(water_liters=2.4), goals, "water")


def test_sleep_needs_times_and_goal():
    goals = make_goals(sleep_goal_hours=7)
    assert goal_met(make_log(wake_time="06:00", sleep_time="23:00"), goals, "sleep")
    assert not goal_met(make_log(wake_time="06:00", sleep_time="23:30"), goals, "sleep")
    assert not goal_met(make_log(wake_time="06:00"), goals, "sleep")
    # no sleep goal set means not met, unlike steps/water
    assert not goal_met(make_log(wake_time="06:00", sleep_time="22:00"), make_goals(), "sleep")


def test_sleep_goal_uses_unrounded_duration():
    goals = make_goals(sleep_goal_hours=8)
    # 7h57m shows as 8.0 hours but falls short of the goal
    assert sleep_hours("07:00", "23:03") == 8.0
    assert not goal_met(make_log(wake_time="07:00", sleep_time="23:03"), goals, "sleep")
    assert goal_met(make_log(wake_time="07:00", sleep_time="23:00"), goals, "sleep")
    assert goal_met(make_log(wake_time="06:30", sleep_time="23:00"), make_goals(sleep_goal_hours=7.5), "sleep")


def test_unknown_goal_type_is_rejected():
    with pytest.raises(ValueError):
        goal_met(make_log(), make_goals(), "protein")


def test_current_streak_stops_at_first_miss():
    assert current_streak(days(True, True, False, True)) == 2
    assert current_streak(days(False, True, True)) == 0
    assert current_streak(days(True, True, True)) == 3
    assert current_streak([]) == 0


def test_consistency_score():
    assert consistency_score([]) == 0
    assert consistency_score(days(True, True, False, False)) == 50
    assert consistency_score(days(True, True, False)) == 67
    assert consistency_score(days(True, False, False)) == 33
    # 1/8 = 12.5 rounds up
    assert consistency_score(days(True, *[False] * 7)) == 13


def test_annotate_days_keeps_order():
    logs = [
        make_log(date=date(2025, 1, 8), workout_done=True),
        make_log(date=date(2025, 1, 7), workout_done=False),
    ]
    annotated = annotate_days(logs, make_goals(), "workout")
    assert annotated == [
        DayStatus(date="2025-01-08", met_goal=True),
        DayStatus(date="2025-01-07", met_goal=False),
    ]


def test_summarize_empty():
    s = summarize([])
    assert (s.count, s.weight_entries, s.workout_days, s.avg_steps) == (0, 0, 0, 0)


def test_summarize_counts_and_average():
    logs = [
        make_log(weight=80.5, steps=10000, workout_done=True),
        make_log(steps=5001),
        make_log(weight=80.1, steps=None, workout_done=False),
    ]
    s = summarize(logs)
    assert s.count == 3
    assert s.weight_entries == 2
    assert s.workout_days == 1
    # (10000 + 5001 + 0) / 3 = 5000.33
    assert s.avg_steps == 5000


def test_completeness_score():
    assert completeness_score(make_log()) == 0
    assert completeness_score(make_log(workout_done=False)) == 25
    full = make_log(steps=1, water_liters=1, workout_done=True, wake_time="07:00", sleep_time="23:00")
    assert completeness_score(full) == 100


def test_logged_consistency():
    logs = [
        make_log(steps=100, water_liters=1.0),
        make_log(steps=100, water_liters=None),
        make_log(steps=0, water_liters=2.0),
        make_log(steps=200, water_liters=0.5),
    ]
    assert logged_consistency(logs) == 50


def test_trend_series_shapes():
    logs = [
        make_log(date="2025-01-06", weight=80, steps=1000, water_liters=2, workout_done=True,
                 workout_type="Legs", wake_time="06:00", sleep_time="22:30"),
        make_log(date="2025-01-07"),
    ]
    series = trend_series(logs)
    assert series["weight"] == [{"date": "2025-01-06", "weight": 80.0}]
    assert [p["steps"] for p in series["steps"]] == [1000, 0]
    assert series["calories"] == []
    assert series["workout"][1] == {"date": "2025-01-07", "workout": 0, "type": "None"}
    assert series["sleep"] == [{"date": "2025-01-06", "hours": 7.5}]


def test_monthly_summary_streak_sorts_by_date():
    logs = [
        make_log(date="2025-01-03", steps=5000, water_liters=2, workout_done=True, calories=2000),
        make_log(date="2025-01-05", steps=8000, water_liters=2, workout_done=True, calories=2200),
        make_log(date="2025-01-04", steps=7000, water_liters=1, workout_done=True),
        make_log(date="2025-01-02", steps=7000, water_liters=None, workout_done=True),
    ]
    s = monthly_summary(logs)
    assert s["workout_days"] == 4
    assert s["total_steps"] == 27000
    assert s["avg_steps"] == 6750
    assert s["total_calories"] == 4200
    assert s["avg_calories"] == 1050
    assert s["streak"] == 3


def test_monthly_summary_empty():
    s = monthly_summary([])
    assert s["avg_steps"] == 0 and s["streak"] == 0


def test_month_bounds():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
