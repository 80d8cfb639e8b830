from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from fitlog.api.logs import fetch_logs
from fitlog.core.export import report_filename, to_csv
from fitlog.core.metrics import (
    GoalType,
    annotate_days,
    consistency_score,
    current_streak,
    logged_consistency,
    month_bounds,
    summarize,
    trend_series,
)
from fitlog.core.security import get_current_user
from fitlog.core.time_utils import months_before, today_key
from fitlog.db import get_db
from fitlog.models.user import User
from fitlog.schemas.daily_log import DailyLogRead
from fitlog.schemas.report import (
    CalendarDay,
    CalendarRead,
    ConsistencyRead,
    ReportSummaryRead,
)

router = APIRouter(prefix="/reports", tags=["reports"])
calendar_router = APIRouter(prefix="/calendar", tags=["reports"])


def _resolve_range(start_date: Optional[date], end_date: Optional[date]) -> tuple[date, date]:
    """Default to the last month ending today."""
    end = end_date or date.fromisoformat(today_key())
    start = start_date or months_before(end, 1)
    if start > end:
        raise HTTPException(status_code=422, detail="start_date must be on or before end_date")
    return start, end


def _records(db: Session, user_id: int, start: date, end: date) -> list[DailyLogRead]:
    return [DailyLogRead.from_row(r) for r in fetch_logs(db, user_id, start, end)]


@router.get("/summary", response_model=ReportSummaryRead)
def report_summary(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    start, end = _resolve_range(start_date, end_date)
    summary = summarize(_records(db, user.id, start, end))
    return ReportSummaryRead(
        start_date=start,
        end_date=end,
        count=summary.count,
        weight_entries=summary.weight_entries,
        workout_days=summary.workout_days,
        avg_steps=summary.avg_steps,
    )


@router.get("/export")
def export_csv(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Download logs in range as CSV, most recent day first:
      GET /reports/export?start_date=2025-01-01&end_date=2025-01-31
    """
    start, end = _resolve_range(start_date, end_date)
    logs = _records(db, user.id, start, end)
    if not logs:
        raise HTTPException(status_code=404, detail="No data found for the selected date range")
    filename = report_filename(start.isoformat(), end.isoformat())
    return Response(
        content=to_csv(logs),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/series")
def report_series(
    view: Optional[str] = Query(None, pattern="^(week|month)$"),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Chart data for the analytics page, oldest day first."""
    if view == "week":
        end = date.fromisoformat(today_key())
        start = end - timedelta(weeks=1)
    else:
        start, end = _resolve_range(start_date, end_date)
    logs = list(reversed(_records(db, user.id, start, end)))
    return {
        "start_date": start,
        "end_date": end,
        "overall_consistency": logged_consistency(logs),
        "series": trend_series(logs),
    }


@router.get("/consistency", response_model=ConsistencyRead)
def report_consistency(
    goal: GoalType = Query(GoalType.workout),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    start, end = _resolve_range(start_date, end_date)
    # fetch_logs returns most recent first, which current_streak relies on
    days = annotate_days(_records(db, user.id, start, end), user, goal)
    return ConsistencyRead(
        goal=goal.value,
        score=consistency_score(days),
        streak=current_streak(days),
        days=len(days),
    )


@calendar_router.get("/", response_model=CalendarRead)
def month_calendar(
    month: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}$", description="YYYY-MM, defaults to this month"),
    goal: GoalType = Query(GoalType.workout),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Per-day goal status for one month plus the streak within it."""
    if month:
        try:
            anchor = date.fromisoformat(f"{month}-01")
        except ValueError:
            raise HTTPException(status_code=422, detail="month must be YYYY-MM")
    else:
        anchor = date.fromisoformat(today_key())
    first, last = month_bounds(anchor)

    logs = _records(db, user.id, first, last)
    annotated = annotate_days(logs, user, goal)
    statuses = {d.date: d.met_goal for d in annotated}

    days: list[CalendarDay] = []
    current = first
    while current <= last:
        key = current.isoformat()
        if key not in statuses:
            status = "empty"
        else:
            status = "met" if statuses[key] else "not-met"
        days.append(CalendarDay(date=current, status=status))
        current += timedelta(days=1)

    return CalendarRead(
        month=first.strftime("%Y-%m"),
        goal=goal.value,
        streak=current_streak(annotated),
        days=days,
    )
