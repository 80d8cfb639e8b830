import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fitlog.core.security import get_current_user
from fitlog.core.time_utils import hhmm_to_time, validate_hhmm
from fitlog.db import get_db
from fitlog.models.daily_log import DailyLog
from fitlog.models.user import User
from fitlog.schemas.daily_log import DailyLogRead, DailyLogUpsert

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/logs", tags=["logs"])


def normalize_updates(payload: DailyLogUpsert) -> dict:
    """Turn a partial log payload into column values.

    - empty time strings clear the field; malformed ones are rejected (422)
    - workout_type is dropped when this save marks the workout as not done
    - water <= 0 is stored as "not logged"
    - calories are whole numbers
    """
    data = payload.model_dump(exclude_unset=True)

    for field in ("wake_time", "sleep_time"):
        if field in data:
            result = validate_hhmm(data[field])
            if not result.ok:
                raise HTTPException(status_code=422, detail=f"{field}: {result.error}")
            data[field] = hhmm_to_time(result.value)

    if "workout_done" in data and not data["workout_done"]:
        data["workout_type"] = None
    if data.get("workout_type") == "":
        data["workout_type"] = None

    if "water_liters" in data and (data["water_liters"] is None or data["water_liters"] <= 0):
        data["water_liters"] = None

    if data.get("calories") is not None:
        data["calories"] = int(round(data["calories"]))

    return data


def fetch_logs(
    db: Session,
    user_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> list[DailyLog]:
    """Logs for one user in [start_date, end_date], most recent first."""
    query = db.query(DailyLog).filter(DailyLog.user_id == user_id)
    if start_date is not None:
        query = query.filter(DailyLog.date >= start_date)
    if end_date is not None:
        query = query.filter(DailyLog.date <= end_date)
    return query.order_by(DailyLog.date.desc()).all()


@router.get("/", response_model=list[DailyLogRead])
def list_logs(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    List logs, optionally filtered by [start_date, end_date].

    This is what the dashboard and report pages call:
      GET /logs?start_date=2025-01-06&end_date=2025-02-05
    """
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=422, detail="start_date must be on or before end_date")
    return [DailyLogRead.from_row(r) for r in fetch_logs(db, user.id, start_date, end_date)]


@router.get("/{log_date}", response_model=DailyLogRead)
def get_log(
    log_date: date,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    row = (
        db.query(DailyLog)
        .filter(DailyLog.user_id == user.id, DailyLog.date == log_date)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="No log for this date")
    return DailyLogRead.from_row(row)


@router.put("/{log_date}", response_model=DailyLogRead)
def upsert_log(
    log_date: date,
    payload: DailyLogUpsert,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    updates = normalize_updates(payload)

    row = (
        db.query(DailyLog)
        .filter(DailyLog.user_id == user.id, DailyLog.date == log_date)
        .first()
    )
    if not row:
        row = DailyLog(user_id=user.id, date=log_date)
        db.add(row)
        logger.info("Creating log for user %s on %s", user.id, log_date)

    for key, value in updates.items():
        setattr(row, key, value)
    # checked on the merged row; earlier saves may have left workout_done unset or False
    if not row.workout_done:
        row.workout_type = None

    db.commit()
    db.refresh(row)
    return DailyLogRead.from_row(row)
