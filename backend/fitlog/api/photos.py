import logging
import os
import time
from datetime import date

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitlog.core.config import settings
from fitlog.core.constants import PHOTO_EXTENSIONS
from fitlog.core.exceptions import InvalidSignedUrl, StorageError
from fitlog.core.reminders import PhotoReminderState, photo_reminder_due
from fitlog.core.security import get_current_user
from fitlog.core.storage import LocalStorage, get_storage, storage_path_from_reference
from fitlog.core.time_utils import today_key, week_start_key
from fitlog.db import get_db
from fitlog.models.user import User
from fitlog.models.weekly_photo import WeeklyPhoto
from fitlog.schemas.photo import PhotoRead, PhotoReminderRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/photos", tags=["photos"])
files_router = APIRouter(prefix="/files", tags=["photos"])


def _to_read(row: WeeklyPhoto, storage: LocalStorage) -> PhotoRead:
    path = storage_path_from_reference(row.image_url, storage.bucket)
    return PhotoRead(
        id=row.id,
        week_start=row.week_start,
        image_url=row.image_url,
        signed_url=storage.create_signed_url(path),
        created_at=row.created_at,
    )


@router.get("/", response_model=list[PhotoRead])
def list_photos(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    storage: LocalStorage = Depends(get_storage),
):
    rows = (
        db.query(WeeklyPhoto)
        .filter(WeeklyPhoto.user_id == user.id)
        .order_by(WeeklyPhoto.week_start.desc(), WeeklyPhoto.id.desc())
        .all()
    )
    return [_to_read(r, storage) for r in rows]


@router.post("/", response_model=PhotoRead)
def upload_photo(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    storage: LocalStorage = Depends(get_storage),
):
    filename = file.filename or "photo.jpg"
    ext = os.path.splitext(filename)[1].lower()
    content_type = file.content_type or ""
    if ext not in PHOTO_EXTENSIONS or not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Please upload an image file")

    # read at most one byte past the limit
    data = file.file.read(settings.max_photo_bytes + 1)
    if len(data) > settings.max_photo_bytes:
        raise HTTPException(status_code=413, detail="Please upload an image smaller than 5MB")

    week_start = week_start_key(today_key())
    path = f"{user.id}/{week_start}-{int(time.time() * 1000)}{ext}"
    try:
        storage.upload(path, data)
    except StorageError as e:
        logger.error("Photo upload failed for user %s: %s", user.id, e)
        raise HTTPException(status_code=500, detail="Could not store photo")

    # Save the file path (not a URL); signed URLs are generated on read
    row = WeeklyPhoto(user_id=user.id, week_start=date.fromisoformat(week_start), image_url=path)
    db.add(row)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error("Could not save photo row for user %s, removing %s", user.id, path)
        storage.remove(path)
        raise
    db.refresh(row)
    return _to_read(row, storage)


@router.delete("/{photo_id}")
def delete_photo(
    photo_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    storage: LocalStorage = Depends(get_storage),
):
    row = (
        db.query(WeeklyPhoto)
        .filter(WeeklyPhoto.id == photo_id, WeeklyPhoto.user_id == user.id)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Photo not found")

    try:
        storage.remove(storage_path_from_reference(row.image_url, storage.bucket))
    except StorageError as e:
        logger.error("Could not remove photo %s: %s", photo_id, e)
        raise HTTPException(status_code=500, detail="Could not remove stored photo")

    db.delete(row)
    db.commit()
    return {"message": "Photo deleted"}


@router.get("/reminder", response_model=PhotoReminderRead)
def photo_reminder(
    shown: bool = Query(False, description="Whether the reminder was already shown this session"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    today = today_key()
    week_start = week_start_key(today)
    photos = (
        db.query(WeeklyPhoto)
        .filter(WeeklyPhoto.user_id == user.id, WeeklyPhoto.week_start == date.fromisoformat(week_start))
        .all()
    )
    state = PhotoReminderState(shown=shown)
    due = photo_reminder_due(photos, today, state)
    return PhotoReminderRead(
        due=due,
        shown=state.shown,
        week_start=week_start,
        message=(
            "Don't forget to upload your progress photo for this week! "
            "Track your transformation over time."
        ) if due else None,
    )


@files_router.get("/{token}")
def get_signed_file(
    token: str,
    storage: LocalStorage = Depends(get_storage),
):
    try:
        path = storage.resolve_signed_token(token)
        full = storage.open_path(path)
    except InvalidSignedUrl as e:
        raise HTTPException(status_code=403, detail=str(e))
    except StorageError:
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(full)
