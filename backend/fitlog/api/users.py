from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fitlog.core.security import get_current_user
from fitlog.db import get_db
from fitlog.models.user import User
from fitlog.schemas.user import PreferencesUpdate, UserGoalsUpdate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_me(user: User = Depends(get_current_user)):
    return user


@router.put("/me/goals", response_model=UserRead)
def update_goals(
    payload: UserGoalsUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    # Only touch the goals the client sent; explicit nulls clear a goal
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    return user


@router.put("/me/preferences", response_model=UserRead)
def update_preferences(
    payload: PreferencesUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    user.dark_mode = payload.dark_mode
    db.commit()
    db.refresh(user)
    return user
