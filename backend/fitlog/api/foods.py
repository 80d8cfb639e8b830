from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fitlog.core.constants import FOOD_SEARCH_LIMIT
from fitlog.core.security import get_current_user
from fitlog.db import get_db
from fitlog.models.food import Food
from fitlog.models.user import User
from fitlog.schemas.food import FoodCreate, FoodRead

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("/", response_model=list[FoodRead])
def search_foods(
    q: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    query = db.query(Food)
    if q:
        query = query.filter(Food.name.ilike(f"%{q.strip()}%"))
    return query.order_by(Food.name.asc()).limit(FOOD_SEARCH_LIMIT).all()


@router.post("/", response_model=FoodRead)
def add_food(
    payload: FoodCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    food = Food(
        name=payload.name.strip(),
        calories_per_unit=payload.calories_per_unit,
        protein_per_unit=payload.protein_per_unit or 0,
        carbs_per_unit=payload.carbs_per_unit or 0,
        unit=payload.unit,
    )
    db.add(food)
    db.commit()
    db.refresh(food)
    return food
