from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FoodCreate(BaseModel):
    name: str = Field(..., min_length=1)
    calories_per_unit: float = Field(..., ge=0)
    protein_per_unit: Optional[float] = Field(None, ge=0)
    carbs_per_unit: Optional[float] = Field(None, ge=0)
    unit: str = "100g"


class FoodRead(BaseModel):
    id: int
    name: str
    calories_per_unit: float
    protein_per_unit: float
    carbs_per_unit: float
    unit: str

    model_config = ConfigDict(from_attributes=True)
