from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.sql import func
from fitlog.db import Base


class Food(Base):
    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False, index=True)
    calories_per_unit = Column(Numeric(7, 2), nullable=False)
    protein_per_unit = Column(Numeric(7, 2), nullable=False, server_default="0")
    carbs_per_unit = Column(Numeric(7, 2), nullable=False, server_default="0")
    unit = Column(String(20), nullable=False)  # e.g. "100g"

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
