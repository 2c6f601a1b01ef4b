"""
Pydantic schemas for Car entity.
"""
from pydantic import BaseModel, Field


class CarCreate(BaseModel):
    """Schema for car creation."""
    id: int
    price_per_day: int = Field(ge=0)  # Minor currency units
    price_per_km: int = Field(ge=0)  # Minor currency units
