"""
Pydantic schemas for Rental entity and its modifications.
"""
from pydantic import BaseModel, field_validator
from typing import Any, List, Optional
from datetime import date
from fleet_ledger.schemas.car import CarCreate


class RentalBase(BaseModel):
    """Base rental schema."""
    id: int
    start_date: date
    end_date: date
    distance: int  # Kilometres
    deductible_reduction: Optional[bool] = False

    @field_validator("deductible_reduction", mode="before")
    @classmethod
    def default_deductible_reduction(cls, v):
        """An explicit null means the option was not chosen."""
        if v is None:
            return False
        return v


class RentalCreate(RentalBase):
    """Schema for rental creation from a batch record."""
    car_id: int


class RentalModification(BaseModel):
    """Schema for a post-settlement rental adjustment. Omitted fields are left as they are."""
    id: Optional[int] = None  # Identifier of the modification itself, informational only
    rental_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    distance: Optional[int] = None


class BatchRequest(BaseModel):
    """
    Schema for a whole batch of cars, rentals and modifications.
    Records stay raw here so that each one is validated, and may fail, on its own.
    """
    cars: List[Any] = []
    rentals: List[Any] = []
    rental_modifications: List[Any] = []


class QuoteRequest(BaseModel):
    """Schema for pricing a single rental of a single car."""
    car: CarCreate
    rental: RentalBase
