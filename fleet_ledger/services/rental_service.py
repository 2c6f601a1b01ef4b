"""
Rental service: builds cars and priced rentals from validated records.
"""
from datetime import date
from typing import Any, Dict, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from fleet_ledger.core.errors import DomainError, ValidationError
from fleet_ledger.models.car import Car
from fleet_ledger.models.rental import Rental
from fleet_ledger.schemas.car import CarCreate
from fleet_ledger.schemas.rental import RentalBase
from fleet_ledger.services import ledger_service
from fleet_ledger.services.pricing_service import PricingPipeline

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

default_pipeline = PricingPipeline()


def validate_record(schema: Type[SchemaT], data: Union[Dict[str, Any], BaseModel]) -> SchemaT:
    """Validate a raw record against a schema, raising the ledger's ValidationError."""
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return schema.model_validate(data)
    except SchemaValidationError as exc:
        # A record that is not an object at all fails with an empty location
        fields = sorted({".".join(str(part) for part in err["loc"]) or "record" for err in exc.errors()})
        raise ValidationError(f"Invalid {schema.__name__}: {', '.join(fields)}") from exc


def build_car(id: int, price_per_day: int, price_per_km: int) -> Car:
    """Build a car. Fails with ValidationError if a required field is missing."""
    record = validate_record(
        CarCreate,
        {"id": id, "price_per_day": price_per_day, "price_per_km": price_per_km},
    )
    return Car(id=record.id, price_per_day=record.price_per_day, price_per_km=record.price_per_km)


def build_rental(
    id: int,
    car: Car,
    start_date: Union[date, str],
    end_date: Union[date, str],
    distance: int,
    deductible_reduction: bool = False,
    pipeline: PricingPipeline = None
) -> Rental:
    """
    Build a rental and run the full pricing pipeline on it.

    Fails with ValidationError on missing fields and with DomainError when the
    car is missing, the end date precedes the start date or the distance is
    negative.
    """
    record = validate_record(
        RentalBase,
        {
            "id": id,
            "start_date": start_date,
            "end_date": end_date,
            "distance": distance,
            "deductible_reduction": False if deductible_reduction is None else deductible_reduction,
        },
    )
    if car is None:
        raise DomainError("Car does not exist")

    rental = Rental(
        id=record.id,
        car=car,
        start_date=record.start_date,
        end_date=record.end_date,
        distance=record.distance,
        deductible_reduction=record.deductible_reduction,
    )
    (pipeline or default_pipeline).run(rental)
    logger.debug(f"Built {rental!r}")
    return rental


def issue_payments(rental: Rental) -> int:
    """Mark every actor's pending statements for the rental as paid."""
    return ledger_service.issue_payments(rental)
