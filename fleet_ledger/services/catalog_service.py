"""
Catalog service: id-keyed cars and rentals for a batch, loaded record by record.
"""
from typing import Any, Dict, List, Optional, Tuple
import logging

from fleet_ledger.core.config import settings
from fleet_ledger.core.errors import DomainError, LedgerError, ValidationError
from fleet_ledger.core.utils import format_error
from fleet_ledger.models.car import Car
from fleet_ledger.models.rental import Rental
from fleet_ledger.schemas.car import CarCreate
from fleet_ledger.schemas.rental import BatchRequest, RentalCreate
from fleet_ledger.services import ledger_service, modification_service, report_service
from fleet_ledger.services.pricing_service import PricingPipeline
from fleet_ledger.services.rental_service import build_car, build_rental, validate_record

logger = logging.getLogger(__name__)


class RentalCatalog:
    """Cars and rentals of one batch, keyed by id. Ids are never reused or overwritten."""

    def __init__(self, pipeline: PricingPipeline = None):
        self.cars: Dict[int, Car] = {}
        self.rentals: Dict[int, Rental] = {}
        self.pipeline = pipeline

    def add_car(self, car: Car) -> Car:
        if car.id in self.cars:
            raise ValidationError(f"Repeated car id {car.id}")
        self.cars[car.id] = car
        return car

    def add_rental(self, rental: Rental) -> Rental:
        if rental.id in self.rentals:
            raise ValidationError(f"Repeated rental id {rental.id}")
        self.rentals[rental.id] = rental
        return rental

    def get_car(self, car_id: int) -> Car:
        car = self.cars.get(car_id)
        if car is None:
            raise DomainError(f"Car {car_id} does not exist")
        return car

    def load_cars(self, records: List[Dict[str, Any]], errors: Optional[List[Dict[str, Any]]] = None) -> List[Car]:
        """Build and register cars. A bad record is reported and skipped."""
        loaded = []
        for record in records:
            try:
                data = validate_record(CarCreate, record)
                loaded.append(self.add_car(build_car(data.id, data.price_per_day, data.price_per_km)))
            except LedgerError as e:
                _report_failure("car", record, e, errors)
        logger.info(f"Loaded {len(loaded)} of {len(records)} cars")
        return loaded

    def load_rentals(
        self,
        records: List[Dict[str, Any]],
        errors: Optional[List[Dict[str, Any]]] = None
    ) -> List[Rental]:
        """Build, price and register rentals. A bad record is reported and skipped."""
        loaded = []
        for record in records:
            try:
                data = validate_record(RentalCreate, record)
                if data.id in self.rentals:
                    raise ValidationError(f"Repeated rental id {data.id}")
                rental = build_rental(
                    data.id,
                    self.get_car(data.car_id),
                    data.start_date,
                    data.end_date,
                    data.distance,
                    data.deductible_reduction,
                    pipeline=self.pipeline,
                )
                loaded.append(self.add_rental(rental))
            except LedgerError as e:
                _report_failure("rental", record, e, errors)
        logger.info(f"Loaded {len(loaded)} of {len(records)} rentals")
        return loaded

    def issue_payments(self) -> int:
        """Settle every pending statement of every rental."""
        return sum(ledger_service.issue_payments(rental) for rental in self.rentals.values())


def _report_failure(kind: str, record: Any, error: LedgerError, errors: Optional[List[Dict[str, Any]]]) -> None:
    logger.warning(f"Skipping {kind} {record!r}: {error}")
    if errors is not None:
        errors.append(format_error(str(error), {kind: record}))


def process_batch(
    payload: Any,
    style: str = None,
    pipeline: PricingPipeline = None
) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """
    Run a whole batch: load cars and rentals, settle the initial payments,
    apply modifications and build the report.

    Returns the report and the list of records that could not be processed.
    """
    report_style = report_service.resolve_style(style or settings.DEFAULT_REPORT_STYLE)
    batch = validate_record(BatchRequest, payload)
    errors: List[Dict[str, Any]] = []

    catalog = RentalCatalog(pipeline=pipeline)
    catalog.load_cars(batch.cars, errors)
    catalog.load_rentals(batch.rentals, errors)

    # Settle the initial figures before any modification
    catalog.issue_payments()

    modification_service.apply_modifications(
        catalog.rentals, batch.rental_modifications, errors, pipeline=pipeline
    )

    report = report_service.build_report(catalog.rentals.values(), report_style)
    if errors:
        logger.warning(f"Batch finished with {len(errors)} rejected records")
    return report, errors
