"""
Modification service: adjusts settled rentals and works out what is still owed.
"""
from typing import Any, Dict, List, Optional, Union
import logging

from fleet_ledger.core.errors import DomainError, LedgerError
from fleet_ledger.core.utils import format_error
from fleet_ledger.models.rental import Rental, check_distance, count_days
from fleet_ledger.schemas.rental import RentalModification
from fleet_ledger.services import ledger_service
from fleet_ledger.services.pricing_service import PricingPipeline
from fleet_ledger.services.rental_service import default_pipeline, validate_record

logger = logging.getLogger(__name__)


def apply_modification(
    rental: Rental,
    adjustment: Union[RentalModification, Dict[str, Any]],
    pipeline: PricingPipeline = None
) -> Rental:
    """
    Apply an adjustment to a rental and re-run the full pricing pipeline.

    The payments stage appends fresh, unpaid statements next to the settled
    ones, and every actor's outstanding amount is then recomputed from the
    whole history. The adjustment is checked before anything is changed, so a
    rejected one leaves the rental as it was.
    """
    if rental is None:
        raise DomainError("Rental does not exist")
    modification = validate_record(RentalModification, adjustment)
    if modification.rental_id != rental.id:
        raise DomainError(
            f"Modification for rental {modification.rental_id} applied to rental {rental.id}"
        )

    start_date = modification.start_date or rental.start_date
    end_date = modification.end_date or rental.end_date
    number_of_days = rental.number_of_days
    if modification.start_date is not None or modification.end_date is not None:
        number_of_days = count_days(start_date, end_date)
    distance = rental.distance
    if modification.distance is not None:
        distance = check_distance(modification.distance)

    rental.start_date = start_date
    rental.end_date = end_date
    rental.number_of_days = number_of_days
    rental.distance = distance
    rental.modification_count += 1

    # Every figure is recomputed from the adjusted rental
    rental.clear_derived()
    (pipeline or default_pipeline).run(rental)
    outstanding = ledger_service.refresh_outstanding(rental)
    amounts = {actor.value: amount for actor, amount in outstanding.items()}
    logger.info(f"Rental {rental.id} modified ({rental.modification_count}), outstanding {amounts}")
    return rental


def apply_modifications(
    rentals: Dict[int, Rental],
    modifications: List[Dict[str, Any]],
    errors: Optional[List[Dict[str, Any]]] = None,
    pipeline: PricingPipeline = None
) -> List[Rental]:
    """
    Apply a batch of modifications to the rentals they reference.
    A failing modification is reported to `errors` and the rest still apply.
    """
    modified = []
    for record in modifications:
        try:
            modification = validate_record(RentalModification, record)
            rental = rentals.get(modification.rental_id)
            if rental is None:
                raise DomainError(f"Rental {modification.rental_id} does not exist")
            modified.append(apply_modification(rental, modification, pipeline))
        except LedgerError as e:
            logger.warning(f"Skipping rental modification {record!r}: {e}")
            if errors is not None:
                errors.append(format_error(str(e), {"rental_modification": record}))
    return modified
