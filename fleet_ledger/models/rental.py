"""
Rental model for fleet-rental pricing.
"""
from datetime import date
from typing import Dict, Optional
import enum

from fleet_ledger.core.errors import DomainError
from fleet_ledger.models.car import Car
from fleet_ledger.models.ledger import Actor, StatementHistory


class RentalStatus(str, enum.Enum):
    """Rental status enumeration, one value per completed pipeline stage."""
    CREATED = "Created"
    PRICED = "Priced"
    DISCOUNTED = "Discounted"
    COMMISSION_SPLIT = "CommissionSplit"
    OPTIONS_APPLIED = "OptionsApplied"
    PAYMENTS_ISSUED = "PaymentsIssued"


def count_days(start_date: date, end_date: date) -> int:
    """
    Number of billable days for a rental period.

    Both ends are counted, so a rental picked up and returned on the same day
    is one day long.
    """
    if end_date < start_date:
        raise DomainError("End of rental period must be later than the beginning of the period")
    return (end_date - start_date).days + 1


def check_distance(distance: int) -> int:
    if distance < 0:
        raise DomainError("Distance can't be negative")
    return distance


class Rental:
    """Rental of one car, with inputs and the derived pricing state."""

    def __init__(
        self,
        id: int,
        car: Car,
        start_date: date,
        end_date: date,
        distance: int,
        deductible_reduction: bool = False,
    ):
        if car is None:
            raise DomainError("Car does not exist")
        self.id = id
        self.car = car
        self.number_of_days = count_days(start_date, end_date)
        self.start_date = start_date
        self.end_date = end_date
        self.distance = check_distance(distance)
        self.deductible_reduction = bool(deductible_reduction)

        self.status = RentalStatus.CREATED
        self.modification_count = 0

        # Derived fields, filled in stage order
        self.base_price: Optional[int] = None
        self.total_discount: Optional[int] = None
        self.discounted_price: Optional[int] = None
        self.total_commission: Optional[int] = None
        self.commission = None  # CommissionBreakdown
        self.options: Optional[Dict[str, int]] = None

        self.ledger: Dict[Actor, StatementHistory] = {
            actor: StatementHistory(actor) for actor in Actor
        }

    def clear_derived(self) -> None:
        """Forget every derived price figure. The ledger is never cleared."""
        self.base_price = None
        self.total_discount = None
        self.discounted_price = None
        self.total_commission = None
        self.commission = None
        self.options = None

    def __repr__(self) -> str:
        return (
            f"Rental(id={self.id}, car={self.car.id}, days={self.number_of_days}, "
            f"distance={self.distance}, status={self.status.value})"
        )
