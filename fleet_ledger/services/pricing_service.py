"""
Pricing pipeline: price -> discount -> commission -> options -> payments.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple
import logging

from fleet_ledger.core.config import settings
from fleet_ledger.core.errors import DomainError, ValidationError
from fleet_ledger.models.rental import Rental, RentalStatus
from fleet_ledger.services import ledger_service
from fleet_ledger.services.commission_service import CommissionSplitter
from fleet_ledger.services.discount_service import DISCOUNT_TIERS, DiscountTier, total_discount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stage:
    """One pipeline stage and the derived fields it needs before it can run."""
    name: str
    compute: Callable[["PricingPipeline", Rental], None]
    requires: Tuple[str, ...]
    status: RentalStatus


class PricingPipeline:
    """
    Runs the pricing stages of a rental in their declared order.

    A stage whose prerequisite is missing first runs every earlier stage up to
    the one producing it. Each stage recomputes its output from the rental's
    current inputs, except payments, which appends new statements to the ledger.
    """

    def __init__(
        self,
        splitter: CommissionSplitter = None,
        discount_tiers: Sequence[DiscountTier] = DISCOUNT_TIERS,
        deductible_reduction_per_day: int = None
    ):
        self.splitter = splitter or CommissionSplitter()
        self.discount_tiers = discount_tiers
        self.deductible_reduction_per_day = (
            settings.DEDUCTIBLE_REDUCTION_PER_DAY
            if deductible_reduction_per_day is None
            else deductible_reduction_per_day
        )

    # Stages

    def calculate_price(self, rental: Rental) -> None:
        day_price = rental.car.price_per_day * rental.number_of_days
        km_price = rental.car.price_per_km * rental.distance
        rental.base_price = int(day_price + km_price)  # No fractions of a minor unit

    def calculate_discount(self, rental: Rental) -> None:
        rental.total_discount = total_discount(
            rental.car.price_per_day, rental.number_of_days, self.discount_tiers
        )
        rental.discounted_price = rental.base_price - rental.total_discount

    def calculate_commission(self, rental: Rental) -> None:
        breakdown = self.splitter.split(rental.discounted_price, rental.number_of_days)
        rental.commission = breakdown
        rental.total_commission = breakdown.total

    def calculate_options(self, rental: Rental) -> None:
        fee = 0
        if rental.deductible_reduction:
            fee = rental.number_of_days * self.deductible_reduction_per_day
        rental.options = {"deductible_reduction": fee}

    def calculate_payments(self, rental: Rental) -> None:
        ledger_service.record_payments(rental)

    # Orchestration

    def stage(self, name: str) -> Stage:
        for stage in STAGES:
            if stage.name == name:
                return stage
        raise ValidationError(f"Unknown pricing stage '{name}'")

    def run(self, rental: Rental, up_to: Optional[str] = None) -> Rental:
        """Run every stage in order, stopping before `up_to` when given."""
        for stage in STAGES:
            if stage.name == up_to:
                break
            self._execute(stage, rental)
        return rental

    def run_through(self, rental: Rental, name: str) -> Rental:
        """Run every stage in order, up to and including `name`."""
        index = STAGE_ORDER.index(name)
        for stage in STAGES[:index + 1]:
            self._execute(stage, rental)
        return rental

    def run_stage(self, rental: Rental, name: str) -> Rental:
        """Run a single stage, healing any missing prerequisite first."""
        stage = self.stage(name)
        for field in stage.requires:
            if getattr(rental, field) is None:
                producer = PRODUCERS[field]
                logger.debug(f"Rental {rental.id}: '{field}' missing for {name}, running through {producer}")
                self.run_through(rental, producer)
        self._execute(stage, rental)
        return rental

    def _execute(self, stage: Stage, rental: Rental) -> None:
        for field in stage.requires:
            if getattr(rental, field) is None:
                raise DomainError(f"Need {field} to calculate {stage.name}")
        stage.compute(self, rental)
        rental.status = stage.status
        logger.debug(f"Rental {rental.id}: {stage.name} done")


STAGES = (
    Stage("price", PricingPipeline.calculate_price, (), RentalStatus.PRICED),
    Stage("discount", PricingPipeline.calculate_discount, ("base_price",), RentalStatus.DISCOUNTED),
    Stage("commission", PricingPipeline.calculate_commission, ("discounted_price",),
          RentalStatus.COMMISSION_SPLIT),
    Stage("options", PricingPipeline.calculate_options, (), RentalStatus.OPTIONS_APPLIED),
    Stage("payments", PricingPipeline.calculate_payments, ("discounted_price", "commission", "options"),
          RentalStatus.PAYMENTS_ISSUED),
)

STAGE_ORDER = tuple(stage.name for stage in STAGES)

# Derived field -> stage that fills it in
PRODUCERS = {
    "base_price": "price",
    "total_discount": "discount",
    "discounted_price": "discount",
    "total_commission": "commission",
    "commission": "commission",
    "options": "options",
}
