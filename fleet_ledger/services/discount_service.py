"""
Length-of-rental discount, accumulated day by day.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence
import math


@dataclass(frozen=True)
class DiscountTier:
    """Discount rate applied to every day whose index falls in [first_day, last_day]."""
    first_day: int
    last_day: float
    rate: Decimal

    def covers(self, day: int) -> bool:
        return self.first_day <= day <= self.last_day


DISCOUNT_TIERS = (
    DiscountTier(0, 1, Decimal("0")),
    DiscountTier(2, 4, Decimal("0.1")),
    DiscountTier(5, 10, Decimal("0.3")),
    DiscountTier(11, math.inf, Decimal("0.5")),
)


def rate_for_day(day: int, tiers: Sequence[DiscountTier] = DISCOUNT_TIERS) -> Decimal:
    """Return the discount rate for a day index (0 when no tier covers it)."""
    for tier in tiers:
        if tier.covers(day):
            return tier.rate
    return Decimal(0)


def total_discount(
    price_per_day: int,
    number_of_days: int,
    tiers: Sequence[DiscountTier] = DISCOUNT_TIERS
) -> int:
    """
    Discount for a whole rental.

    Each day 1..number_of_days is discounted at its own tier's rate, so a
    ten-day rental gets 0% on day 1, 10% on days 2-4 and 30% on days 5-10.
    The exact sum is truncated once, at the end.
    """
    discount = Decimal(0)
    for day in range(1, number_of_days + 1):
        discount += price_per_day * rate_for_day(day, tiers)
    return int(discount)
