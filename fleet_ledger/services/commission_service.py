"""
Commission split between insurance, roadside assistance and the platform.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from fleet_ledger.core.config import settings


@dataclass(frozen=True)
class CommissionBreakdown:
    """Total commission and its three components, in minor currency units."""
    total: int
    insurance_fee: int
    assistance_fee: int
    platform_fee: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "insurance_fee": self.insurance_fee,
            "assistance_fee": self.assistance_fee,
            "platform_fee": self.platform_fee,
        }


def _exact(rate) -> Decimal:
    """Exact decimal form of a configured rate (0.3 is three tenths, not its float)."""
    return Decimal(str(rate))


class CommissionSplitter:
    """Splits the commission taken on a discounted rental price."""

    def __init__(
        self,
        commission_rate: float = None,
        insurance_share: float = None,
        assistance_fee_per_day: int = None
    ):
        self.commission_rate = _exact(settings.COMMISSION_RATE if commission_rate is None else commission_rate)
        self.insurance_share = _exact(settings.INSURANCE_SHARE if insurance_share is None else insurance_share)
        self.assistance_fee_per_day = (
            settings.ASSISTANCE_FEE_PER_DAY if assistance_fee_per_day is None else assistance_fee_per_day
        )

    def split(self, discounted_price: int, number_of_days: int) -> CommissionBreakdown:
        """
        Split the commission on a discounted price.

        The platform fee is whatever is left once insurance and assistance are
        paid. Long, cheap rentals can leave it negative; it is not clamped.
        """
        total = int(discounted_price * self.commission_rate)
        insurance_fee = int(total * self.insurance_share)
        assistance_fee = number_of_days * self.assistance_fee_per_day
        platform_fee = total - insurance_fee - assistance_fee
        return CommissionBreakdown(
            total=total,
            insurance_fee=insurance_fee,
            assistance_fee=assistance_fee,
            platform_fee=platform_fee,
        )
