"""
Car model shared by every rental that references it.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Car:
    """Car with its pricing, in minor currency units."""
    id: int
    price_per_day: int
    price_per_km: int
