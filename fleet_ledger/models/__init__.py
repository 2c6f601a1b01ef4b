"""Models package - Import all domain models."""
from fleet_ledger.models.car import Car
from fleet_ledger.models.ledger import Actor, LedgerEntry, Statement, StatementHistory, StatementStatus
from fleet_ledger.models.rental import Rental, RentalStatus

__all__ = [
    "Car",
    "Actor",
    "LedgerEntry",
    "Statement",
    "StatementHistory",
    "StatementStatus",
    "Rental",
    "RentalStatus",
]
