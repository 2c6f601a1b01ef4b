"""
Payment ledger service: per-actor statements, settlement and outstanding balances.
"""
from typing import Dict, List
import logging

from fleet_ledger.core.errors import DomainError
from fleet_ledger.models.ledger import Actor, LedgerEntry, Statement
from fleet_ledger.models.rental import Rental

logger = logging.getLogger(__name__)


def build_entries(rental: Rental) -> Dict[Actor, List[LedgerEntry]]:
    """
    Build the signed entries owed by or to each actor for the rental's current figures.
    Entries default to debits; every credit leg is marked debit=False explicitly.
    """
    if rental.total_commission is None or rental.commission is None:
        raise DomainError("Total commission amount needed to calculate payments")
    if rental.discounted_price is None:
        raise DomainError("Need projected price to calculate payments")

    commission = rental.commission
    entries = {
        Actor.DRIVER: [LedgerEntry("rental_price", rental.discounted_price)],
        Actor.OWNER: [
            LedgerEntry("rental_price", rental.discounted_price - rental.total_commission, debit=False)
        ],
        Actor.INSURANCE: [LedgerEntry("insurance_fee", commission.insurance_fee, debit=False)],
        Actor.ASSISTANCE: [LedgerEntry("assistance_fee", commission.assistance_fee, debit=False)],
        Actor.PLATFORM: [LedgerEntry("platform_fee", commission.platform_fee, debit=False)],
    }

    # Optional add-ons
    if rental.deductible_reduction:
        fee = (rental.options or {}).get("deductible_reduction", 0)
        entries[Actor.DRIVER].append(LedgerEntry("deductible_reduction", fee))
        entries[Actor.PLATFORM].append(LedgerEntry("deductible_reduction", fee, debit=False))

    return entries


def record_payments(rental: Rental) -> Dict[Actor, Statement]:
    """Append one new statement per actor to the rental's ledger."""
    statements = {}
    for actor, entries in build_entries(rental).items():
        statement = Statement(actor, entries)
        rental.ledger[actor].add_statement(statement)
        statements[actor] = statement
    amounts = {actor.value: statement.raw_amount for actor, statement in statements.items()}
    logger.debug(f"Rental {rental.id}: recorded statements {amounts}")
    balance = latest_balance(rental)
    if balance != 0:
        logger.warning(f"Rental {rental.id}: statements do not balance, off by {balance}")
    return statements


def issue_payments(rental: Rental) -> int:
    """Settle every pending statement of the rental. Returns how many were settled."""
    settled = sum(history.issue_payments() for history in rental.ledger.values())
    logger.debug(f"Rental {rental.id}: issued {settled} statements")
    return settled


def refresh_outstanding(rental: Rental) -> Dict[Actor, int]:
    """Recompute the outstanding amount of every actor's statement history."""
    return {
        actor: history.amount_outstanding()
        for actor, history in rental.ledger.items()
    }


def latest_balance(rental: Rental) -> int:
    """Signed sum of the most recent statement of every actor."""
    return sum(
        history.latest.raw_amount
        for history in rental.ledger.values()
        if history.latest is not None
    )
