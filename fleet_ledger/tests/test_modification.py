"""
Tests for modifying settled rentals.
"""
import pytest
from fleet_ledger.core.errors import DomainError
from fleet_ledger.models.ledger import Actor
from fleet_ledger.services.modification_service import apply_modification, apply_modifications
from fleet_ledger.services.rental_service import issue_payments
from fleet_ledger.services.report_service import outstanding


def test_distance_change_outstanding(rental):
    """Going from 100 to 150 km leaves each actor with the difference to settle."""
    issue_payments(rental)
    apply_modification(rental, {"rental_id": 1, "distance": 150})

    assert rental.discounted_price == 7100
    assert rental.total_commission == 2130
    assert all(len(history) == 2 for history in rental.ledger.values())
    assert outstanding(rental) == [
        {"who": "driver", "type": "debit", "amount": 500},
        {"who": "owner", "type": "credit", "amount": 350},
        {"who": "insurance", "type": "credit", "amount": 75},
        {"who": "assistance", "type": "credit", "amount": 0},
        {"who": "platform", "type": "credit", "amount": 75},
    ]
    assert sum(history.outstanding_raw for history in rental.ledger.values()) == 0


def test_date_change_recomputes_days(rental):
    """Moving the end date a day later adds a discounted day."""
    issue_payments(rental)
    apply_modification(rental, {"rental_id": 1, "end_date": "2017-12-11"})

    assert rental.number_of_days == 4
    assert rental.discounted_price == 8400
    assert rental.ledger[Actor.DRIVER].outstanding_type == "debit"
    assert rental.ledger[Actor.DRIVER].outstanding_amount == 1800
    assert rental.ledger[Actor.OWNER].outstanding_amount == 1260
    assert rental.ledger[Actor.INSURANCE].outstanding_amount == 270
    assert rental.ledger[Actor.ASSISTANCE].outstanding_amount == 100
    assert rental.ledger[Actor.PLATFORM].outstanding_amount == 170


def test_modification_counts(rental):
    """A rental can be modified again after being modified."""
    issue_payments(rental)
    apply_modification(rental, {"rental_id": 1, "distance": 150})
    apply_modification(rental, {"rental_id": 1, "distance": 100})

    assert rental.modification_count == 2
    assert len(rental.ledger[Actor.DRIVER]) == 3
    # Settled 6600, then two pending statements of 7100 and 6600
    assert rental.ledger[Actor.DRIVER].outstanding_raw == 6600 - 7100 - 6600


def test_invalid_dates_leave_rental_unchanged(rental):
    """An end date before the start date is rejected before anything changes."""
    issue_payments(rental)
    with pytest.raises(DomainError):
        apply_modification(rental, {"rental_id": 1, "start_date": "2017-12-20", "distance": 400})

    assert rental.distance == 100
    assert rental.number_of_days == 3
    assert rental.modification_count == 0
    assert len(rental.ledger[Actor.DRIVER]) == 1


def test_negative_distance_rejected(rental):
    """Distance cannot be modified below zero."""
    with pytest.raises(DomainError):
        apply_modification(rental, {"rental_id": 1, "distance": -1})


def test_missing_rental_rejected():
    """There is nothing to modify without a rental."""
    with pytest.raises(DomainError):
        apply_modification(None, {"rental_id": 1, "distance": 150})


def test_batch_modifications_collect_failures(rental):
    """A modification for an unknown rental is reported and the others still apply."""
    issue_payments(rental)
    errors = []
    modified = apply_modifications(
        {rental.id: rental},
        [{"rental_id": 42, "distance": 10}, {"rental_id": 1, "distance": 150}],
        errors,
    )

    assert modified == [rental]
    assert len(errors) == 1
    assert "does not exist" in errors[0]["error"]
    assert rental.distance == 150


def test_modification_replaces_stale_figures(rental):
    """Figures left on the rental before an adjustment do not survive it."""
    issue_payments(rental)
    rental.options = {"deductible_reduction": 999, "gps": 50}
    rental.total_discount = 1
    apply_modification(rental, {"rental_id": 1, "distance": 150})

    assert rental.options == {"deductible_reduction": 0}
    assert rental.total_discount == 400
    assert rental.discounted_price == 7100
