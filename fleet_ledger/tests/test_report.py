"""
Tests for report styles and read accessors.
"""
import pytest
from fleet_ledger.core.errors import ValidationError
from fleet_ledger.services import report_service
from fleet_ledger.services.catalog_service import process_batch
from fleet_ledger.services.rental_service import build_rental


@pytest.fixture
def plain_batch(batch_payload):
    """Batch without modifications."""
    batch_payload["rental_modifications"] = []
    return batch_payload


@pytest.mark.parametrize("name, style", [
    ("level1", "price"),
    ("level2", "price"),
    ("level3", "commission"),
    ("level4", "options"),
    ("level5", "actions"),
    ("level6", "modifications"),
    ("actions", "actions"),
])
def test_resolve_style(name, style):
    """Level aliases map onto named styles."""
    assert report_service.resolve_style(name).name == style


def test_resolve_unknown_style():
    """Unknown styles are a validation error."""
    with pytest.raises(ValidationError):
        report_service.resolve_style("fancy")


def test_price_report(plain_batch):
    """Price style reports the discounted price of every rental."""
    report, _ = process_batch(plain_batch, "price")
    assert report == {"rentals": [
        {"id": 1, "price": 6600},
        {"id": 2, "price": 14300},
        {"id": 3, "price": 10650},
    ]}


def test_commission_report(plain_batch):
    """Commission style adds the commission split."""
    report, _ = process_batch(plain_batch, "commission")
    assert report["rentals"][0] == {
        "id": 1,
        "price": 6600,
        "commission": {"insurance_fee": 990, "assistance_fee": 300, "platform_fee": 690},
    }
    assert report["rentals"][1]["commission"] == {
        "insurance_fee": 2145, "assistance_fee": 500, "platform_fee": 1645
    }


def test_options_report(plain_batch):
    """Options style adds the add-on fees."""
    report, _ = process_batch(plain_batch, "options")
    assert report["rentals"][0]["options"] == {"deductible_reduction": 1200}
    assert report["rentals"][1]["options"] == {"deductible_reduction": 0}
    assert list(report["rentals"][0]) == ["id", "price", "options", "commission"]


def test_actions_report(plain_batch):
    """Actions style lists each actor's signed amount."""
    report, _ = process_batch(plain_batch, "actions")
    assert report["rentals"][0] == {
        "id": 1,
        "actions": [
            {"who": "driver", "type": "debit", "amount": 7800},
            {"who": "owner", "type": "credit", "amount": 4620},
            {"who": "insurance", "type": "credit", "amount": 990},
            {"who": "assistance", "type": "credit", "amount": 300},
            {"who": "platform", "type": "credit", "amount": 1890},
        ],
    }


def test_modifications_report_skips_unmodified(plain_batch):
    """Without modifications there is nothing outstanding to report."""
    report, _ = process_batch(plain_batch, "modifications")
    assert report == {"rental_modifications": []}


def test_rental_missing_required_field_is_skipped(car):
    """A rental lacking a required figure is left out of the report."""
    priced = build_rental(1, car, "2017-12-08", "2017-12-10", 100)
    unpriced = build_rental(2, car, "2017-12-08", "2017-12-10", 100)
    unpriced.clear_derived()

    report = report_service.build_report([priced, unpriced], "commission")
    assert [item["id"] for item in report["rentals"]] == [1]
