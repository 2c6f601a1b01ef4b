"""
Shared fixtures for pricing and ledger tests.
"""
import pytest
from datetime import date
from fleet_ledger.services.rental_service import build_car, build_rental


@pytest.fixture
def car():
    """Car from the worked example: 2000 per day, 10 per km."""
    return build_car(1, 2000, 10)


@pytest.fixture
def rental(car):
    """Three-day rental over 100 km, fully priced."""
    return build_rental(1, car, date(2017, 12, 8), date(2017, 12, 10), 100)


@pytest.fixture
def batch_payload():
    """Batch with two cars, three rentals and two modifications."""
    return {
        "cars": [
            {"id": 1, "price_per_day": 2000, "price_per_km": 10},
            {"id": 2, "price_per_day": 3000, "price_per_km": 15},
        ],
        "rentals": [
            {"id": 1, "car_id": 1, "start_date": "2017-12-08", "end_date": "2017-12-10",
             "distance": 100, "deductible_reduction": True},
            {"id": 2, "car_id": 1, "start_date": "2017-12-14", "end_date": "2017-12-18",
             "distance": 550, "deductible_reduction": False},
            {"id": 3, "car_id": 2, "start_date": "2017-12-08", "end_date": "2017-12-10",
             "distance": 150, "deductible_reduction": False},
        ],
        "rental_modifications": [
            {"id": 1, "rental_id": 1, "end_date": "2017-12-11", "distance": 150},
            {"id": 2, "rental_id": 3, "start_date": "2017-12-09"},
        ],
    }
