import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def make_customer():
    """Factory for persisted customers with overridable fields."""
    from modules.customers.models import Customer

    def _make(**overrides) -> Customer:
        defaults = {
            "first_name": "Alice",
            "last_name": "Smith",
            "email": "alice@example.com",
        }
        defaults.update(overrides)
        return Customer.objects.create(**defaults)

    return _make
