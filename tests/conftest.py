"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from fleet_finances.core import config as config_module
from fleet_finances.core.models import FinancialRecord, RecordKind


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def make_record():
    """Factory for FinancialRecord with sensible defaults."""

    def _make(
        amount: Any = "10.00",
        classifier: str = "Cash",
        occurred_on: Any = "2024-03-01",
        owner_id: str | None = "driver-1",
        note: str | None = None,
        kind: RecordKind = RecordKind.EARNING,
        id: str | None = None,
        account: str | None = None,
    ) -> FinancialRecord:
        _make.counter += 1
        return FinancialRecord.create(
            id=id or f"rec-{_make.counter}",
            amount=amount,
            classifier=classifier,
            occurred_on=occurred_on,
            owner_id=owner_id,
            note=note,
            kind=kind,
            account=account,
        )

    _make.counter = 0
    return _make


@pytest.fixture
def scenario_records(make_record) -> list[FinancialRecord]:
    """Two valid earnings and one negative one, as in the dashboard example."""
    return [
        make_record(amount="100.00", classifier="Cash", occurred_on="2024-03-01", id="e1"),
        make_record(amount="50.50", classifier="Online", occurred_on="2024-03-01", id="e2"),
        make_record(amount="-10", classifier="Cash", occurred_on="2024-03-02", id="e3"),
    ]


@pytest.fixture
def sample_earnings_response() -> dict[str, Any]:
    """Earnings list endpoint body wrapped in a data key."""
    return {
        "data": [
            {
                "id": "earn-1",
                "amount": "120.00",
                "type": "Cash",
                "date": "2024-03-04",
                "driverId": "driver-1",
                "note": "Airport run",
                "accountName": "Personal Account",
            },
            {
                "id": "earn-2",
                "amount": 80.25,
                "type": "Online",
                "date": "2024-03-05T00:00:00.000Z",
                "driverId": "driver-1",
                "accountName": "Limousine Account",
            },
            {
                "id": "earn-3",
                "amount": "45",
                "type": "Pocket Slipt",
                "date": "2024-03-05",
                "driver": {"id": "driver-2", "name": "Test Driver Two"},
                "accountName": "Personal Account",
            },
            {
                "id": "earn-4",
                "amount": "abc",
                "type": "Cash",
                "date": "2024-03-06",
                "driverId": "driver-1",
            },
        ]
    }


@pytest.fixture
def sample_expenses_response() -> list[dict[str, Any]]:
    """Expenses list endpoint body as a bare array."""
    return [
        {
            "id": "exp-1",
            "amount": "20.00",
            "category": "Fuel",
            "date": "2024-03-04",
            "driverId": "driver-1",
            "description": "Full tank",
        },
        {
            "id": "exp-2",
            "amount": "5.50",
            "category": "Parking",
            "date": "2024-03-05",
            "driverId": "driver-1",
        },
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and drop any cached configuration."""
    monkeypatch.setenv("FLEET_ENV", "test")
    monkeypatch.setenv("FLEET_DATA_DIR", str(tmp_path / "fleet_data"))
    monkeypatch.delenv("FLEET_COMMISSION_RATE", raising=False)
    monkeypatch.delenv("FLEET_CURRENCY", raising=False)
    monkeypatch.delenv("FLEET_WEEK_START", raising=False)
    monkeypatch.delenv("FLEET_STATEMENT_FORMAT", raising=False)
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
