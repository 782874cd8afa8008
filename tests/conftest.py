"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- make_shift / make_rate: Builders for Shift and WageRate records
- payroll_settings: Settings snapshot with closing date 20
- test_client: FastAPI TestClient with the settings dependency overridden
"""

import datetime
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep log files out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="shiftpay-logs-"))

# ruff: noqa: E402
from shiftpay.core.models import PayrollSettings, Shift, WageRate


@pytest.fixture
def make_shift():
    """
    Factory for Shift records.

    Defaults: employee "e-1", 2024-03-15, 09:00-18:00, 60 min break.
    """

    def _make(
        start_time: str = "09:00",
        end_time: str = "18:00",
        break_minutes: int = 60,
        date: datetime.date = datetime.date(2024, 3, 15),
        employee_id: str = "e-1",
        **kwargs,
    ) -> Shift:
        return Shift(
            employee_id=employee_id,
            date=date,
            start_time=start_time,
            end_time=end_time,
            break_minutes=break_minutes,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_rate():
    """
    Factory for WageRate records.

    Defaults: employee "e-1", 1000/h, no transportation fee, from 2024-01-01.
    """

    def _make(
        hourly_wage: int = 1000,
        effective_from: datetime.date = datetime.date(2024, 1, 1),
        transportation_fee_per_day: int = 0,
        employee_id: str = "e-1",
        **kwargs,
    ) -> WageRate:
        return WageRate(
            employee_id=employee_id,
            hourly_wage=hourly_wage,
            transportation_fee_per_day=transportation_fee_per_day,
            effective_from=effective_from,
            **kwargs,
        )

    return _make


@pytest.fixture
def payroll_settings():
    """Settings snapshot with closing date on the 20th."""
    return PayrollSettings(company_name="Test Company", closing_date=20)


@pytest.fixture
def test_client(payroll_settings):
    """
    Create FastAPI TestClient with the settings dependency overridden.

    No settings file is read; every request sees payroll_settings.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    from fastapi.testclient import TestClient

    from shiftpay.main import app
    from shiftpay.routes.payroll_api import get_payroll_settings

    app.dependency_overrides[get_payroll_settings] = lambda: payroll_settings

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
