"""
Integration tests for FastAPI endpoints.

Tests verify status codes, payloads and error mapping of the payroll API.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402

WAGE_HISTORY = [
    {"employee_id": "e-1", "hourly_wage": 1000, "effective_from": "2024-01-01"},
    {"employee_id": "e-1", "hourly_wage": 1100, "transportation_fee_per_day": 400, "effective_from": "2024-06-01"},
]


def _shift(date="2024-03-15", start="20:00", end="06:00", break_minutes=60, employee_id="e-1"):
    return {
        "employee_id": employee_id,
        "date": date,
        "start_time": start,
        "end_time": end,
        "break_minutes": break_minutes,
    }


class TestPublicRoutes:
    """Test publicly accessible routes."""

    def test_health_endpoint_returns_ok(self, test_client):
        """GET /health should return 200 OK for monitoring."""
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "shiftpay"

    def test_request_id_echoed(self, test_client):
        response = test_client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated(self, test_client):
        response = test_client.get("/health")

        assert response.headers.get("X-Request-ID")

    def test_settings(self, test_client):
        response = test_client.get("/api/settings")

        assert response.status_code == 200
        data = response.json()
        assert data["company_name"] == "Test Company"
        assert data["closing_date"] == 20


class TestWageEndpoints:
    def test_resolve_rate_in_effect(self, test_client):
        response = test_client.post(
            "/api/payroll/wages/resolve", json={"history": WAGE_HISTORY, "on_date": "2024-03-15"}
        )

        assert response.status_code == 200
        assert response.json()["hourly_wage"] == 1000

    def test_resolve_empty_history_is_404(self, test_client):
        response = test_client.post("/api/payroll/wages/resolve", json={"history": [], "on_date": "2024-03-15"})

        assert response.status_code == 404
        assert "Wage history is empty" in response.json()["detail"]


class TestShiftEndpoint:
    def test_calculate_night_shift(self, test_client):
        """20:00-06:00, 60 min break, 1000/h -> 10575."""
        response = test_client.post(
            "/api/payroll/shifts/calculate", json={"shift": _shift(), "history": WAGE_HISTORY}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["salary"] == 10575
        assert data["night_minutes"] == 378
        assert data["normal_minutes"] == 162
        assert data["total_minutes"] == 540
        assert data["total_pay"] == 10575

    def test_rate_picked_by_shift_date(self, test_client):
        response = test_client.post(
            "/api/payroll/shifts/calculate",
            json={"shift": _shift(date="2024-06-10", start="09:00", end="18:00"), "history": WAGE_HISTORY},
        )

        data = response.json()
        assert data["hourly_wage"] == 1100
        assert data["salary"] == 8800
        assert data["total_pay"] == 9200

    def test_malformed_time_is_400(self, test_client):
        response = test_client.post(
            "/api/payroll/shifts/calculate", json={"shift": _shift(start="25:00"), "history": WAGE_HISTORY}
        )

        assert response.status_code == 400
        assert "start_time" in response.json()["detail"]

    def test_negative_break_is_400(self, test_client):
        response = test_client.post(
            "/api/payroll/shifts/calculate", json={"shift": _shift(break_minutes=-5), "history": WAGE_HISTORY}
        )

        assert response.status_code == 400

    def test_no_wage_history_is_404(self, test_client):
        response = test_client.post("/api/payroll/shifts/calculate", json={"shift": _shift(), "history": []})

        assert response.status_code == 404
        assert "e-1" in response.json()["detail"]

    def test_missing_field_is_422(self, test_client):
        response = test_client.post("/api/payroll/shifts/calculate", json={"history": WAGE_HISTORY})

        assert response.status_code == 422


class TestPeriodEndpoints:
    def test_period_uses_settings_closing_date(self, test_client):
        response = test_client.get("/api/payroll/period", params={"year": 2025, "month": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["start_date"] == "2024-12-21"
        assert data["end_date"] == "2025-01-20"
        assert data["label"] == "2025-01"

    def test_period_closing_date_override(self, test_client):
        response = test_client.get("/api/payroll/period", params={"year": 2024, "month": 2, "closing_date": 31})

        data = response.json()
        assert data["start_date"] == "2024-02-01"
        assert data["end_date"] == "2024-02-29"

    def test_period_invalid_closing_date_is_400(self, test_client):
        response = test_client.get("/api/payroll/period", params={"year": 2024, "month": 2, "closing_date": 0})

        assert response.status_code == 400

    def test_period_invalid_month_is_400(self, test_client):
        response = test_client.get("/api/payroll/period", params={"year": 2024, "month": 13})

        assert response.status_code == 400

    def test_period_for_date(self, test_client):
        response = test_client.get("/api/payroll/period/for-date", params={"date": "2024-12-25"})

        assert response.status_code == 200
        data = response.json()
        assert (data["year"], data["month"]) == (2025, 1)
        assert data["start_date"] == "2024-12-21"

    def test_current_period(self, test_client):
        response = test_client.get("/api/payroll/period/current")

        assert response.status_code == 200
        data = response.json()
        assert data["start_date"] <= data["end_date"]


class TestStatementEndpoint:
    def test_statement_for_period(self, test_client):
        shifts = [
            _shift(date="2024-12-20", start="09:00", end="18:00"),
            _shift(date="2024-12-21", start="09:00", end="18:00"),
            _shift(date="2025-01-20", start="20:00", end="06:00"),
            _shift(date="2025-01-20", start="09:00", end="18:00", employee_id="e-2"),
        ]

        response = test_client.post(
            "/api/payroll/statement",
            json={"shifts": shifts, "history": WAGE_HISTORY, "year": 2025, "month": 1, "employee_id": "e-1"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["company_name"] == "Test Company"
        assert data["period"]["label"] == "2025-01"
        assert [s["shift"]["date"] for s in data["shifts"]] == ["2024-12-21", "2025-01-20"]

        totals = data["totals"]
        # 480 min at 1100/h, then the night shift at 1100/h
        assert totals["days"] == 2
        assert totals["salary"] == 8800 + 11632
        assert totals["transportation"] == 800
        assert totals["total_pay"] == 8800 + 11632 + 800

    def test_statement_invalid_closing_date_is_400(self, test_client):
        response = test_client.post(
            "/api/payroll/statement",
            json={"shifts": [], "history": [], "year": 2025, "month": 1, "closing_date": 40},
        )

        assert response.status_code == 400
