"""
Integration tests for registration flow.

Tests the full registration flow through the API with real database.
Requires PostgreSQL to be running (via docker-compose).
"""

import logging

import bcrypt
import pytest
from fastapi.testclient import TestClient
from psycopg_pool import ConnectionPool

from src.api.main import app

VALID = {
    "name": "integration",
    "password": "Abcdef12",
    "password_confirmation": "Abcdef12",
    "address": "1 Main St",
}


@pytest.fixture
def client(pool: ConnectionPool) -> TestClient:
    """Create test client with real database connection."""
    # Override the app's pool with our test pool
    app.state.pool = pool
    return TestClient(app)


class TestRegisterFlow:
    """Integration tests for POST /v1/register."""

    def test_full_registration_flow(
        self, client: TestClient, pool: ConnectionPool, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Valid submission creates a customer with a bcrypt hash."""
        with caplog.at_level(logging.INFO):
            response = client.post("/v1/register", json=VALID)

        assert response.status_code == 201
        assert response.json() == {"message": "Customer registered", "name": "integration"}
        assert "Customer registered: integration" in caplog.text

        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                "SELECT password_hash FROM customers WHERE username = %s", ("integration",)
            )
            password_hash = cursor.fetchone()[0]
        assert bcrypt.checkpw(b"Abcdef12", password_hash.encode())

    def test_duplicate_registration_reports_name_taken(self, client: TestClient) -> None:
        """Second registration for the same name fails validation."""
        client.post("/v1/register", json=VALID)
        response = client.post("/v1/register", json=VALID)

        assert response.status_code == 422
        assert [item["code"] for item in response.json()["detail"]] == ["NAME_TAKEN"]

    def test_rejected_registration_not_persisted(
        self, client: TestClient, pool: ConnectionPool
    ) -> None:
        """Weak password is rejected and nothing is stored."""
        response = client.post(
            "/v1/register",
            json={**VALID, "password": "weakpass", "password_confirmation": "weakpass"},
        )

        assert response.status_code == 422
        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM customers")
            assert cursor.fetchone()[0] == 0

    def test_health_check(self, client: TestClient) -> None:
        """Health endpoint queries the database."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
