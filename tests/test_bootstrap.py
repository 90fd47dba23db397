"""Tests for runtime application assembly from settings."""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from revops.bootstrap import (
    bootstrap_create_application,
    bootstrap_create_database_health_check,
    bootstrap_create_retry_policy,
)
from revops.config import AppSettings
from revops.db import db_metadata


def _build_settings(database_path: Path) -> AppSettings:
    """Create settings bound to a temporary SQLite database.

    Args:
        database_path: Path of the SQLite database file.

    Returns:
        AppSettings: Deterministic settings for bootstrap tests.
    """

    return AppSettings(
        environment_name="test",
        database_url=f"sqlite:///{database_path}",
        application_user="bootstrap-tester",
        application_build_timestamp="2026-10-19T08:00:00Z",
        retry_max_attempts=2,
        retry_backoff_period_ms=0,
    )


def test_bootstrap_retry_policy_uses_configured_values(tmp_path: Path) -> None:
    """Map retry settings onto the datastore retry policy."""

    retry_policy = bootstrap_create_retry_policy(_build_settings(tmp_path / "activity.db"))

    assert retry_policy.max_attempts == 2
    assert retry_policy.backoff_delay_ms == 0


def test_bootstrap_application_serves_activity_and_monitoring_routes(tmp_path: Path) -> None:
    """Assemble a working application over a migrated database.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        None: Assertions validate wiring behavior.

    Raises:
        AssertionError: Raised when assembled routes misbehave.
    """

    settings = _build_settings(tmp_path / "activity.db")
    schema_engine = create_engine(settings.database_url)
    db_metadata.create_all(schema_engine)
    schema_engine.dispose()

    client = TestClient(bootstrap_create_application(settings))

    create_response = client.post(
        "/activities/create",
        json={"activity": "Air Hockey", "category": "Arcade", "price": 2},
    )
    categories_response = client.get("/activities/categories")
    health_response = client.get("/health")
    heartbeat_response = client.get("/heartbeat")

    assert create_response.status_code == 200
    assert categories_response.json() == ["Arcade"]
    assert health_response.status_code == 200
    assert health_response.json()["checks"][0]["name"] == "data-source"
    assert heartbeat_response.json()["buildTimestamp"] == "2026-10-19T08:00:00Z"


def test_bootstrap_database_health_check_reports_success(tmp_path: Path) -> None:
    """Build a standalone database health check from settings."""

    health_check = bootstrap_create_database_health_check(_build_settings(tmp_path / "activity.db"))

    assert health_check.db_check_database_health().health_is_success()
