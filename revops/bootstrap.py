"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from revops.api import create_api_application
from revops.config import AppSettings, config_load_settings
from revops.db import (
    ActivityDAO,
    RetryPolicy,
    SQLAlchemyActivityRepository,
    SQLAlchemyDatabaseHealthCheck,
    db_create_engine,
)
from revops.monitoring import AppHeartbeatExtension
from revops.service import RevOpsActivityService


def bootstrap_create_retry_policy(settings: AppSettings) -> RetryPolicy:
    """Build the datastore retry policy from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        RetryPolicy: Fixed-delay retry policy.
    """

    return RetryPolicy(
        max_attempts=settings.retry_max_attempts,
        backoff_delay_ms=settings.retry_backoff_period_ms,
    )


def bootstrap_create_database_health_check(settings: AppSettings | None = None) -> SQLAlchemyDatabaseHealthCheck:
    """Build the database health check for non-HTTP trigger surfaces.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        SQLAlchemyDatabaseHealthCheck: Health check bound to a fresh engine.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(database_url=resolved_settings.database_url)
    return SQLAlchemyDatabaseHealthCheck(engine=engine, hinted_url=resolved_settings.database_url)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(database_url=resolved_settings.database_url)
    activity_repository = SQLAlchemyActivityRepository(engine=engine)
    activity_dao = ActivityDAO(
        repository=activity_repository,
        retry_policy=bootstrap_create_retry_policy(resolved_settings),
        actor=resolved_settings.application_user,
    )
    activity_service = RevOpsActivityService(activity_dao=activity_dao)
    database_health_check = SQLAlchemyDatabaseHealthCheck(engine=engine, hinted_url=resolved_settings.database_url)
    heartbeat_extension = AppHeartbeatExtension(build_timestamp=resolved_settings.application_build_timestamp)
    return create_api_application(
        settings=resolved_settings,
        activity_service=activity_service,
        health_check_providers=[database_health_check],
        heartbeat_extensions=[heartbeat_extension],
    )
