"""Database health check implementation for connectivity diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy import Engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from revops.domain import HealthCheckOutcome, HealthCheckResult

logger = logging.getLogger(__name__)

DATA_SOURCE_CHECK_NAME = "data-source"
DATA_SOURCE_CHECK_DESCRIPTION = "DB Connection"
HINTED_URI_DISCLAIMER = "The uri is provided as a hint and may not reflect the actual uri used."


class SQLAlchemyDatabaseHealthCheck:
    """Database health check backed by one SQLAlchemy connection acquisition."""

    def __init__(self, engine: Engine, hinted_url: str | None = None):
        """Initialize database health check.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.
            hinted_url: Optional configured URL reported when the check fails.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine
        self._hinted_url = hinted_url

    def health_checks(self) -> list[Callable[[], HealthCheckResult]]:
        """Return the checks contributed by this component.

        Returns:
            list[Callable[[], HealthCheckResult]]: Database connectivity check.
        """

        return [self.db_check_database_health]

    def db_connection_label(self) -> str:
        """Return the engine URL with the password hidden.

        Returns:
            str: Connection URL safe for logs and health payloads.
        """

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_database_health(self) -> HealthCheckResult:
        """Acquire one connection and report the outcome.

        Single synchronous attempt; failures are reported in the result, never raised.

        Returns:
            HealthCheckResult: Success with the resolved URI, or failure with the error
                message and, when configured, a hinted URI plus disclaimer.
        """

        try:
            with self._engine.connect():
                resolved_url = self.db_connection_label()
            return HealthCheckResult(
                name=DATA_SOURCE_CHECK_NAME,
                description=DATA_SOURCE_CHECK_DESCRIPTION,
                result=HealthCheckOutcome.SUCCESS,
                message="Success.",
                details={"uri": resolved_url},
            )
        except Exception as error:
            logger.error("Exception occurred while checking health of Database", exc_info=error)
            details = {"message": str(error)}
            if self._hinted_url:
                details["uri"] = _db_mask_url(self._hinted_url)
                details["disclaimer"] = HINTED_URI_DISCLAIMER
            return HealthCheckResult(
                name=DATA_SOURCE_CHECK_NAME,
                description=DATA_SOURCE_CHECK_DESCRIPTION,
                result=HealthCheckOutcome.FAILURE,
                message="Failure.",
                details=details,
            )


def _db_mask_url(url: str) -> str:
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return url
