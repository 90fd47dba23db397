"""Fixed-backoff retry policy for datastore units of work."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from sqlalchemy.exc import (
    DBAPIError,
    DisconnectionError,
    InterfaceError,
    OperationalError,
    PendingRollbackError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from revops.domain import TransientDataAccessError

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")

_TRANSIENT_ERROR_TYPES: tuple[type[BaseException], ...] = (
    TransientDataAccessError,
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    PendingRollbackError,
)


def db_is_transient_error(error: BaseException) -> bool:
    """Classify one datastore failure as retryable or not.

    Connection failures, pool exhaustion and aborted transactions are retryable.
    Integrity violations, programming errors and anything outside SQLAlchemy are not.

    Args:
        error: Failure raised by a unit of work.

    Returns:
        bool: True when retrying the unchanged unit of work may succeed.
    """

    if isinstance(error, _TRANSIENT_ERROR_TYPES):
        return True
    if isinstance(error, DBAPIError) and error.connection_invalidated:
        return True
    return False


@dataclass(frozen=True)
class RetryContext:
    """Per-attempt state handed to a unit of work.

    Attributes:
        attempt_number: One-based attempt counter.
        last_error: Failure of the previous attempt, if any.
    """

    attempt_number: int
    last_error: BaseException | None = None


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable fixed-delay retry policy.

    Attributes:
        max_attempts: Total attempts including the first one.
        backoff_delay_ms: Fixed delay between attempts in milliseconds.
        is_retryable: Classifier deciding which failures are retried.
        sleep: Blocking sleep function taking seconds.
    """

    max_attempts: int
    backoff_delay_ms: int
    is_retryable: Callable[[BaseException], bool] = db_is_transient_error
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.backoff_delay_ms < 0:
            raise ValueError("backoff_delay_ms must be >= 0")

    def policy_execute(
        self,
        operation: Callable[[RetryContext], ResultT],
        operation_label: str = "datastore operation",
    ) -> ResultT:
        """Run operation, retrying retryable failures with a fixed delay.

        Args:
            operation: Unit of work receiving the current retry context.
            operation_label: Human-readable label used in log lines.

        Returns:
            ResultT: Value returned by the first successful attempt.

        Raises:
            Exception: The last failure once attempts are exhausted, or the first
                non-retryable failure.
        """

        last_error: BaseException | None = None
        for attempt_number in range(1, self.max_attempts + 1):
            logger.info("Attempt %s of %s to %s", attempt_number, self.max_attempts, operation_label)
            try:
                result = operation(RetryContext(attempt_number=attempt_number, last_error=last_error))
            except Exception as error:
                if not self.is_retryable(error):
                    logger.info(
                        "Attempt %s to %s failed with non-retryable %s",
                        attempt_number,
                        operation_label,
                        type(error).__name__,
                    )
                    raise
                if attempt_number >= self.max_attempts:
                    logger.warning(
                        "Attempt %s to %s failed; retries exhausted: %s",
                        attempt_number,
                        operation_label,
                        error,
                    )
                    raise
                logger.warning(
                    "Attempt %s to %s failed with retryable %s; retrying in %s ms",
                    attempt_number,
                    operation_label,
                    type(error).__name__,
                    self.backoff_delay_ms,
                )
                last_error = error
                if self.backoff_delay_ms > 0:
                    self.sleep(self.backoff_delay_ms / 1000.0)
                continue

            logger.info("Attempt %s to %s succeeded", attempt_number, operation_label)
            return result

        raise RuntimeError("retry loop exited without result")
