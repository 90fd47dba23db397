"""Regression tests for fixed-backoff retry policy and transient error classification."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, PendingRollbackError, ProgrammingError

from revops.db import RetryContext, RetryPolicy, db_is_transient_error
from revops.domain import ActivityValidationError, TransientDataAccessError


def _operational_error() -> OperationalError:
    """Build a SQLAlchemy connection failure.

    Returns:
        OperationalError: Connection-level failure instance.
    """

    return OperationalError("SELECT 1", {}, Exception("server closed the connection unexpectedly"))


class _FlakyOperation:
    """Unit of work failing transiently a fixed number of times before succeeding."""

    def __init__(self, failures_before_success: int, error_factory=_operational_error) -> None:
        self.failures_before_success = failures_before_success
        self.error_factory = error_factory
        self.attempt_numbers: list[int] = []

    def __call__(self, retry_context: RetryContext) -> str:
        self.attempt_numbers.append(retry_context.attempt_number)
        if len(self.attempt_numbers) <= self.failures_before_success:
            raise self.error_factory()
        return "saved"


@pytest.mark.parametrize("failures_before_success", [0, 1, 2, 3])
def test_db_retry_returns_success_after_transient_failures(failures_before_success: int) -> None:
    """Return the success value after k < max_attempts transient failures.

    Args:
        failures_before_success: Number of transient failures before success.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when attempt count or result is unexpected.
    """

    sleep_calls: list[float] = []
    policy = RetryPolicy(max_attempts=4, backoff_delay_ms=250, sleep=sleep_calls.append)
    operation = _FlakyOperation(failures_before_success=failures_before_success)

    result = policy.policy_execute(operation, operation_label="save activity")

    assert result == "saved"
    assert operation.attempt_numbers == list(range(1, failures_before_success + 2))
    assert sleep_calls == [0.25] * failures_before_success


def test_db_retry_exhausts_max_attempts_then_propagates_last_failure() -> None:
    """Make exactly max_attempts attempts for an always-failing transient operation.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when retry count is unexpected.
    """

    sleep_calls: list[float] = []
    policy = RetryPolicy(max_attempts=3, backoff_delay_ms=1000, sleep=sleep_calls.append)
    operation = _FlakyOperation(failures_before_success=10)

    with pytest.raises(OperationalError):
        policy.policy_execute(operation)

    assert operation.attempt_numbers == [1, 2, 3]
    assert sleep_calls == [1.0, 1.0]


def test_db_retry_does_not_retry_non_transient_failure() -> None:
    """Propagate non-retryable failures after the first attempt without sleeping."""

    sleep_calls: list[float] = []
    policy = RetryPolicy(max_attempts=5, backoff_delay_ms=100, sleep=sleep_calls.append)
    operation = _FlakyOperation(
        failures_before_success=10,
        error_factory=lambda: ActivityValidationError("Unknown field: color", field_name="color"),
    )

    with pytest.raises(ActivityValidationError):
        policy.policy_execute(operation)

    assert operation.attempt_numbers == [1]
    assert sleep_calls == []


def test_db_retry_hands_previous_failure_to_next_attempt() -> None:
    """Expose the previous attempt's failure through the retry context."""

    seen_errors: list[BaseException | None] = []
    first_error = TransientDataAccessError("connection reset")

    def _operation(retry_context: RetryContext) -> int:
        seen_errors.append(retry_context.last_error)
        if retry_context.attempt_number == 1:
            raise first_error
        return 1

    policy = RetryPolicy(max_attempts=2, backoff_delay_ms=0, sleep=lambda _seconds: None)

    assert policy.policy_execute(_operation) == 1
    assert seen_errors == [None, first_error]


def test_db_retry_skips_sleep_for_zero_backoff() -> None:
    """Retry immediately when the configured backoff is zero."""

    sleep_calls: list[float] = []
    policy = RetryPolicy(max_attempts=2, backoff_delay_ms=0, sleep=sleep_calls.append)

    assert policy.policy_execute(_FlakyOperation(failures_before_success=1)) == "saved"
    assert sleep_calls == []


@pytest.mark.parametrize(
    ("max_attempts", "backoff_delay_ms"),
    [(0, 100), (-1, 100), (3, -5)],
)
def test_db_retry_rejects_invalid_configuration(max_attempts: int, backoff_delay_ms: int) -> None:
    """Reject non-positive attempt counts and negative delays."""

    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=max_attempts, backoff_delay_ms=backoff_delay_ms)


def test_db_transient_classification_covers_connection_and_transaction_failures() -> None:
    """Classify connection and transaction failures as retryable, others as not.

    Returns:
        None: Assertions validate classification.

    Raises:
        AssertionError: Raised when classification is unexpected.
    """

    assert db_is_transient_error(_operational_error())
    assert db_is_transient_error(TransientDataAccessError("pool exhausted"))
    assert db_is_transient_error(PendingRollbackError("transaction rolled back"))
    assert not db_is_transient_error(IntegrityError("INSERT", {}, Exception("duplicate key")))
    assert not db_is_transient_error(ProgrammingError("SELECT", {}, Exception("syntax error")))
    assert not db_is_transient_error(ValueError("bad input"))
