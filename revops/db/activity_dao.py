"""Activity data-access object routing every datastore call through the retry policy."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, NoReturn
from uuid import UUID

from revops.domain import (
    ActivityPersistenceError,
    ActivityResponse,
    ActivityUpdateCommand,
    ActivityValidationError,
    domain_activity_from_response,
    domain_activity_to_view,
)

from .interfaces import ActivityDataAccessPort, ActivityRepositoryPort
from .retry import RetryContext, RetryPolicy

logger = logging.getLogger(__name__)


class ActivityDAO(ActivityDataAccessPort):
    """Data-access orchestration for activity writes and category reads.

    Failures are reported in three shapes: retryable failures that exhausted the
    retry policy propagate unchanged, validation failures propagate unchanged, and
    every other failure is wrapped in `ActivityPersistenceError`.
    """

    def __init__(
        self,
        repository: ActivityRepositoryPort,
        retry_policy: RetryPolicy,
        actor: str,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize activity DAO.

        Args:
            repository: DB-layer activity repository.
            retry_policy: Retry policy wrapping each repository call.
            actor: Audit actor stamped on written records.
            clock: Local clock used for creation timestamps.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if repository is None:
            raise ValueError("repository must not be None")
        if retry_policy is None:
            raise ValueError("retry_policy must not be None")
        if not actor or not actor.strip():
            raise ValueError("actor must not be blank")

        self._repository = repository
        self._retry_policy = retry_policy
        self._actor = actor.strip()
        self._clock = clock

    def dao_save_or_update(self, activity_response: ActivityResponse, activity_id: UUID | None = None) -> int:
        """Persist one activity, creating it or replacing its client-managed fields.

        Args:
            activity_response: Client-supplied activity payload.
            activity_id: Existing identifier for a full update; None creates a new activity.

        Returns:
            int: 1 on success.

        Raises:
            ActivityPersistenceError: Raised for non-retryable persistence failures.
            Exception: Retryable failures re-raised once retries are exhausted.
        """

        try:
            record = domain_activity_from_response(
                activity_response,
                actor=self._actor,
                activity_id=activity_id,
                clock=self._clock,
            )

            def _save(retry_context: RetryContext) -> int:
                logger.info(
                    "Attempt %s to save or update activity: %s category: %s price: %s",
                    retry_context.attempt_number,
                    record.activity,
                    record.category,
                    record.price,
                )
                self._repository.db_activity_save(record)
                logger.info(
                    "Activity %s saved or updated successfully: %s",
                    record.activity_id,
                    domain_activity_to_view(record),
                )
                return 1

            return self._retry_policy.policy_execute(_save, operation_label="save or update activity")
        except Exception as error:
            self._dao_raise_translated_error(
                error,
                failure_label="saving or updating activity",
                persistence_message="An exception occurred while upserting a record.",
            )

    def dao_partial_update(self, activity_id: UUID, updates: Mapping[str, Any]) -> int:
        """Apply a sparse field map onto one stored activity.

        The field map is validated before any datastore access, so an invalid map
        never reaches the stored record.

        Args:
            activity_id: Target activity identifier.
            updates: Mapping of wire field name to new value.

        Returns:
            int: 1 on success, 0 when the activity does not exist.

        Raises:
            ActivityValidationError: Raised for unknown field names or invalid values.
            ActivityPersistenceError: Raised for non-retryable persistence failures.
            Exception: Retryable failures re-raised once retries are exhausted.
        """

        try:
            update_command = ActivityUpdateCommand.from_mapping(updates)

            def _fetch(retry_context: RetryContext):
                logger.info(
                    "Attempt %s to fetch activity for partial update with ID: %s",
                    retry_context.attempt_number,
                    activity_id,
                )
                return self._repository.db_activity_get_by_id(activity_id)

            existing_record = self._retry_policy.policy_execute(_fetch, operation_label="fetch activity")
            if existing_record is None:
                logger.warning("Activity with ID: %s not found for partial update.", activity_id)
                return 0

            updated_record = update_command.apply(existing_record)

            def _update(retry_context: RetryContext) -> int:
                logger.info(
                    "Attempt %s to partially update activity with ID: %s fields: %s",
                    retry_context.attempt_number,
                    activity_id,
                    ", ".join(update_command.update_field_names()),
                )
                return self._repository.db_activity_update(updated_record)

            updated_count = self._retry_policy.policy_execute(_update, operation_label="partially update activity")
            if updated_count == 0:
                logger.warning("Activity with ID: %s was removed before its partial update was written.", activity_id)
                return 0
            logger.info(
                "Activity %s partially updated successfully: %s",
                activity_id,
                domain_activity_to_view(updated_record),
            )
            return 1
        except Exception as error:
            self._dao_raise_translated_error(
                error,
                failure_label=f"partially updating activity with ID: {activity_id}",
                persistence_message="An exception occurred while partially updating a record.",
            )

    def dao_delete(self, activity_id: UUID) -> int:
        """Delete one stored activity.

        Args:
            activity_id: Target activity identifier.

        Returns:
            int: Number of deleted activities, 0 when it does not exist.

        Raises:
            ActivityPersistenceError: Raised for non-retryable persistence failures.
            Exception: Retryable failures re-raised once retries are exhausted.
        """

        try:

            def _delete(retry_context: RetryContext) -> int:
                logger.info("Attempt %s to delete activity with ID: %s", retry_context.attempt_number, activity_id)
                return self._repository.db_activity_delete_by_id(activity_id)

            deleted_count = self._retry_policy.policy_execute(_delete, operation_label="delete activity")
            if deleted_count == 0:
                logger.warning("Activity with ID: %s not found for delete.", activity_id)
            return deleted_count
        except Exception as error:
            self._dao_raise_translated_error(
                error,
                failure_label=f"deleting activity with ID: {activity_id}",
                persistence_message="An exception occurred while deleting a record.",
            )

    def dao_fetch_all_categories(self) -> list[str]:
        """Return distinct stored categories in ascending order.

        Returns:
            list[str]: Distinct category strings.

        Raises:
            ActivityPersistenceError: Raised for non-retryable persistence failures.
            Exception: Retryable failures re-raised once retries are exhausted.
        """

        try:

            def _fetch(retry_context: RetryContext) -> list[str]:
                logger.info("Attempt %s to fetch all activity categories", retry_context.attempt_number)
                categories = self._repository.db_activity_list_categories()
                logger.info("Fetched %s categories successfully.", len(categories))
                return categories

            categories = self._retry_policy.policy_execute(_fetch, operation_label="fetch activity categories")
            return list(dict.fromkeys(categories))
        except Exception as error:
            self._dao_raise_translated_error(
                error,
                failure_label="fetching activity categories",
                persistence_message="An exception occurred while fetching categories.",
            )

    def _dao_raise_translated_error(self, error: Exception, failure_label: str, persistence_message: str) -> NoReturn:
        if self._retry_policy.is_retryable(error):
            logger.error("Data access or transaction failure while %s.", failure_label, exc_info=error)
            raise error
        if isinstance(error, (ActivityValidationError, ActivityPersistenceError)):
            logger.error("Rejected input while %s: %s", failure_label, error)
            raise error
        logger.error("An unexpected error occurred while %s.", failure_label, exc_info=error)
        raise ActivityPersistenceError(persistence_message, detail=str(error)) from error
