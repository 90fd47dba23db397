"""Business service for activity management."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from revops.db import ActivityDataAccessPort
from revops.domain import ActivityPersistenceError, ActivityResponse
from revops.monitoring import monitoring_track_execution_time

from .interfaces import ActivityServicePort

logger = logging.getLogger(__name__)


class RevOpsActivityService(ActivityServicePort):
    """Pass-through service over the activity DAO.

    Every failure surfaces as `ActivityPersistenceError` carrying the original
    message, chained from the original exception.
    """

    def __init__(self, activity_dao: ActivityDataAccessPort):
        """Initialize activity service.

        Args:
            activity_dao: Data-access object for activity persistence.

        Raises:
            ValueError: Raised when activity_dao is None.
        """

        if activity_dao is None:
            raise ValueError("activity_dao must not be None")
        self._activity_dao = activity_dao

    @monitoring_track_execution_time
    def service_create_activity(self, activity_response: ActivityResponse) -> int:
        """Create one activity.

        Args:
            activity_response: Client-supplied activity payload.

        Returns:
            int: Number of created activities.

        Raises:
            ActivityPersistenceError: Raised when persistence fails.
        """

        logger.info("Processing create activity in RevOpsActivityService.")
        try:
            return self._activity_dao.dao_save_or_update(activity_response)
        except Exception as error:
            raise self._service_wrap_error(error, "Error occurred while creating activity") from error

    @monitoring_track_execution_time
    def service_update_activity(self, activity_id: UUID, activity_response: ActivityResponse) -> int:
        """Replace the client-managed fields of one activity.

        Args:
            activity_id: Target activity identifier.
            activity_response: Client-supplied activity payload.

        Returns:
            int: Number of updated activities.

        Raises:
            ActivityPersistenceError: Raised when persistence fails.
        """

        logger.info("Processing update activity in RevOpsActivityService for activity ID: %s", activity_id)
        try:
            return self._activity_dao.dao_save_or_update(activity_response, activity_id=activity_id)
        except Exception as error:
            raise self._service_wrap_error(error, "Error occurred while updating activity") from error

    @monitoring_track_execution_time
    def service_partial_update_activity(self, activity_id: UUID, updates: Mapping[str, Any]) -> int:
        """Apply a sparse field map onto one activity.

        Args:
            activity_id: Target activity identifier.
            updates: Mapping of wire field name to new value.

        Returns:
            int: 1 on success, 0 when the activity does not exist.

        Raises:
            ActivityPersistenceError: Raised when validation or persistence fails.
        """

        logger.info("Processing partial update activity in RevOpsActivityService for activity ID: %s", activity_id)
        try:
            return self._activity_dao.dao_partial_update(activity_id, updates)
        except Exception as error:
            raise self._service_wrap_error(error, "Error occurred while partially updating activity") from error

    @monitoring_track_execution_time
    def service_delete_activity(self, activity_id: UUID) -> int:
        """Delete one activity.

        Args:
            activity_id: Target activity identifier.

        Returns:
            int: Number of deleted activities.

        Raises:
            ActivityPersistenceError: Raised when persistence fails.
        """

        logger.info("Processing delete activity in RevOpsActivityService for activity ID: %s", activity_id)
        try:
            return self._activity_dao.dao_delete(activity_id)
        except Exception as error:
            raise self._service_wrap_error(error, "Error occurred while deleting activity") from error

    @monitoring_track_execution_time
    def service_fetch_all_categories(self) -> list[str]:
        """Return distinct stored categories in ascending order.

        Returns:
            list[str]: Distinct category strings.

        Raises:
            ActivityPersistenceError: Raised when persistence fails.
        """

        logger.info("Fetching all categories in RevOpsActivityService.")
        try:
            return self._activity_dao.dao_fetch_all_categories()
        except Exception as error:
            raise self._service_wrap_error(error, "Error occurred while fetching categories") from error

    def _service_wrap_error(self, error: Exception, message: str) -> ActivityPersistenceError:
        logger.error("An error occurred in RevOpsActivityService: %s", error)
        return ActivityPersistenceError(message, detail=str(error))
