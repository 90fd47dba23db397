"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules.
"""

from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID

from revops.domain import ActivityRecord, ActivityResponse


class ActivityRepositoryPort(Protocol):
    """Port definition for single-statement activity persistence."""

    def db_activity_get_by_id(self, activity_id: UUID) -> ActivityRecord | None:
        """Return one activity by identifier.

        Args:
            activity_id: Activity identifier.

        Returns:
            ActivityRecord | None: Stored record, or None when absent.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Raised when the read fails.
        """

    def db_activity_save(self, record: ActivityRecord) -> None:
        """Insert the record, or update it in place when its identifier exists.

        Args:
            record: Record to persist.

        Returns:
            None: Persists as side effect.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Raised when the write fails.
        """

    def db_activity_update(self, record: ActivityRecord) -> int:
        """Update the client-managed fields of an existing activity, never inserting.

        Args:
            record: Record carrying the replacement field values.

        Returns:
            int: Number of updated rows, 0 when the identifier is absent.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Raised when the write fails.
        """

    def db_activity_delete_by_id(self, activity_id: UUID) -> int:
        """Delete one activity by identifier.

        Args:
            activity_id: Activity identifier.

        Returns:
            int: Number of deleted rows.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Raised when the delete fails.
        """

    def db_activity_list_categories(self) -> list[str]:
        """Return distinct stored categories in ascending order.

        Returns:
            list[str]: Distinct category strings.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: Raised when the read fails.
        """


class ActivityDataAccessPort(Protocol):
    """Port definition for retry-wrapped activity data access."""

    def dao_save_or_update(self, activity_response: ActivityResponse, activity_id: UUID | None = None) -> int:
        """Create an activity, or replace the client-managed fields of an existing one."""

    def dao_partial_update(self, activity_id: UUID, updates: Mapping[str, Any]) -> int:
        """Apply a sparse field map onto one stored activity; 0 when it does not exist."""

    def dao_delete(self, activity_id: UUID) -> int:
        """Delete one stored activity; 0 when it does not exist."""

    def dao_fetch_all_categories(self) -> list[str]:
        """Return distinct stored categories in ascending order."""
