"""Database service for activity row persistence."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import Connection, Engine, delete, insert, select, update

from revops.domain import ActivityRecord

from .interfaces import ActivityRepositoryPort
from .schema import activity_table


class SQLAlchemyActivityRepository(ActivityRepositoryPort):
    """SQLAlchemy-backed activity repository.

    Each method runs one short transaction. SQLAlchemy errors are raised unchanged
    so the retry policy can classify them.
    """

    def __init__(self, engine: Engine):
        """Initialize activity repository.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_activity_get_by_id(self, activity_id: UUID) -> ActivityRecord | None:
        """Return one activity by identifier.

        Args:
            activity_id: Activity identifier.

        Returns:
            ActivityRecord | None: Stored record, or None when absent.

        Raises:
            SQLAlchemyError: Raised when the read fails.
        """

        statement = select(activity_table).where(activity_table.c.activity_id == activity_id)
        with self._engine.connect() as connection:
            row = connection.execute(statement).mappings().first()
        if row is None:
            return None
        return self._db_map_activity_row(row)

    def db_activity_save(self, record: ActivityRecord) -> None:
        """Update the row for record's identifier, inserting it when absent.

        Creation timestamps of an existing row are preserved.

        Args:
            record: Record to persist.

        Returns:
            None: Persists as side effect.

        Raises:
            SQLAlchemyError: Raised when the write fails.
        """

        with self._engine.begin() as connection:
            if self._db_update_client_fields(connection, record):
                return

            connection.execute(
                insert(activity_table).values(
                    activity_id=record.activity_id,
                    activity=record.activity,
                    category=record.category,
                    price=record.price,
                    image_location=record.image_location,
                    created_date=record.created_date,
                    created_time=record.created_time,
                    last_updated_by=record.last_updated_by,
                    accessed_by=record.accessed_by,
                )
            )

    def db_activity_update(self, record: ActivityRecord) -> int:
        """Update the row for record's identifier without ever inserting.

        Args:
            record: Record carrying the replacement field values.

        Returns:
            int: Number of updated rows, 0 when the identifier is absent.

        Raises:
            SQLAlchemyError: Raised when the write fails.
        """

        with self._engine.begin() as connection:
            return self._db_update_client_fields(connection, record)

    def db_activity_delete_by_id(self, activity_id: UUID) -> int:
        """Delete one activity by identifier.

        Args:
            activity_id: Activity identifier.

        Returns:
            int: Number of deleted rows.

        Raises:
            SQLAlchemyError: Raised when the delete fails.
        """

        with self._engine.begin() as connection:
            delete_result = connection.execute(delete(activity_table).where(activity_table.c.activity_id == activity_id))
        return int(delete_result.rowcount or 0)

    def db_activity_list_categories(self) -> list[str]:
        """Return distinct stored categories in ascending order.

        Returns:
            list[str]: Distinct category strings.

        Raises:
            SQLAlchemyError: Raised when the read fails.
        """

        statement = select(activity_table.c.category).distinct().order_by(activity_table.c.category.asc())
        with self._engine.connect() as connection:
            return [str(category) for category in connection.execute(statement).scalars().all()]

    def _db_update_client_fields(self, connection: Connection, record: ActivityRecord) -> int:
        update_result = connection.execute(
            update(activity_table)
            .where(activity_table.c.activity_id == record.activity_id)
            .values(
                activity=record.activity,
                category=record.category,
                price=record.price,
                image_location=record.image_location,
                last_updated_by=record.last_updated_by,
                accessed_by=record.accessed_by,
            )
        )
        return int(update_result.rowcount or 0)

    def _db_map_activity_row(self, row: Any) -> ActivityRecord:
        return ActivityRecord(
            activity_id=row["activity_id"],
            activity=row["activity"],
            category=row["category"],
            price=int(row["price"]),
            image_location=row["image_location"],
            created_date=row["created_date"],
            created_time=row["created_time"],
            last_updated_by=row["last_updated_by"],
            accessed_by=row["accessed_by"],
        )
