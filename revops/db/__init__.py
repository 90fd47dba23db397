"""Database layer package for all SQL and persistence boundaries."""

from .activity_dao import ActivityDAO
from .activity_repository import SQLAlchemyActivityRepository
from .health import SQLAlchemyDatabaseHealthCheck
from .interfaces import ActivityDataAccessPort, ActivityRepositoryPort
from .retry import RetryContext, RetryPolicy, db_is_transient_error
from .schema import activity_table, db_metadata
from .session import db_create_engine

__all__ = [
    "ActivityDAO",
    "ActivityDataAccessPort",
    "ActivityRepositoryPort",
    "RetryContext",
    "RetryPolicy",
    "SQLAlchemyActivityRepository",
    "SQLAlchemyDatabaseHealthCheck",
    "activity_table",
    "db_create_engine",
    "db_is_transient_error",
    "db_metadata",
]
