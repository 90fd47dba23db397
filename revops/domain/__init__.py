"""Domain models used across application layer boundaries."""

from .activity_mapping import domain_activity_from_response, domain_activity_to_view
from .activity_updates import ActivityUpdateCommand, ActivityUpdateField
from .dto import ActivityResponse
from .errors import ActivityPersistenceError, ActivityValidationError, TransientDataAccessError
from .models import ActivityRecord, ActivityView, HealthCheckOutcome, HealthCheckResult

__all__ = [
    "ActivityPersistenceError",
    "ActivityRecord",
    "ActivityResponse",
    "ActivityUpdateCommand",
    "ActivityUpdateField",
    "ActivityValidationError",
    "ActivityView",
    "HealthCheckOutcome",
    "HealthCheckResult",
    "TransientDataAccessError",
    "domain_activity_from_response",
    "domain_activity_to_view",
]
