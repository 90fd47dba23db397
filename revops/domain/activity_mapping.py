"""Translation between wire DTOs, read projections and persisted records."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from uuid import UUID, uuid4

from .dto import ActivityResponse
from .models import ActivityRecord, ActivityView


def domain_activity_from_response(
    activity_response: ActivityResponse,
    actor: str,
    activity_id: UUID | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> ActivityRecord:
    """Build a persistable record from a wire DTO.

    Args:
        activity_response: Client-supplied activity payload.
        actor: Audit actor written to `last_updated_by` and `accessed_by`.
        activity_id: Existing identifier; a new UUID is generated when omitted.
        clock: Local clock used for creation timestamps.

    Returns:
        ActivityRecord: Record ready for persistence.

    Raises:
        ValueError: Raised when actor is blank.
    """

    normalized_actor = actor.strip()
    if not normalized_actor:
        raise ValueError("actor must not be blank")

    created_at = clock()
    return ActivityRecord(
        activity_id=activity_id or uuid4(),
        activity=activity_response.activity,
        category=activity_response.category,
        price=activity_response.price,
        image_location=activity_response.image_location,
        created_date=created_at.date(),
        created_time=created_at.time().replace(microsecond=0),
        last_updated_by=normalized_actor,
        accessed_by=normalized_actor,
    )


def domain_activity_to_view(record: ActivityRecord) -> ActivityView:
    """Project a persisted record onto its identifier-free read view.

    Args:
        record: Persisted activity.

    Returns:
        ActivityView: Projection used in audit log lines.
    """

    return ActivityView(
        activity=record.activity,
        category=record.category,
        price=record.price,
        image_location=record.image_location,
        created_date=record.created_date,
        created_time=record.created_time,
        last_updated_by=record.last_updated_by,
        accessed_by=record.accessed_by,
    )
