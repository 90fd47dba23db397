"""Typed domain models shared across runtime layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from uuid import UUID


@dataclass(frozen=True)
class ActivityRecord:
    """Persisted game-room activity.

    Attributes:
        activity_id: Identifier assigned on first save; never changes afterwards.
        activity: Activity display name, for example `Pool Table`.
        category: Free-form category label, for example `Billiards`.
        price: Non-negative price.
        image_location: Optional image path or URI.
        created_date: Local creation date.
        created_time: Local creation time of day.
        last_updated_by: Audit actor of the latest write.
        accessed_by: Audit actor of the latest access.
    """

    activity_id: UUID
    activity: str
    category: str
    price: int
    image_location: str | None
    created_date: date
    created_time: time
    last_updated_by: str
    accessed_by: str


@dataclass(frozen=True)
class ActivityView:
    """Read projection of an activity without its identifier.

    Attributes:
        activity: Activity display name.
        category: Category label.
        price: Price value.
        image_location: Optional image path or URI.
        created_date: Local creation date.
        created_time: Local creation time of day.
        last_updated_by: Audit actor of the latest write.
        accessed_by: Audit actor of the latest access.
    """

    activity: str
    category: str
    price: int
    image_location: str | None
    created_date: date
    created_time: time
    last_updated_by: str
    accessed_by: str


class HealthCheckOutcome(str, Enum):
    """Binary outcome of one health check."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class HealthCheckResult:
    """Result of one named health check.

    Attributes:
        name: Stable check name, for example `data-source`.
        description: Human description of the checked dependency.
        result: Check outcome.
        message: Short summary message.
        details: Open string-keyed diagnostics, for example the resolved URI.
    """

    name: str
    description: str
    result: HealthCheckOutcome
    message: str
    details: dict[str, str] = field(default_factory=dict)

    def health_is_success(self) -> bool:
        """Return whether this check succeeded."""

        return self.result is HealthCheckOutcome.SUCCESS

    def health_to_payload(self) -> dict[str, object]:
        """Serialize the result to a JSON-compatible mapping.

        Returns:
            dict[str, object]: Result payload with the outcome rendered as text.
        """

        return {
            "name": self.name,
            "description": self.description,
            "result": self.result.value,
            "message": self.message,
            "details": dict(self.details),
        }
