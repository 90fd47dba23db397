"""Typed interfaces for service-layer responsibilities."""

from collections.abc import Mapping
from typing import Any, Protocol
from uuid import UUID

from revops.domain import ActivityResponse


class ActivityServicePort(Protocol):
    """Port definition for activity business operations used by the API layer."""

    def service_create_activity(self, activity_response: ActivityResponse) -> int:
        """Create one activity and return the number of created activities."""

    def service_update_activity(self, activity_id: UUID, activity_response: ActivityResponse) -> int:
        """Replace one activity and return the number of updated activities."""

    def service_partial_update_activity(self, activity_id: UUID, updates: Mapping[str, Any]) -> int:
        """Partially update one activity; 0 when it does not exist."""

    def service_delete_activity(self, activity_id: UUID) -> int:
        """Delete one activity and return the number of deleted activities."""

    def service_fetch_all_categories(self) -> list[str]:
        """Return distinct stored categories in ascending order."""
