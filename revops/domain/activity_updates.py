"""Validated partial-update command for persisted activities."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from .dto import ACTIVITY_PRICE_ADAPTER
from .errors import ActivityValidationError
from .models import ActivityRecord


class ActivityUpdateField(str, Enum):
    """Wire field names accepted by a partial update."""

    ACTIVITY = "activity"
    CATEGORY = "category"
    PRICE = "price"
    IMAGE_LOCATION = "imageLocation"


_RECORD_ATTRIBUTE_BY_FIELD: dict[ActivityUpdateField, str] = {
    ActivityUpdateField.ACTIVITY: "activity",
    ActivityUpdateField.CATEGORY: "category",
    ActivityUpdateField.PRICE: "price",
    ActivityUpdateField.IMAGE_LOCATION: "image_location",
}


@dataclass(frozen=True)
class ActivityUpdateCommand:
    """Sparse set of field replacements validated before any mutation.

    Attributes:
        changes: Replacement value per accepted field.
    """

    changes: tuple[tuple[ActivityUpdateField, Any], ...]

    @classmethod
    def from_mapping(cls, updates: Mapping[str, Any]) -> ActivityUpdateCommand:
        """Build a command from a client-supplied field map.

        Args:
            updates: Mapping of wire field name to new value.

        Returns:
            ActivityUpdateCommand: Validated command.

        Raises:
            ActivityValidationError: Raised for unknown field names or invalid values.
        """

        if updates is None or not isinstance(updates, Mapping):
            raise ActivityValidationError("updates must be a mapping of field name to value")

        changes: list[tuple[ActivityUpdateField, Any]] = []
        for field_name, value in updates.items():
            try:
                update_field = ActivityUpdateField(field_name)
            except ValueError as error:
                raise ActivityValidationError(f"Unknown field: {field_name}", field_name=str(field_name)) from error
            changes.append((update_field, _update_validate_value(update_field, value)))
        return cls(changes=tuple(changes))

    def update_field_names(self) -> tuple[str, ...]:
        """Return wire field names touched by this command, in input order."""

        return tuple(update_field.value for update_field, _ in self.changes)

    def apply(self, record: ActivityRecord) -> ActivityRecord:
        """Return a copy of record with this command's fields replaced.

        Args:
            record: Persisted activity to update.

        Returns:
            ActivityRecord: Updated record; identifier and timestamps are unchanged.
        """

        replacements = {_RECORD_ATTRIBUTE_BY_FIELD[update_field]: value for update_field, value in self.changes}
        return dataclasses.replace(record, **replacements)


def _update_validate_value(update_field: ActivityUpdateField, value: Any) -> Any:
    if update_field is ActivityUpdateField.PRICE:
        try:
            return ACTIVITY_PRICE_ADAPTER.validate_python(value)
        except ValidationError as error:
            raise ActivityValidationError(
                "price must be a non-negative integer",
                field_name=update_field.value,
            ) from error

    if update_field is ActivityUpdateField.IMAGE_LOCATION:
        if value is not None and not isinstance(value, str):
            raise ActivityValidationError("imageLocation must be a string or null", field_name=update_field.value)
        return value

    if not isinstance(value, str) or not value.strip():
        raise ActivityValidationError(f"{update_field.value} must be a non-blank string", field_name=update_field.value)
    return value
