"""Project-native typed exceptions for activity persistence and validation."""

from __future__ import annotations


class TransientDataAccessError(ConnectionError):
    """Datastore failure expected to clear when the same unit of work is retried."""


class ActivityPersistenceError(RuntimeError):
    """Catch-all persistence failure carrying the original diagnostic message.

    Attributes:
        detail: Message of the underlying failure, if any.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.detail = detail

    def __str__(self) -> str:
        base_message = super().__str__()
        if self.detail:
            return f"{base_message} Detail: {self.detail}"
        return base_message


class ActivityValidationError(ValueError):
    """Client-supplied activity input that can never be applied.

    Attributes:
        field_name: Offending field name, when the failure concerns one field.
    """

    def __init__(self, message: str, field_name: str | None = None):
        super().__init__(message)
        self.field_name = field_name
