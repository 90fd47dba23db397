"""Heartbeat extensions contributing static metadata to liveness payloads."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol


class HeartbeatExtensionPort(Protocol):
    """Port definition for heartbeat payload contributors."""

    def heartbeat_extension(self) -> dict[str, Any]:
        """Return key/value pairs merged into the heartbeat payload."""


class AppHeartbeatExtension(HeartbeatExtensionPort):
    """Heartbeat extension reporting the application build timestamp."""

    def __init__(self, build_timestamp: str = "default-timestamp"):
        """Initialize heartbeat extension.

        Args:
            build_timestamp: Build timestamp reported by the heartbeat endpoint.
        """

        self._build_timestamp = build_timestamp

    def heartbeat_extension(self) -> dict[str, Any]:
        """Return the build timestamp entry.

        Returns:
            dict[str, Any]: Mapping with the `buildTimestamp` key.
        """

        return {"buildTimestamp": self._build_timestamp}


def monitoring_build_heartbeat_payload(extensions: Iterable[HeartbeatExtensionPort]) -> dict[str, Any]:
    """Merge every extension into one liveness payload.

    Later extensions override earlier keys; `status` is always `up`.

    Args:
        extensions: Heartbeat extensions in registration order.

    Returns:
        dict[str, Any]: Liveness payload.
    """

    payload: dict[str, Any] = {}
    for extension in extensions:
        payload.update(extension.heartbeat_extension())
    payload["status"] = "up"
    return payload
