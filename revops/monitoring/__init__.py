"""Monitoring package for health aggregation, heartbeat payloads and timing."""

from .health import HealthCheckProviderPort, monitoring_run_health_checks
from .heartbeat import AppHeartbeatExtension, HeartbeatExtensionPort, monitoring_build_heartbeat_payload
from .timing import monitoring_track_execution_time

__all__ = [
    "AppHeartbeatExtension",
    "HealthCheckProviderPort",
    "HeartbeatExtensionPort",
    "monitoring_build_heartbeat_payload",
    "monitoring_run_health_checks",
    "monitoring_track_execution_time",
]
