"""FastAPI application factory for the activity service."""

from collections.abc import Sequence

from fastapi import FastAPI

from revops.config import AppSettings
from revops.monitoring import HealthCheckProviderPort, HeartbeatExtensionPort
from revops.service import ActivityServicePort

from .routers import api_create_activity_router, api_create_health_router


def create_api_application(
    settings: AppSettings,
    activity_service: ActivityServicePort,
    health_check_providers: Sequence[HealthCheckProviderPort],
    heartbeat_extensions: Sequence[HeartbeatExtensionPort],
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        activity_service: Business service used by activity endpoints.
        health_check_providers: Components contributing health checks.
        heartbeat_extensions: Components contributing heartbeat metadata.

    Returns:
        FastAPI: Framework application instance with all routers mounted.
    """

    application = FastAPI(title="LSU Game Room RevOps")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identification payload."""

        return {
            "service": "lsu-gameroom-revops",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(
        api_create_health_router(
            health_check_providers=health_check_providers,
            heartbeat_extensions=heartbeat_extensions,
        )
    )
    application.include_router(api_create_activity_router(activity_service=activity_service))

    return application
