"""Health and heartbeat endpoint router composition."""

from collections.abc import Sequence

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from revops.monitoring import (
    HealthCheckProviderPort,
    HeartbeatExtensionPort,
    monitoring_build_heartbeat_payload,
    monitoring_run_health_checks,
)


def api_create_health_router(
    health_check_providers: Sequence[HealthCheckProviderPort],
    heartbeat_extensions: Sequence[HeartbeatExtensionPort],
) -> APIRouter:
    """Create health-check router with dependency health and liveness endpoints.

    Args:
        health_check_providers: Components contributing health checks.
        heartbeat_extensions: Components contributing heartbeat metadata.

    Returns:
        APIRouter: Router exposing `/health` and `/heartbeat` endpoints.

    Raises:
        ValueError: Raised when a dependency collection is None.
    """

    if health_check_providers is None:
        raise ValueError("health_check_providers must not be None")
    if heartbeat_extensions is None:
        raise ValueError("heartbeat_extensions must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application and dependency health state.

        Returns:
            JSONResponse: HTTP 200 when every check succeeds, otherwise HTTP 503.
        """

        check_results = monitoring_run_health_checks(health_check_providers)
        is_healthy = all(check_result.health_is_success() for check_result in check_results)
        payload = {
            "status": "ok" if is_healthy else "degraded",
            "app": "up",
            "checks": [check_result.health_to_payload() for check_result in check_results],
        }
        status_code = status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE
        return JSONResponse(content=payload, status_code=status_code)

    @router.get("/heartbeat")
    def api_heartbeat() -> JSONResponse:
        """Return liveness payload merged with heartbeat extensions.

        Returns:
            JSONResponse: Liveness payload.
        """

        return JSONResponse(
            content=monitoring_build_heartbeat_payload(heartbeat_extensions),
            status_code=status.HTTP_200_OK,
        )

    return router
