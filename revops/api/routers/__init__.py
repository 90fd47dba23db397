"""API router package for endpoint composition."""

from .activities import api_create_activity_router
from .health import api_create_health_router

__all__ = ["api_create_activity_router", "api_create_health_router"]
