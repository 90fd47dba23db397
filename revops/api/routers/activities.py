"""Activity API router composition for create, update, delete and category reads."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from revops.domain import ActivityResponse
from revops.service import ActivityServicePort

logger = logging.getLogger(__name__)


def api_create_activity_router(activity_service: ActivityServicePort) -> APIRouter:
    """Create activity router exposing mutating endpoints and category listing.

    Each mutating endpoint maps the service result count to HTTP 200 when positive
    and HTTP 500 otherwise. A missing activity is reported as HTTP 500 as well.

    Args:
        activity_service: Business service for activity operations.

    Returns:
        APIRouter: Router exposing `/activities` endpoints.

    Raises:
        ValueError: Raised when activity_service is invalid.
    """

    if activity_service is None:
        raise ValueError("activity_service must not be None")

    router = APIRouter(prefix="/activities", tags=["activities"])

    @router.post("/create", response_class=PlainTextResponse)
    def api_activity_create(activity_response: ActivityResponse) -> PlainTextResponse:
        """Create one activity.

        Args:
            activity_response: Activity payload.

        Returns:
            PlainTextResponse: Outcome message.
        """

        try:
            result = activity_service.service_create_activity(activity_response)
        except Exception as error:
            logger.error("Error occurred while creating activity: %s", error, exc_info=error)
            return _api_text_response("An error occurred while creating the activity.", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _api_result_response(
            result=result,
            success_message="Activity created successfully.",
            failure_message="Failed to create activity.",
        )

    @router.put("/update/{activity_id}", response_class=PlainTextResponse)
    def api_activity_update(activity_id: UUID, activity_response: ActivityResponse) -> PlainTextResponse:
        """Replace the client-managed fields of one activity.

        Args:
            activity_id: Target activity identifier.
            activity_response: Activity payload.

        Returns:
            PlainTextResponse: Outcome message.
        """

        try:
            result = activity_service.service_update_activity(activity_id, activity_response)
        except Exception as error:
            logger.error("Error occurred while updating activity %s: %s", activity_id, error, exc_info=error)
            return _api_text_response("An error occurred while updating the activity.", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _api_result_response(
            result=result,
            success_message="Activity updated successfully.",
            failure_message="Failed to update activity.",
        )

    @router.patch("/partial-update/{activity_id}", response_class=PlainTextResponse)
    def api_activity_partial_update(
        activity_id: UUID,
        updates: dict[str, Any] = Body(...),
    ) -> PlainTextResponse:
        """Apply a sparse field map onto one activity.

        Args:
            activity_id: Target activity identifier.
            updates: Mapping of field name to new value.

        Returns:
            PlainTextResponse: Outcome message.
        """

        try:
            result = activity_service.service_partial_update_activity(activity_id, updates)
        except Exception as error:
            logger.error("Error occurred while partially updating activity %s: %s", activity_id, error, exc_info=error)
            return _api_text_response(
                "An error occurred while partially updating the activity.",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return _api_result_response(
            result=result,
            success_message="Activity partially updated successfully.",
            failure_message="Failed to partially update activity.",
        )

    @router.delete("/delete/{activity_id}", response_class=PlainTextResponse)
    def api_activity_delete(activity_id: UUID) -> PlainTextResponse:
        """Delete one activity.

        Args:
            activity_id: Target activity identifier.

        Returns:
            PlainTextResponse: Outcome message.
        """

        try:
            result = activity_service.service_delete_activity(activity_id)
        except Exception as error:
            logger.error("Error occurred while deleting activity %s: %s", activity_id, error, exc_info=error)
            return _api_text_response("An error occurred while deleting the activity.", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _api_result_response(
            result=result,
            success_message="Activity deleted successfully.",
            failure_message="Failed to delete activity.",
        )

    @router.get("/categories")
    def api_activity_categories() -> Response:
        """List distinct activity categories.

        Returns:
            Response: JSON array of category strings, or an empty HTTP 500 response.
        """

        try:
            categories = activity_service.service_fetch_all_categories()
        except Exception as error:
            logger.error("Error occurred while fetching categories: %s", error, exc_info=error)
            return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(content=list(categories), status_code=status.HTTP_200_OK)

    return router


def _api_result_response(result: int, success_message: str, failure_message: str) -> PlainTextResponse:
    if result > 0:
        logger.info(success_message)
        return _api_text_response(success_message, status.HTTP_200_OK)
    logger.warning(failure_message)
    return _api_text_response(failure_message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _api_text_response(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(content=message, status_code=status_code)


__all__ = ["api_create_activity_router"]
