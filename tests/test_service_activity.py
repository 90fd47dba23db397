"""Tests for the pass-through activity service and its error wrapping."""

from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from revops.domain import ActivityPersistenceError, ActivityResponse, ActivityValidationError
from revops.service import RevOpsActivityService


class _RecordingDAO:
    """DAO double recording calls and returning configured results."""

    def __init__(self, result: int = 1, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def _dao_respond(self, name: str, *arguments: object):
        self.calls.append((name, arguments))
        if self.error is not None:
            raise self.error
        return self.result

    def dao_save_or_update(self, activity_response, activity_id=None) -> int:
        return self._dao_respond("save_or_update", activity_response, activity_id)

    def dao_partial_update(self, activity_id, updates) -> int:
        return self._dao_respond("partial_update", activity_id, updates)

    def dao_delete(self, activity_id) -> int:
        return self._dao_respond("delete", activity_id)

    def dao_fetch_all_categories(self) -> list[str]:
        self.calls.append(("fetch_all_categories", ()))
        if self.error is not None:
            raise self.error
        return ["Arcade", "Billiards"]


def test_service_delegates_every_operation_to_dao() -> None:
    """Forward arguments and results unchanged.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when delegation is incorrect.
    """

    activity_dao = _RecordingDAO(result=1)
    service = RevOpsActivityService(activity_dao=activity_dao)
    activity_response = ActivityResponse(activity="Pool Table", category="Billiards", price=5)
    activity_id = uuid4()

    assert service.service_create_activity(activity_response) == 1
    assert service.service_update_activity(activity_id, activity_response) == 1
    assert service.service_partial_update_activity(activity_id, {"price": 6}) == 1
    assert service.service_delete_activity(activity_id) == 1
    assert service.service_fetch_all_categories() == ["Arcade", "Billiards"]

    assert activity_dao.calls == [
        ("save_or_update", (activity_response, None)),
        ("save_or_update", (activity_response, activity_id)),
        ("partial_update", (activity_id, {"price": 6})),
        ("delete", (activity_id,)),
        ("fetch_all_categories", ()),
    ]


def test_service_passes_not_found_result_through() -> None:
    """Return the DAO's zero result for missing activities without raising."""

    service = RevOpsActivityService(activity_dao=_RecordingDAO(result=0))

    assert service.service_partial_update_activity(uuid4(), {"price": 6}) == 0
    assert service.service_delete_activity(uuid4()) == 0


@pytest.mark.parametrize(
    "dao_error",
    [
        ActivityValidationError("Unknown field: color", field_name="color"),
        OperationalError("SELECT 1", {}, Exception("connection refused")),
        ActivityPersistenceError("An exception occurred while upserting a record.", detail="boom"),
    ],
)
def test_service_wraps_every_failure_into_persistence_error(dao_error: Exception) -> None:
    """Re-wrap DAO failures while preserving the original message and cause.

    Args:
        dao_error: Failure raised by the DAO.

    Returns:
        None: Assertions validate behavior.

    Raises:
        AssertionError: Raised when wrapping is incorrect.
    """

    service = RevOpsActivityService(activity_dao=_RecordingDAO(error=dao_error))

    with pytest.raises(ActivityPersistenceError) as error_info:
        service.service_partial_update_activity(uuid4(), {"color": "green"})

    assert error_info.value.detail == str(dao_error)
    assert error_info.value.__cause__ is dao_error


def test_service_rejects_missing_dao() -> None:
    """Reject construction without a DAO."""

    with pytest.raises(ValueError, match="activity_dao must not be None"):
        RevOpsActivityService(activity_dao=None)  # type: ignore[arg-type]
