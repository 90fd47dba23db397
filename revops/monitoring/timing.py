"""Execution-time tracking for service-layer calls."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import ParamSpec, TypeVar

logger = logging.getLogger(__name__)

ParamsT = ParamSpec("ParamsT")
ResultT = TypeVar("ResultT")


def monitoring_track_execution_time(function: Callable[ParamsT, ResultT]) -> Callable[ParamsT, ResultT]:
    """Log wall-clock duration of every call to function.

    The duration is logged for failed calls too.

    Args:
        function: Function or method to wrap.

    Returns:
        Callable: Wrapped function with the same signature.
    """

    owner_name = function.__qualname__.rsplit(".", 1)[0] if "." in function.__qualname__ else function.__module__

    @functools.wraps(function)
    def _wrapper(*args: ParamsT.args, **kwargs: ParamsT.kwargs) -> ResultT:
        started_at = time.perf_counter()
        try:
            return function(*args, **kwargs)
        finally:
            elapsed_ms = int((time.perf_counter() - started_at) * 1000)
            logger.info("%s -> %s Execution Time : [ %s ms ]", owner_name, function.__name__, elapsed_ms)

    return _wrapper
