"""Health-check contracts and aggregation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from revops.domain import HealthCheckResult


class HealthCheckProviderPort(Protocol):
    """Port definition for components contributing health checks."""

    def health_checks(self) -> list[Callable[[], HealthCheckResult]]:
        """Return the health checks this component contributes.

        Returns:
            list[Callable[[], HealthCheckResult]]: Zero-argument check callables.
        """


def monitoring_run_health_checks(providers: Iterable[HealthCheckProviderPort]) -> list[HealthCheckResult]:
    """Run every check of every provider in registration order.

    Args:
        providers: Health-check providers.

    Returns:
        list[HealthCheckResult]: One result per executed check.
    """

    return [health_check() for provider in providers for health_check in provider.health_checks()]
