"""HTTP health probes for local services."""

import logging
from collections.abc import Iterable

import requests

from appneural_setup.schemas.results import HealthCheckResult

logger = logging.getLogger(__name__)


def check_endpoint(url: str, timeout: float) -> HealthCheckResult:
    """Probe one endpoint with a GET request.

    Connection errors and timeouts produce an unhealthy result without a
    status; they are never raised.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.debug("Health check %s failed: %s", url, e)
        return HealthCheckResult(url=url, healthy=False)
    return HealthCheckResult(
        url=url,
        healthy=200 <= response.status_code < 300,
        status=response.status_code,
    )


def perform_health_checks(
    endpoints: Iterable[str], timeout: float
) -> list[HealthCheckResult]:
    """Probe endpoints one after another, keeping their order."""
    return [check_endpoint(url, timeout) for url in endpoints]
