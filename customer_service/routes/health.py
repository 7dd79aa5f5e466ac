"""
Customer Service — Health Check Route
=======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings MongoDB and reports the aggregate status.

Status levels:
    - healthy:   MongoDB reachable
    - unhealthy: MongoDB unreachable (every customer endpoint would fail)
"""

import logging
import time

from fastapi import APIRouter

from customer_service import __version__
from customer_service.database import ping_database
from customer_service.schemas.customer import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Why module-level: Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """Check MongoDB connectivity and report uptime."""
    connected = await ping_database()
    if not connected:
        logger.warning("Health check: MongoDB unreachable")

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
