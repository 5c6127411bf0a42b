"""
Health check invoker.
Calls the backend health endpoint and folds the outcome into a HealthStatus.
"""
import asyncio
import logging
from typing import Optional

import aiohttp

from scaffold.client.state import (
    STATUS_HEALTHY,
    STATUS_UNHEALTHY,
    STATUS_UNREACHABLE,
    HealthStatus,
)

logger = logging.getLogger(__name__)


class HealthChecker:
    def __init__(self, base_url: str, status: Optional[HealthStatus] = None,
                 timeout: Optional[aiohttp.ClientTimeout] = None):
        self.base_url = base_url.rstrip("/")
        self.status = status or HealthStatus()
        # None keeps aiohttp's session default
        self.timeout = timeout

    @property
    def health_url(self) -> str:
        return f"{self.base_url}/health"

    async def check(self) -> HealthStatus:
        """Run one health check; `checking` is cleared on every path."""
        self.status.checking = True
        session_kwargs = {"timeout": self.timeout} if self.timeout is not None else {}
        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.get(self.health_url, headers={"Content-Type": "application/json"}) as response:
                    if 200 <= response.status < 300:
                        self.status.text = STATUS_HEALTHY
                        logger.debug(f"Health check passed: {response.status}")
                    else:
                        self.status.text = STATUS_UNHEALTHY
                        logger.warning(f"Health check failed: {response.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.status.text = STATUS_UNREACHABLE
            logger.warning(f"Health endpoint unreachable at {self.health_url}: {e!r}")
        finally:
            self.status.checking = False
        return self.status
