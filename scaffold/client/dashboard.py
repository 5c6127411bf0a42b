"""
Terminal dashboard.
Pairs the health card with a local counter and renders both as text.
"""
import asyncio
import logging
from typing import Optional

from scaffold.client.checker import HealthChecker
from scaffold.client.state import REFRESH_LABEL, REFRESHING_LABEL, Counter, HealthStatus

logger = logging.getLogger(__name__)

TITLE = "Scaffold Health Dashboard"
HEALTH_HEADING = "API Health Check"


class Dashboard:
    def __init__(self, checker: HealthChecker, counter: Optional[Counter] = None):
        self.checker = checker
        self.counter = counter or Counter()
        self._mounted = False
        self._pending: Optional[asyncio.Task] = None

    @property
    def status(self) -> HealthStatus:
        return self.checker.status

    @property
    def refresh_enabled(self) -> bool:
        if self.status.checking:
            return False
        return self._pending is None or self._pending.done()

    def increment(self) -> int:
        return self.counter.increment()

    async def refresh(self) -> bool:
        """Run a check now. Returns False when the control is disabled."""
        if not self.refresh_enabled:
            logger.debug("Refresh ignored, check already in progress")
            return False
        await self.checker.check()
        return True

    def start_refresh(self) -> Optional[asyncio.Task]:
        """Schedule a check on the running loop, or return None if disabled."""
        if not self.refresh_enabled:
            logger.debug("Refresh ignored, check already in progress")
            return None
        self._pending = asyncio.ensure_future(self.checker.check())
        return self._pending

    def mount(self) -> Optional[asyncio.Task]:
        """First appearance triggers exactly one automatic check."""
        if self._mounted:
            return None
        self._mounted = True
        return self.start_refresh()

    async def close(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
            try:
                await self._pending
            except asyncio.CancelledError:
                pass
        self._pending = None

    def render(self) -> str:
        if self.refresh_enabled:
            control = f"[{REFRESH_LABEL}]"
        else:
            control = f"[{REFRESHING_LABEL}] (disabled)"

        lines = [
            TITLE,
            "=" * len(TITLE),
            "",
            f"count is {self.counter.value}",
            "Type 'c' to count, 'r' to refresh the health check, 'q' to quit",
            "",
            HEALTH_HEADING,
            "-" * len(HEALTH_HEADING),
            self.status.text,
            control,
        ]
        return "\n".join(lines)
