"""
Client-side view state.
Held in memory for the lifetime of a dashboard; nothing is persisted.
"""
from pydantic import BaseModel

STATUS_CHECKING = "Checking..."
STATUS_HEALTHY = "✅ API is running"
STATUS_UNHEALTHY = "❌ API is not healthy"
STATUS_UNREACHABLE = "❌ Failed to reach API"

REFRESH_LABEL = "Refresh"
REFRESHING_LABEL = "Refreshing..."


class HealthStatus(BaseModel):
    text: str = STATUS_CHECKING
    checking: bool = False


class Counter(BaseModel):
    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value
