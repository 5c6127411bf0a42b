from scaffold.client.checker import HealthChecker
from scaffold.client.dashboard import Dashboard
from scaffold.client.state import Counter, HealthStatus

__all__ = ["HealthChecker", "Dashboard", "Counter", "HealthStatus"]
