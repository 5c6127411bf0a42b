from scaffold.models.common import MessageResponse
from scaffold.models.health import HealthResponse

__all__ = ["MessageResponse", "HealthResponse"]
