"""
Health check response model.
Fixed status payload returned by the health endpoint.
"""
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str
    Message: str
