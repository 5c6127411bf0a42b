from fastapi import APIRouter
from scaffold.api.routes.health import router as health_router
from scaffold.api.routes.general import router as general_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(general_router, tags=["general"])
