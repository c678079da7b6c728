from fastapi import APIRouter

from status_api.api.v1.dashboard import router as dashboard_router
from status_api.api.v1.health import router as health_router
from status_api.api.v1.status import router as status_router

v1_router = APIRouter()

v1_router.include_router(status_router, tags=["Status"])
v1_router.include_router(health_router, tags=["Health"])
v1_router.include_router(dashboard_router, tags=["Dashboard"])
