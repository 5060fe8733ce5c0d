"""API v1 router configuration."""

from fastapi import APIRouter

from carrier_intake.api.v1.endpoints import carriers, health, intake

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    carriers.router,
    prefix="/carriers",
    tags=["carriers"],
)

api_router.include_router(
    intake.router,
    prefix="/intake",
    tags=["intake"],
)
