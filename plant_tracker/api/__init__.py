"""API router aggregation."""

from fastapi import APIRouter

from plant_tracker.api.endpoints import calendar_events, health, plants, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, tags=["users"])
api_router.include_router(plants.router, tags=["plants"])
api_router.include_router(calendar_events.router, tags=["calendar-events"])
