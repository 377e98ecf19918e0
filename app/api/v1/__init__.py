"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import exercises, health, sessions, tools

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
