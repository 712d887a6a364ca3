"""Liveness endpoint."""

from fastapi import APIRouter

from ..models.extraction import HealthStatus

router = APIRouter()


@router.get("/")
async def health_check() -> HealthStatus:
    """Health check endpoint."""
    return HealthStatus()
