"""API routes for the PDF parsing service."""

from .health import router as health_router
from .parse import router as parse_router

__all__ = ["health_router", "parse_router"]
