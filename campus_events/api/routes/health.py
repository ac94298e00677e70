"""Health check routes for the FastAPI application."""

from fastapi import APIRouter

from ... import __version__
from ...config.environment import ENVIRONMENT

router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": ENVIRONMENT,
        "version": __version__
    }
