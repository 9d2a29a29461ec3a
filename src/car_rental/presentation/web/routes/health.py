"""Health check endpoints."""

from fastapi import APIRouter

from ..config import get_settings

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": get_settings().service_name}
