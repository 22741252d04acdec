"""System routes for the table gateway."""

from fastapi import APIRouter

from dbgateway.infrastructure.health import get_health_status

router = APIRouter(tags=["System"])


@router.get("/")
async def root():
    return {"message": "Welcome to the Supabase API"}


@router.get("/health")
async def health_check():
    """Health check with Supabase testing. Returns service status and dependency health."""
    return await get_health_status()
