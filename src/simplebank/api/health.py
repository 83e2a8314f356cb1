"""Health check endpoint."""

from fastapi import APIRouter

from simplebank import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Report that the server is up."""
    return {"server": "ok", "version": __version__}
