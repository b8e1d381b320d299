"""Health check endpoints."""

from fastapi import APIRouter, Request

from swapquote import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "swapquote"}


@router.get("/health/detailed")
async def detailed_health(request: Request):
    """Detailed health check with configuration info."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": "swapquote",
        "version": __version__,
        "quoter": request.app.state.swap_service.quoter.name,
        "config": settings.get_safe_dict(),
    }
