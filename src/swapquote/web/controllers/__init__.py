"""HTTP controllers for web API endpoints."""

from swapquote.web.controllers.swap import router as swap_router

__all__ = [
    "swap_router",
]
