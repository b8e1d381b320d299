"""Web services for read-only quoting operations."""

from swapquote.web.services.swap_service import SwapService

__all__ = [
    "SwapService",
]
