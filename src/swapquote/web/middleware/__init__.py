"""Request/response middleware for the web layer."""

from swapquote.web.middleware.error_handling import (
    is_api_error,
    is_revert_error,
    register_error_handlers,
)

__all__ = [
    "is_api_error",
    "is_revert_error",
    "register_error_handlers",
]
