"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swapquote import __version__
from swapquote.config import Settings, get_settings
from swapquote.quoting.factory import create_swap_quoter
from swapquote.token_metadata import TOKEN_METADATAS_FOR_CHAINS
from swapquote.web.handlers import SwapHandlers
from swapquote.web.middleware.error_handling import register_error_handlers
from swapquote.web.services.swap_service import SwapService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    yield
    # Shutdown
    await app.state.swap_service.close()


def create_app(
    settings: Optional[Settings] = None,
    swap_service: Optional[SwapService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        swap_service: Quoting collaborator (defaults to one over the configured quoter)
    """
    settings = settings or get_settings()
    swap_service = swap_service or SwapService(create_swap_quoter(settings))

    app = FastAPI(
        title="Swap Quote API",
        description="Token swap quotes and supported token lists",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.swap_service = swap_service
    app.state.swap_handlers = SwapHandlers(
        swap_service,
        chain_id=settings.chain_id,
        default_slippage_percentage=settings.default_quote_slippage_percentage,
        token_metadatas=TOKEN_METADATAS_FOR_CHAINS,
    )

    register_error_handlers(app)

    # Register routes
    from swapquote.api.routes import health
    from swapquote.web.controllers import swap_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(swap_router)

    return app
