"""Swap API endpoints."""

from fastapi import APIRouter, Depends, Request

from swapquote.web.contracts.swap import SwapQuote, TokenSummary
from swapquote.web.handlers import SwapHandlers

router = APIRouter(prefix="/swap", tags=["swap"])


def get_swap_handlers(request: Request) -> SwapHandlers:
    """Resolve the handlers the app factory attached to app state."""
    return request.app.state.swap_handlers


@router.get("/quote", response_model=SwapQuote)
async def get_swap_quote(
    request: Request,
    handlers: SwapHandlers = Depends(get_swap_handlers),
) -> SwapQuote:
    """Get a swap quote.

    Query parameters are read raw: sellToken, buyToken, sellAmount or
    buyAmount, takerAddress, slippagePercentage, gasPrice.
    This is a READ-ONLY operation - no transactions are executed.
    """
    return await handlers.get_swap_quote(request.query_params)


@router.get("/tokens", response_model=list[TokenSummary])
async def get_swap_tokens(
    handlers: SwapHandlers = Depends(get_swap_handlers),
) -> list[TokenSummary]:
    """Get the tokens supported on the configured chain."""
    return handlers.get_swap_tokens()
