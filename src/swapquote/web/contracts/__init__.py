"""Request and response contracts for the web layer."""

from swapquote.web.contracts.swap import (
    GetSwapQuoteRequestParams,
    QuoteSource,
    SwapQuote,
    TokenSummary,
)

__all__ = [
    "GetSwapQuoteRequestParams",
    "QuoteSource",
    "SwapQuote",
    "TokenSummary",
]
