"""Quote backends.

Quoters:
- 0x: upstream 0x Swap API over HTTP
- Simulated: fixed-price dry-run quotes
"""

from swapquote.quoting.base import (
    CalculateSwapQuoteParams,
    QuoteSource,
    RevertError,
    SwapQuote,
    SwapQuoter,
    SwapQuoterError,
    SwapQuoterErrorCode,
)
from swapquote.quoting.dry_run import SimulatedSwapQuoter
from swapquote.quoting.factory import create_swap_quoter
from swapquote.quoting.zeroex import ZeroExSwapQuoter

__all__ = [
    # Base classes
    "CalculateSwapQuoteParams",
    "QuoteSource",
    "SwapQuote",
    "SwapQuoter",
    # Errors
    "RevertError",
    "SwapQuoterError",
    "SwapQuoterErrorCode",
    # Quoters
    "SimulatedSwapQuoter",
    "ZeroExSwapQuoter",
    # Factory
    "create_swap_quoter",
]
