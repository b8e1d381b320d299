"""Swap service for fetching swap quotes.

Pricing, liquidity sourcing and calldata all come from the configured
quoter; this service only picks the quote side and logs the outcome.
"""

import logging

from swapquote.quoting.base import CalculateSwapQuoteParams, SwapQuote, SwapQuoter

logger = logging.getLogger(__name__)


class SwapService:
    """Service for calculating swap quotes.

    This is a READ-ONLY service that does not execute any transactions.
    """

    def __init__(self, quoter: SwapQuoter):
        self._quoter = quoter

    @property
    def quoter(self) -> SwapQuoter:
        return self._quoter

    async def calculate_swap_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        """Calculate a swap quote.

        A market sell is quoted when sell_amount is set (even if buy_amount is
        too), a market buy when only buy_amount is set.

        Args:
            params: Resolved quote parameters

        Returns:
            SwapQuote from the quoter, unmodified

        Raises:
            ValueError: if neither amount is set
        """
        if params.sell_amount is not None:
            logger.debug(
                f"Quoting sell {params.sell_amount} {params.sell_token_address} -> "
                f"{params.buy_token_address} via {self._quoter.name}"
            )
            quote = await self._quoter.get_market_sell_quote(params)
        elif params.buy_amount is not None:
            logger.debug(
                f"Quoting buy {params.buy_amount} {params.buy_token_address} <- "
                f"{params.sell_token_address} via {self._quoter.name}"
            )
            quote = await self._quoter.get_market_buy_quote(params)
        else:
            raise ValueError("sellAmount or buyAmount must be provided")

        logger.info(
            f"Quote from {self._quoter.name}: {quote.sell_amount} {quote.sell_token_address} -> "
            f"{quote.buy_amount} {quote.buy_token_address} (price: {quote.price})"
        )
        return quote

    async def close(self) -> None:
        await self._quoter.close()
