"""0x-compatible upstream quoter.

Forwards quote requests to a 0x Swap API deployment and maps its error bodies
back onto SwapQuoterError / RevertError.
API docs: https://0x.org/docs/0x-swap-api/api-references/get-swap-v1-quote
"""

import logging
from decimal import Decimal
from typing import Optional

import httpx

from swapquote.constants import ETH_SYMBOL
from swapquote.errors import GeneralErrorCode
from swapquote.quoting.base import (
    CalculateSwapQuoteParams,
    RevertError,
    SwapQuote,
    SwapQuoter,
    SwapQuoterError,
    SwapQuoterErrorCode,
)

logger = logging.getLogger(__name__)

QUOTE_PATH = "/swap/v1/quote"


class ZeroExSwapQuoter(SwapQuoter):
    """Quoter backed by an upstream 0x Swap API."""

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize 0x quoter.

        Args:
            api_url: Base URL of the upstream API (e.g. https://api.0x.org)
            api_key: Value for the 0x-api-key header
            timeout: Request timeout in seconds
            client: Pre-built HTTP client (tests inject a mock transport here)
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._http_client = client
        self._owns_client = client is None

    @property
    def name(self) -> str:
        return "0x"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    def _get_headers(self) -> dict:
        """Get API headers with authorization."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["0x-api-key"] = self.api_key
        return headers

    async def get_market_sell_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        return await self._fetch_quote(params, {"sellAmount": _format_amount(params.sell_amount)})

    async def get_market_buy_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        return await self._fetch_quote(params, {"buyAmount": _format_amount(params.buy_amount)})

    async def _fetch_quote(self, params: CalculateSwapQuoteParams, amount: dict) -> SwapQuote:
        query = {
            "sellToken": ETH_SYMBOL if params.is_eth_sell else params.sell_token_address,
            "buyToken": params.buy_token_address,
            "slippagePercentage": str(params.slippage_percentage),
            **amount,
        }
        if params.from_address:
            query["takerAddress"] = params.from_address
        if params.gas_price is not None:
            query["gasPrice"] = _format_amount(params.gas_price)

        client = await self._get_client()
        logger.debug(f"Requesting 0x quote: {query}")
        response = await client.get(
            f"{self.api_url}{QUOTE_PATH}",
            params=query,
            headers=self._get_headers(),
        )

        if response.is_error:
            logger.warning(f"0x API error: {response.status_code} - {response.text}")
            _raise_for_error_body(response)
            response.raise_for_status()

        return SwapQuote.model_validate(response.json())

    async def close(self) -> None:
        # Injected clients belong to the caller
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        await super().close()


def _raise_for_error_body(response: httpx.Response) -> None:
    """Translate a 0x error body into the quoter error taxonomy.

    Returns without raising when the body carries nothing recognisable.
    """
    try:
        body = response.json()
    except ValueError:
        return
    if not isinstance(body, dict):
        return

    if body.get("code") == GeneralErrorCode.TRANSACTION_INVALID:
        raise RevertError(body.get("reason", "Transaction Invalid"), body.get("values"))

    for item in body.get("validationErrors") or []:
        reason = str(item.get("reason", ""))
        for code in SwapQuoterErrorCode:
            if reason.startswith(code.value):
                raise SwapQuoterError(code, reason)


def _format_amount(amount: Optional[Decimal]) -> str:
    # Base-unit integers; never scientific notation
    return format(amount, "f")
