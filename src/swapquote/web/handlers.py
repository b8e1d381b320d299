"""Swap request handlers.

Framework-agnostic: handlers take raw query parameters and return response
models, raising classified API errors for the error handlers to render.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Optional

from swapquote.constants import DEFAULT_QUOTE_SLIPPAGE_PERCENTAGE, ETH_SYMBOL
from swapquote.errors import (
    InternalServerError,
    RevertAPIError,
    ValidationError,
    ValidationErrorCode,
    ValidationErrorItem,
)
from swapquote.quoting.base import CalculateSwapQuoteParams, SwapQuoterError, SwapQuoterErrorCode
from swapquote.token_metadata import (
    TOKEN_METADATAS_FOR_CHAINS,
    TokenMetadata,
    TokenNotFoundError,
    find_token_address,
)
from swapquote.web.contracts.swap import GetSwapQuoteRequestParams, SwapQuote, TokenSummary
from swapquote.web.middleware.error_handling import is_api_error, is_revert_error
from swapquote.web.services.swap_service import SwapService

logger = logging.getLogger(__name__)


class SwapHandlers:
    """Handlers for the /swap endpoints."""

    def __init__(
        self,
        swap_service: SwapService,
        chain_id: int,
        default_slippage_percentage: float = DEFAULT_QUOTE_SLIPPAGE_PERCENTAGE,
        token_metadatas: tuple[TokenMetadata, ...] = TOKEN_METADATAS_FOR_CHAINS,
    ):
        self._swap_service = swap_service
        self._chain_id = chain_id
        self._default_slippage_percentage = default_slippage_percentage
        self._token_metadatas = token_metadatas

    @property
    def chain_id(self) -> int:
        return self._chain_id

    async def get_swap_quote(self, query: Mapping[str, str]) -> SwapQuote:
        """Quote a swap for the given query parameters.

        Raises:
            APIBaseError: every quote failure, already classified
        """
        params = parse_get_swap_quote_request_params(query, self._default_slippage_percentage)
        is_eth_sell = params.sell_token == ETH_SYMBOL
        sell_token_address = self._find_token_address(params.sell_token, "sellToken")
        buy_token_address = self._find_token_address(params.buy_token, "buyToken")

        try:
            return await self._swap_service.calculate_swap_quote(
                CalculateSwapQuoteParams(
                    sell_token_address=sell_token_address,
                    buy_token_address=buy_token_address,
                    sell_amount=params.sell_amount,
                    buy_amount=params.buy_amount,
                    from_address=params.taker_address,
                    is_eth_sell=is_eth_sell,
                    slippage_percentage=params.slippage_percentage,
                    gas_price=params.gas_price,
                )
            )
        except Exception as e:
            raise classify_swap_quote_error(e, params.buy_amount)

    def get_swap_tokens(self) -> list[TokenSummary]:
        """List every known token with its address on the configured chain."""
        return [
            TokenSummary(symbol=tm.symbol, address=tm.address_for(self._chain_id))
            for tm in self._token_metadatas
        ]

    def _find_token_address(self, symbol: Optional[str], field: str) -> str:
        if not symbol:
            raise ValidationError(
                [ValidationErrorItem(field, ValidationErrorCode.REQUIRED_FIELD, f"Required field `{field}`")]
            )
        try:
            return find_token_address(symbol, self._chain_id, self._token_metadatas)
        except TokenNotFoundError as e:
            raise ValidationError(
                [ValidationErrorItem(field, ValidationErrorCode.VALUE_OUT_OF_RANGE, str(e))]
            )


def parse_get_swap_quote_request_params(
    query: Mapping[str, str],
    default_slippage_percentage: float = DEFAULT_QUOTE_SLIPPAGE_PERCENTAGE,
) -> GetSwapQuoteRequestParams:
    """Coerce raw query strings into typed request params.

    No validation happens here; malformed numbers raise from Decimal/float.
    """
    return GetSwapQuoteRequestParams(
        sell_token=query.get("sellToken"),
        buy_token=query.get("buyToken"),
        sell_amount=_parse_decimal(query.get("sellAmount")),
        buy_amount=_parse_decimal(query.get("buyAmount")),
        taker_address=query.get("takerAddress"),
        slippage_percentage=float(query.get("slippagePercentage") or default_slippage_percentage),
        gas_price=_parse_decimal(query.get("gasPrice")),
    )


def classify_swap_quote_error(error: Exception, buy_amount: Optional[Decimal]) -> Exception:
    """Map a quoting failure onto the API error it should surface as.

    Already-classified errors come back as the identical object.
    """
    if is_api_error(error):
        return error
    if is_revert_error(error):
        return RevertAPIError(error)

    error_message = str(error)
    # TODO: drop the message matching once every quoter raises SwapQuoterError
    if _has_quoter_code(error, SwapQuoterErrorCode.INSUFFICIENT_ASSET_LIQUIDITY):
        return ValidationError(
            [
                ValidationErrorItem(
                    field="buyAmount" if buy_amount is not None else "sellAmount",
                    code=ValidationErrorCode.VALUE_OUT_OF_RANGE,
                    reason=error_message,
                )
            ]
        )
    if _has_quoter_code(error, SwapQuoterErrorCode.ASSET_UNAVAILABLE):
        return ValidationError(
            [
                ValidationErrorItem(
                    field="token",
                    code=ValidationErrorCode.VALUE_OUT_OF_RANGE,
                    reason=error_message,
                )
            ]
        )

    logger.info("Uncaught error: %r", error)
    return InternalServerError(error_message)


def _has_quoter_code(error: Exception, code: SwapQuoterErrorCode) -> bool:
    if isinstance(error, SwapQuoterError):
        return error.code is code
    return str(error).startswith(code.value)


def _parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    return None if value is None else Decimal(value)
