"""Swap request and response contracts."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from swapquote.quoting.base import QuoteSource, SwapQuote


@dataclass(frozen=True)
class GetSwapQuoteRequestParams:
    """Query parameters of GET /swap/quote after type coercion."""

    sell_token: Optional[str]
    buy_token: Optional[str]
    sell_amount: Optional[Decimal]
    buy_amount: Optional[Decimal]
    taker_address: Optional[str]
    slippage_percentage: float
    gas_price: Optional[Decimal]


class TokenSummary(BaseModel):
    """A supported token and its address on the configured chain."""

    symbol: str = Field(..., description="Token symbol (ETH, DAI, etc.)")
    address: str = Field(..., description="Token contract address")


__all__ = [
    "GetSwapQuoteRequestParams",
    "QuoteSource",
    "SwapQuote",
    "TokenSummary",
]
