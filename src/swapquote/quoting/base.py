"""Abstract quoting interface and the collaborator's error taxonomy."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class SwapQuoterErrorCode(str, Enum):
    """Error codes a quoter prefixes its failure messages with."""

    INSUFFICIENT_ASSET_LIQUIDITY = "INSUFFICIENT_ASSET_LIQUIDITY"
    ASSET_UNAVAILABLE = "ASSET_UNAVAILABLE"


class SwapQuoterError(Exception):
    """A quote could not be produced for a known reason.

    The message always starts with the code value, so callers that only see
    the message can still tell the failures apart.
    """

    def __init__(self, code: SwapQuoterErrorCode, detail: Optional[str] = None):
        message = code.value if not detail or detail.startswith(code.value) else f"{code.value}: {detail}"
        super().__init__(message)
        self.code = code


class RevertError(Exception):
    """The quoted transaction reverts when simulated on chain."""

    def __init__(self, name: str, values: Optional[dict[str, Any]] = None):
        super().__init__(name)
        self.name = name
        self.values = values or {}


@dataclass(frozen=True)
class CalculateSwapQuoteParams:
    """Resolved request handed to the quoting collaborator."""

    sell_token_address: str
    buy_token_address: str
    sell_amount: Optional[Decimal]
    buy_amount: Optional[Decimal]
    from_address: Optional[str]
    is_eth_sell: bool
    slippage_percentage: float
    gas_price: Optional[Decimal] = None


class QuoteSource(BaseModel):
    """Share of the fill routed through one liquidity source."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    name: str
    proportion: Decimal


class SwapQuote(BaseModel):
    """A swap quote as returned to API clients.

    Fields the upstream quoter adds beyond these are kept and passed through.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    price: Decimal
    guaranteed_price: Optional[Decimal] = None
    to: str
    data: str = "0x"
    value: Decimal = Decimal("0")
    gas_price: Optional[Decimal] = None
    gas: Optional[Decimal] = None
    protocol_fee: Decimal = Decimal("0")
    buy_amount: Decimal
    sell_amount: Decimal
    buy_token_address: str
    sell_token_address: str
    sources: list[QuoteSource] = Field(default_factory=list)


class SwapQuoter(ABC):
    """Abstract base class for quote backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Quoter name identifier."""
        pass

    @abstractmethod
    async def get_market_sell_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        """
        Quote selling exactly params.sell_amount of the sell token.

        Raises:
            SwapQuoterError: on missing liquidity or an unavailable asset
            RevertError: if the resulting transaction would revert
        """
        pass

    @abstractmethod
    async def get_market_buy_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        """Quote buying exactly params.buy_amount of the buy token."""
        pass

    async def close(self) -> None:
        """Release any held resources."""
        logger.debug(f"{self.name} quoter closed")
