"""Simulated quoter for dry-run mode.

Prices and depth are fixed, illustrative values. Never use them for real
trading.
"""

import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Optional

from swapquote.constants import EXCHANGE_PROXY_ADDRESS, ONE_GWEI
from swapquote.quoting.base import (
    CalculateSwapQuoteParams,
    QuoteSource,
    SwapQuote,
    SwapQuoter,
    SwapQuoterError,
    SwapQuoterErrorCode,
)
from swapquote.token_metadata import (
    TOKEN_METADATAS_FOR_CHAINS,
    TokenMetadata,
    get_token_metadata_if_exists,
)

logger = logging.getLogger(__name__)


# Simulated market prices in USD
SIMULATED_PRICES: dict[str, Decimal] = {
    "ETH": Decimal("3900.00"),
    "WETH": Decimal("3900.00"),
    "DAI": Decimal("1.00"),
    "USDC": Decimal("1.00"),
    "USDT": Decimal("1.00"),
    "ZRX": Decimal("0.62"),
    "MKR": Decimal("1850.00"),
    "WBTC": Decimal("100000.00"),
    "LINK": Decimal("28.00"),
    "BAT": Decimal("0.28"),
    "REP": Decimal("1.10"),
    "KNC": Decimal("0.65"),
}

# Simulated depth per token in USD; anything larger cannot be filled
SIMULATED_LIQUIDITY_USD: dict[str, Decimal] = {
    "ETH": Decimal("50000000"),
    "WETH": Decimal("50000000"),
    "DAI": Decimal("20000000"),
    "USDC": Decimal("40000000"),
    "USDT": Decimal("40000000"),
    "WBTC": Decimal("30000000"),
}
DEFAULT_LIQUIDITY_USD = Decimal("1000000")

DEFAULT_GAS_PRICE = Decimal(20) * ONE_GWEI
SIMULATED_GAS = Decimal("250000")


class SimulatedSwapQuoter(SwapQuoter):
    """
    Quoter that prices swaps from a fixed USD price table.

    Raises the same error codes as a real quoter:
    - ASSET_UNAVAILABLE for tokens without a simulated price
    - INSUFFICIENT_ASSET_LIQUIDITY when a side exceeds the simulated depth
    """

    def __init__(
        self,
        chain_id: int,
        token_metadatas: tuple[TokenMetadata, ...] = TOKEN_METADATAS_FOR_CHAINS,
        fee_percent: Decimal = Decimal("0.003"),
    ):
        self.chain_id = chain_id
        self.token_metadatas = token_metadatas
        self.fee_percent = fee_percent
        self._prices = SIMULATED_PRICES.copy()
        self._liquidity = SIMULATED_LIQUIDITY_USD.copy()

    @property
    def name(self) -> str:
        return "Simulated"

    def set_price(self, symbol: str, price: Decimal) -> None:
        """Set simulated price for a token."""
        self._prices[symbol.upper()] = price

    def set_liquidity(self, symbol: str, liquidity_usd: Decimal) -> None:
        """Set simulated depth for a token."""
        self._liquidity[symbol.upper()] = liquidity_usd

    async def get_market_sell_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        _check_positive("sellAmount", params.sell_amount)
        sell_token, sell_price = self._resolve(params.sell_token_address)
        buy_token, buy_price = self._resolve(params.buy_token_address)

        sell_units = params.sell_amount / _unit(sell_token)
        usd_value = sell_units * sell_price
        self._check_liquidity(sell_token, usd_value)
        self._check_liquidity(buy_token, usd_value)

        buy_units = usd_value * (1 - self.fee_percent) / buy_price
        buy_amount = (buy_units * _unit(buy_token)).to_integral_value(rounding=ROUND_FLOOR)

        return self._build_quote(params, sell_units, buy_units, params.sell_amount, buy_amount)

    async def get_market_buy_quote(self, params: CalculateSwapQuoteParams) -> SwapQuote:
        _check_positive("buyAmount", params.buy_amount)
        sell_token, sell_price = self._resolve(params.sell_token_address)
        buy_token, buy_price = self._resolve(params.buy_token_address)

        buy_units = params.buy_amount / _unit(buy_token)
        usd_value = buy_units * buy_price
        self._check_liquidity(buy_token, usd_value)
        self._check_liquidity(sell_token, usd_value)

        sell_units = usd_value / (1 - self.fee_percent) / sell_price
        sell_amount = (sell_units * _unit(sell_token)).to_integral_value(rounding=ROUND_CEILING)

        return self._build_quote(params, sell_units, buy_units, sell_amount, params.buy_amount)

    def _resolve(self, address: str) -> tuple[TokenMetadata, Decimal]:
        token = get_token_metadata_if_exists(address, self.chain_id, self.token_metadatas)
        price: Optional[Decimal] = self._prices.get(token.symbol.upper()) if token else None
        if token is None or price is None:
            raise SwapQuoterError(SwapQuoterErrorCode.ASSET_UNAVAILABLE, f"no simulated market for {address}")
        return token, price

    def _check_liquidity(self, token: TokenMetadata, usd_value: Decimal) -> None:
        available = self._liquidity.get(token.symbol.upper(), DEFAULT_LIQUIDITY_USD)
        if usd_value > available:
            logger.debug(f"Simulated {token.symbol} depth ${available} below requested ${usd_value:.2f}")
            raise SwapQuoterError(
                SwapQuoterErrorCode.INSUFFICIENT_ASSET_LIQUIDITY,
                f"{token.symbol} depth is {available} USD",
            )

    def _build_quote(
        self,
        params: CalculateSwapQuoteParams,
        sell_units: Decimal,
        buy_units: Decimal,
        sell_amount: Decimal,
        buy_amount: Decimal,
    ) -> SwapQuote:
        price = buy_units / sell_units if sell_units else Decimal("0")
        guaranteed_price = price * (1 - Decimal(str(params.slippage_percentage)))

        return SwapQuote(
            price=price.quantize(Decimal("0.000000000001")),
            guaranteed_price=max(guaranteed_price, Decimal("0")).quantize(Decimal("0.000000000001")),
            to=EXCHANGE_PROXY_ADDRESS,
            data="0x",
            value=sell_amount if params.is_eth_sell else Decimal("0"),
            gas_price=params.gas_price or DEFAULT_GAS_PRICE,
            gas=SIMULATED_GAS,
            protocol_fee=Decimal("0"),
            buy_amount=buy_amount,
            sell_amount=sell_amount,
            buy_token_address=params.buy_token_address,
            sell_token_address=params.sell_token_address,
            sources=[QuoteSource(name=self.name, proportion=Decimal("1"))],
        )


def _unit(token: TokenMetadata) -> Decimal:
    return Decimal(10) ** token.decimals


def _check_positive(field: str, amount: Decimal) -> None:
    if amount <= 0:
        raise ValueError(f"{field} must be positive, got {amount}")
