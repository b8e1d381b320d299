"""Protocol-level constants shared across the service."""

from decimal import Decimal

# Symbol a taker uses to sell the chain's native asset
ETH_SYMBOL = "ETH"

DEFAULT_QUOTE_SLIPPAGE_PERCENTAGE = 0.2

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"

# 0x Exchange Proxy, the `to` of every swap quote
EXCHANGE_PROXY_ADDRESS = "0xdef1c0ded9bec7f1a1670819833240f027b25eff"

ONE_GWEI = Decimal(10) ** 9
