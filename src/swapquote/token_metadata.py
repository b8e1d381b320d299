"""Static token metadata for every supported chain.

Order of TOKEN_METADATAS_FOR_CHAINS is the order the token list endpoint
serves. Tokens without a deployment on a chain map to NULL_ADDRESS.
"""

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from swapquote.constants import NULL_ADDRESS

_TOKEN_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class ChainId(IntEnum):
    """EVM chain IDs the token table knows about."""

    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    KOVAN = 42
    GANACHE = 1337


class TokenNotFoundError(LookupError):
    """No address is known for a symbol on the requested chain."""

    def __init__(self, symbol: str, chain_id: int):
        super().__init__(f"Could not find token `{symbol}` on chain {chain_id}")
        self.symbol = symbol
        self.chain_id = chain_id


@dataclass(frozen=True)
class TokenMetadata:
    """A token and its contract address on each chain."""

    symbol: str
    decimals: int
    token_addresses: dict[int, str] = field(default_factory=dict)

    def address_for(self, chain_id: int) -> str:
        return self.token_addresses.get(chain_id, NULL_ADDRESS)


def _addresses(
    mainnet: str = NULL_ADDRESS,
    ropsten: str = NULL_ADDRESS,
    rinkeby: str = NULL_ADDRESS,
    kovan: str = NULL_ADDRESS,
    ganache: str = NULL_ADDRESS,
) -> dict[int, str]:
    return {
        ChainId.MAINNET: mainnet,
        ChainId.ROPSTEN: ropsten,
        ChainId.RINKEBY: rinkeby,
        ChainId.KOVAN: kovan,
        ChainId.GANACHE: ganache,
    }


_WETH_ADDRESSES = _addresses(
    mainnet="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
    ropsten="0xc778417e063141139fce010982780140aa0cd5ab",
    rinkeby="0xc778417e063141139fce010982780140aa0cd5ab",
    kovan="0xd0a1e359811322d97991e03f863a0c30c2cf029c",
    ganache="0x0b1ba0af832d7c05fd64161e0db78e85978e8082",
)

TOKEN_METADATAS_FOR_CHAINS: tuple[TokenMetadata, ...] = (
    # ETH quotes are filled through WETH
    TokenMetadata(symbol="ETH", decimals=18, token_addresses=_WETH_ADDRESSES),
    TokenMetadata(symbol="WETH", decimals=18, token_addresses=_WETH_ADDRESSES),
    TokenMetadata(
        symbol="DAI",
        decimals=18,
        token_addresses=_addresses(
            mainnet="0x6b175474e89094c44da98b954eedcdecb5be3830",
            kovan="0x4f96fe3b7a6cf9725f59d353f723c1bdb64ca6aa",
        ),
    ),
    TokenMetadata(
        symbol="USDC",
        decimals=6,
        token_addresses=_addresses(
            mainnet="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            kovan="0x75b0622cec14130172eae9cf166b92e5c112faff",
        ),
    ),
    TokenMetadata(
        symbol="USDT",
        decimals=6,
        token_addresses=_addresses(mainnet="0xdac17f958d2ee523a2206206994597c13d831ec7"),
    ),
    TokenMetadata(
        symbol="ZRX",
        decimals=18,
        token_addresses=_addresses(
            mainnet="0xe41d2489571d322189246dafa5ebde1f4699f498",
            kovan="0x2002d3812f58e35f0ea1ffbf80a75a38c32175fa",
            ganache="0x871dd7c2b4b25e1aa18728e9d5f2af4c4e431f5c",
        ),
    ),
    TokenMetadata(
        symbol="MKR",
        decimals=18,
        token_addresses=_addresses(
            mainnet="0x9f8f72aa9304c8b593d555f12ef6589cc3a579a2",
            kovan="0xaaf64bfcc32d0f15873a02163e7e500671a4ffcd",
        ),
    ),
    TokenMetadata(
        symbol="WBTC",
        decimals=8,
        token_addresses=_addresses(mainnet="0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"),
    ),
    TokenMetadata(
        symbol="LINK",
        decimals=18,
        token_addresses=_addresses(mainnet="0x514910771af9ca656af840dff83e8264ecf986ca"),
    ),
    TokenMetadata(
        symbol="BAT",
        decimals=18,
        token_addresses=_addresses(mainnet="0x0d8775f648430679a709e98d2b0cb6250d2887ef"),
    ),
    TokenMetadata(
        symbol="REP",
        decimals=18,
        token_addresses=_addresses(mainnet="0x1985365e9f78359a9b6ad760e32412f4a445e862"),
    ),
    TokenMetadata(
        symbol="KNC",
        decimals=18,
        token_addresses=_addresses(mainnet="0xdd974d5c2e2928dea5f71b9825b8b646686bd200"),
    ),
)


def is_token_address(symbol_or_address: str) -> bool:
    """Check whether the value is already a hex token address."""
    return bool(_TOKEN_ADDRESS_RE.match(symbol_or_address))


def get_token_metadata_if_exists(
    symbol_or_address: str,
    chain_id: int,
    token_metadatas: tuple[TokenMetadata, ...] = TOKEN_METADATAS_FOR_CHAINS,
) -> Optional[TokenMetadata]:
    """Find a token by symbol (case-insensitive) or by its address on chain_id."""
    if is_token_address(symbol_or_address):
        address = symbol_or_address.lower()
        for metadata in token_metadatas:
            if metadata.address_for(chain_id).lower() == address:
                return metadata
        return None

    symbol = symbol_or_address.upper()
    for metadata in token_metadatas:
        if metadata.symbol.upper() == symbol:
            return metadata
    return None


def find_token_address(
    symbol_or_address: str,
    chain_id: int,
    token_metadatas: tuple[TokenMetadata, ...] = TOKEN_METADATAS_FOR_CHAINS,
) -> str:
    """Resolve a symbol to its contract address on chain_id.

    Addresses are passed through unchanged.

    Raises:
        TokenNotFoundError: if the symbol is unknown or not deployed on chain_id
    """
    if is_token_address(symbol_or_address):
        return symbol_or_address

    metadata = get_token_metadata_if_exists(symbol_or_address, chain_id, token_metadatas)
    if metadata is None:
        raise TokenNotFoundError(symbol_or_address, chain_id)

    address = metadata.address_for(chain_id)
    if address == NULL_ADDRESS:
        raise TokenNotFoundError(symbol_or_address, chain_id)
    return address
