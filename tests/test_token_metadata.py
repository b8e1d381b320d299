"""Tests for token metadata lookups."""

import pytest

from swapquote.constants import NULL_ADDRESS
from swapquote.token_metadata import (
    TOKEN_METADATAS_FOR_CHAINS,
    ChainId,
    TokenMetadata,
    TokenNotFoundError,
    find_token_address,
    get_token_metadata_if_exists,
    is_token_address,
)


class TestFindTokenAddress:
    """Tests for find_token_address."""

    def test_symbol_on_mainnet(self):
        assert find_token_address("DAI", ChainId.MAINNET) == "0x6b175474e89094c44da98b954eedcdecb5be3830"

    def test_eth_resolves_to_weth(self):
        assert find_token_address("ETH", 1) == find_token_address("WETH", 1)

    def test_symbol_is_case_insensitive(self):
        assert find_token_address("dai", 1) == find_token_address("DAI", 1)

    def test_address_passes_through(self):
        address = "0xAbCdEf0123456789abcdef0123456789ABCDEF01"

        assert find_token_address(address, 1) == address

    def test_unknown_symbol(self):
        with pytest.raises(TokenNotFoundError) as exc_info:
            find_token_address("NOPE", 1)

        assert exc_info.value.symbol == "NOPE"
        assert "NOPE" in str(exc_info.value)

    def test_symbol_without_deployment_on_chain(self):
        with pytest.raises(TokenNotFoundError):
            find_token_address("USDT", ChainId.KOVAN)

    def test_custom_table(self):
        table = (TokenMetadata(symbol="FOO", decimals=2, token_addresses={5: "0x" + "f" * 40}),)

        assert find_token_address("FOO", 5, table) == "0x" + "f" * 40
        with pytest.raises(TokenNotFoundError):
            find_token_address("DAI", 5, table)


class TestTokenMetadata:
    """Tests for the token table helpers."""

    def test_is_token_address(self):
        assert is_token_address("0x" + "a" * 40)
        assert not is_token_address("0x" + "a" * 39)
        assert not is_token_address("DAI")

    def test_metadata_by_address(self):
        metadata = get_token_metadata_if_exists("0x6B175474E89094C44DA98B954EEDCDECB5BE3830", 1)

        assert metadata is not None
        assert metadata.symbol == "DAI"

    def test_metadata_missing(self):
        assert get_token_metadata_if_exists("NOPE", 1) is None

    def test_address_for_unknown_chain_is_null(self):
        assert TOKEN_METADATAS_FOR_CHAINS[0].address_for(999) == NULL_ADDRESS

    def test_every_token_lists_every_chain(self):
        for metadata in TOKEN_METADATAS_FOR_CHAINS:
            assert set(metadata.token_addresses) == set(ChainId)
