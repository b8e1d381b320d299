"""Pytest configuration and fixtures."""

import os
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DRY_RUN"] = "true"
os.environ["CHAIN_ID"] = "1"

from swapquote.api.app import create_app
from swapquote.config import Settings
from swapquote.quoting.base import SwapQuote, SwapQuoter
from swapquote.token_metadata import TOKEN_METADATAS_FOR_CHAINS
from swapquote.web.handlers import SwapHandlers
from swapquote.web.services.swap_service import SwapService

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
DAI = "0x6b175474e89094c44da98b954eedcdecb5be3830"


def make_quote(**overrides) -> SwapQuote:
    """Build a representative quote."""
    fields = {
        "price": Decimal("3888.3"),
        "to": "0xdef1c0ded9bec7f1a1670819833240f027b25eff",
        "data": "0xd9627aa4",
        "value": Decimal("0"),
        "buy_amount": Decimal("3888300000000000000000"),
        "sell_amount": Decimal("1000000000000000000"),
        "buy_token_address": DAI,
        "sell_token_address": WETH,
    }
    fields.update(overrides)
    return SwapQuote(**fields)


@pytest.fixture
def settings() -> Settings:
    """Settings for a mainnet, dry-run deployment."""
    return Settings(
        _env_file=None,
        environment="test",
        chain_id=1,
        default_quote_slippage_percentage=0.2,
        dry_run=True,
    )


@pytest.fixture
def swap_service() -> AsyncMock:
    """Stub quoting collaborator; tests set return_value / side_effect."""
    service = AsyncMock(spec=SwapService)
    service.calculate_swap_quote.return_value = make_quote()
    service.quoter = AsyncMock(spec=SwapQuoter)
    service.quoter.name = "stub"
    return service


@pytest.fixture
def handlers(swap_service) -> SwapHandlers:
    return SwapHandlers(
        swap_service,
        chain_id=1,
        default_slippage_percentage=0.2,
        token_metadatas=TOKEN_METADATAS_FOR_CHAINS,
    )


@pytest.fixture
def test_app(settings, swap_service):
    """Create test application around the stub collaborator."""
    return create_app(settings, swap_service=swap_service)


@pytest.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
