"""Tests for the FastAPI endpoints."""

from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from swapquote.api.app import create_app
from swapquote.errors import InternalServerError
from swapquote.quoting.base import RevertError
from swapquote.quoting.dry_run import SimulatedSwapQuoter
from swapquote.token_metadata import TOKEN_METADATAS_FOR_CHAINS
from swapquote.web.services.swap_service import SwapService

from conftest import DAI, WETH


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "swapquote"

    @pytest.mark.asyncio
    async def test_detailed_health(self, client):
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["quoter"] == "stub"
        assert data["config"]["chain_id"] == 1
        assert data["config"]["quoter"]["api_key"] == "(not set)"


class TestSwapQuoteEndpoint:
    """Tests for GET /swap/quote."""

    @pytest.mark.asyncio
    async def test_quote_success(self, client, swap_service):
        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "1000000000000000000"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["buyTokenAddress"] == DAI
        assert data["sellTokenAddress"] == WETH
        assert Decimal(data["buyAmount"]) == Decimal("3888300000000000000000")
        assert data["to"] == "0xdef1c0ded9bec7f1a1670819833240f027b25eff"

        params = swap_service.calculate_swap_quote.await_args.args[0]
        assert params.is_eth_sell is True

    @pytest.mark.asyncio
    async def test_quote_liquidity_error_on_sell_amount(self, client, swap_service):
        swap_service.calculate_swap_quote.side_effect = Exception("INSUFFICIENT_ASSET_LIQUIDITY")

        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "1"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "code": 100,
            "reason": "Validation Failed",
            "validationErrors": [
                {"field": "sellAmount", "code": 1004, "reason": "INSUFFICIENT_ASSET_LIQUIDITY"},
            ],
        }

    @pytest.mark.asyncio
    async def test_quote_asset_unavailable(self, client, swap_service):
        swap_service.calculate_swap_quote.side_effect = Exception("ASSET_UNAVAILABLE: DAI")

        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "buyAmount": "1"},
        )

        assert response.status_code == 400
        assert response.json()["validationErrors"][0]["field"] == "token"

    @pytest.mark.asyncio
    async def test_quote_revert(self, client, swap_service):
        swap_service.calculate_swap_quote.side_effect = RevertError(
            "IncompleteFillSellQuoteError", {"message": "fill incomplete"}
        )

        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "1"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "code": 105,
            "reason": "Transaction Invalid",
            "values": {"message": "fill incomplete"},
        }

    @pytest.mark.asyncio
    async def test_quote_unexpected_error_is_opaque(self, client, swap_service):
        swap_service.calculate_swap_quote.side_effect = RuntimeError("secret upstream detail")

        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "1"},
        )

        assert response.status_code == 500
        assert response.json() == {"reason": "Internal Server Error"}

    @pytest.mark.asyncio
    async def test_quote_internal_error_passthrough(self, client, swap_service):
        swap_service.calculate_swap_quote.side_effect = InternalServerError("already classified")

        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "1"},
        )

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_quote_unknown_token(self, client):
        response = await client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "NOTATOKEN", "sellAmount": "1"},
        )

        assert response.status_code == 400
        [item] = response.json()["validationErrors"]
        assert item["field"] == "buyToken"
        assert item["code"] == 1004

    @pytest.mark.asyncio
    async def test_quote_malformed_amount(self, test_app):
        transport = ASGITransport(app=test_app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get(
                "/swap/quote",
                params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "lots"},
            )

        assert response.status_code == 500
        assert response.json() == {"reason": "Internal Server Error"}


class TestSwapTokensEndpoint:
    """Tests for GET /swap/tokens."""

    @pytest.mark.asyncio
    async def test_tokens(self, client):
        response = await client.get("/swap/tokens")

        assert response.status_code == 200
        tokens = response.json()
        assert len(tokens) == len(TOKEN_METADATAS_FOR_CHAINS)
        for token, metadata in zip(tokens, TOKEN_METADATAS_FOR_CHAINS):
            assert token == {"symbol": metadata.symbol, "address": metadata.token_addresses[1]}


class TestDryRunApp:
    """End-to-end through the simulated quoter."""

    @pytest.fixture
    async def dry_run_client(self, settings):
        app = create_app(settings, swap_service=SwapService(SimulatedSwapQuoter(chain_id=1)))
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

    @pytest.mark.asyncio
    async def test_simulated_sell_quote(self, dry_run_client):
        response = await dry_run_client.get(
            "/swap/quote",
            params={"sellToken": "ETH", "buyToken": "DAI", "sellAmount": "1000000000000000000"},
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["value"]) == Decimal("1000000000000000000")
        assert Decimal(data["buyAmount"]) > 0
        assert data["sources"] == [{"name": "Simulated", "proportion": "1"}]

    @pytest.mark.asyncio
    async def test_simulated_liquidity_exhausted(self, dry_run_client):
        # 1M WETH is far beyond the simulated depth
        response = await dry_run_client.get(
            "/swap/quote",
            params={"sellToken": "DAI", "buyToken": "WETH", "buyAmount": "1000000000000000000000000"},
        )

        assert response.status_code == 400
        [item] = response.json()["validationErrors"]
        assert item["field"] == "buyAmount"
        assert item["reason"].startswith("INSUFFICIENT_ASSET_LIQUIDITY")

    @pytest.mark.asyncio
    async def test_simulated_unpriced_asset(self, dry_run_client):
        response = await dry_run_client.get(
            "/swap/quote",
            params={
                "sellToken": "0x4444444444444444444444444444444444444444",
                "buyToken": "DAI",
                "sellAmount": "1",
            },
        )

        assert response.status_code == 400
        assert response.json()["validationErrors"][0]["field"] == "token"
