"""Unit tests for SaturnClient with the HTTP layer stubbed out."""

from decimal import Decimal

import pytest
from saturnbot import (
    Chain,
    ConfigurationError,
    ConfirmationTimeoutError,
    ExchangeApiError,
    OrderNotFoundError,
    SaturnClient,
    TransactionFailedError,
)

from conftest import FakeExecutor

ORDER = {
    "orderId": 3,
    "contract": "0x00000000000000000000000000000000000000E1",
    "type": "sell",
    "price": "0.01",
    "balance": "50",
    "transaction": "0xorder",
    "blockchain": "ETH",
    "token": "0x00000000000000000000000000000000000000AA",
}


def _client(responses: dict[str, list], **kwargs) -> tuple[SaturnClient, list[str]]:
    """Client whose _get pops canned responses per endpoint."""
    client = SaturnClient(api_url="https://api.example/v2/", poll_interval=0, **kwargs)
    requested: list[str] = []

    async def fake_get(endpoint: str):
        requested.append(endpoint)
        queue = responses.get(endpoint, [])
        return queue.pop(0) if queue else None

    client._get = fake_get  # type: ignore[method-assign]
    return client, requested


class TestLookups:
    def test_api_url_trailing_slash(self):
        assert SaturnClient(api_url="https://api.example/v2/").api_url == "https://api.example/v2"

    def test_api_url_from_env(self, monkeypatch):
        monkeypatch.setenv("SATURN_API_URL", "http://localhost:3000/api")
        assert SaturnClient().api_url == "http://localhost:3000/api"

    async def test_get_order_by_tx(self):
        client, requested = _client({"/orders/by_tx/ETH/0xorder.json": [ORDER]})
        order = await client.get_order_by_tx("0xorder", "eth")
        assert requested == ["/orders/by_tx/ETH/0xorder.json"]
        assert order.order_id == 3
        assert order.price == Decimal("0.01")

    async def test_order_with_unknown_chain_is_api_error(self):
        payload = dict(ORDER, blockchain="BSC")
        client, _ = _client({"/orders/by_tx/ETH/0xorder.json": [payload]})
        with pytest.raises(ExchangeApiError, match="Malformed order") as exc:
            await client.get_order_by_tx("0xorder", "ETH")
        assert not isinstance(exc.value, ConfigurationError)

    async def test_order_not_found(self):
        client, _ = _client({})
        with pytest.raises(OrderNotFoundError, match="0xnope"):
            await client.get_order_by_tx("0xnope", "ETH")

    async def test_trade_not_indexed_yet(self):
        client, _ = _client({})
        assert await client.get_trade_by_tx("0xtrade", "ETH") is None


class TestAwaits:
    async def test_await_transaction_ok(self):
        client, _ = _client({})
        journal: list[tuple] = []
        receipt = await client.await_transaction("0x1", FakeExecutor(Chain.ETH, journal), "Test")
        assert receipt["status"] == 1
        assert journal == [("receipt", Chain.ETH, "0x1")]

    async def test_await_transaction_reverted(self):
        client, _ = _client({})
        executor = FakeExecutor(Chain.ETH, [])
        executor.receipts["0x1"] = {"status": 0}
        with pytest.raises(TransactionFailedError, match="Cancelling order 0xold"):
            await client.await_transaction("0x1", executor, "Cancelling order 0xold")

    async def test_await_order_polls_until_indexed(self):
        endpoint = "/orders/by_tx/ETH/0xorder.json"
        client, requested = _client({endpoint: [None, None, ORDER]})
        order = await client.await_order_tx("0xorder", FakeExecutor(Chain.ETH, []))
        assert order.transaction == "0xorder"
        assert requested == [endpoint] * 3

    async def test_await_order_gives_up(self):
        client, requested = _client({}, max_polls=4)
        with pytest.raises(ConfirmationTimeoutError):
            await client.await_order_tx("0xorder", FakeExecutor(Chain.ETH, []))
        assert len(requested) == 4

    async def test_await_trade(self):
        endpoint = "/trades/by_tx/ETC/0xtrade.json"
        trade = {"transaction": "0xtrade", "orderId": 3, "amount": "2", "blockchain": "ETC"}
        client, _ = _client({endpoint: [None, trade]})
        result = await client.await_trade_tx("0xtrade", FakeExecutor(Chain.ETC, []))
        assert result.amount == Decimal("2")

    async def test_reverted_order_is_not_polled(self):
        client, requested = _client({})
        executor = FakeExecutor(Chain.ETH, [])
        executor.receipts["0xorder"] = {"status": 0}
        with pytest.raises(TransactionFailedError):
            await client.await_order_tx("0xorder", executor)
        assert requested == []
