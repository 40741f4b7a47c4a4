"""Shared test fixtures — in-memory stand-ins for the chain and the exchange API."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import pytest
from saturnbot import (
    ActionDispatcher,
    Chain,
    ExchangeOrder,
    ExecutorRegistry,
    OrderNotFoundError,
    OrderType,
)


class FakeExecutor:
    """Records every call into a shared journal and returns fake tx hashes."""

    def __init__(self, chain: Chain, journal: list[tuple], address: str = "0xBot") -> None:
        self.chain = chain
        self._journal = journal
        self._address = address
        self._counter = 0
        self.receipts: dict[str, dict[str, Any]] = {}

    @property
    def address(self) -> str:
        return self._address

    def _tx(self) -> str:
        self._counter += 1
        return f"0x{self.chain.value.lower()}{self._counter:04d}"

    async def new_order(
        self, token: str, order_type: OrderType, amount: Decimal, price: Decimal
    ) -> str:
        tx = self._tx()
        self._journal.append(("new_order", self.chain, token, order_type, amount, price, tx))
        return tx

    async def new_trade(self, amount: Decimal, order_tx: str) -> str:
        tx = self._tx()
        self._journal.append(("new_trade", self.chain, amount, order_tx, tx))
        return tx

    async def cancel_order(self, order_id: int, contract: str) -> str:
        tx = self._tx()
        self._journal.append(("cancel_order", self.chain, order_id, contract, tx))
        return tx

    async def wait_for_receipt(
        self, tx_hash: str, timeout: float | None = None
    ) -> Mapping[str, Any]:
        self._journal.append(("receipt", self.chain, tx_hash))
        return self.receipts.get(tx_hash, {"status": 1, "transactionHash": tx_hash})


class FakeQuery:
    """Exchange query API backed by a dict of known orders."""

    def __init__(self, journal: list[tuple]) -> None:
        self._journal = journal
        self.orders: dict[str, ExchangeOrder] = {}

    def add_order(self, order_tx: str, order_id: int = 7, blockchain: str = "ETH") -> ExchangeOrder:
        order = ExchangeOrder(
            order_id=order_id,
            contract="0x00000000000000000000000000000000000000E1",
            type="sell",
            price=Decimal("0.001"),
            balance=Decimal("100"),
            transaction=order_tx,
            blockchain=blockchain,
            token="0x00000000000000000000000000000000000000AA",
        )
        self.orders[order_tx] = order
        return order

    async def get_order_by_tx(self, order_tx: str, blockchain: str) -> ExchangeOrder:
        self._journal.append(("get_order_by_tx", order_tx, blockchain))
        order = self.orders.get(order_tx)
        if order is None:
            raise OrderNotFoundError(order_tx, blockchain)
        return order

    async def await_order_tx(self, tx_hash: str, executor: FakeExecutor) -> str:
        await executor.wait_for_receipt(tx_hash)
        self._journal.append(("await_order_tx", executor.chain, tx_hash))
        return tx_hash

    async def await_trade_tx(self, tx_hash: str, executor: FakeExecutor) -> str:
        await executor.wait_for_receipt(tx_hash)
        self._journal.append(("await_trade_tx", executor.chain, tx_hash))
        return tx_hash

    async def await_transaction(
        self, tx_hash: str, executor: FakeExecutor, description: str = ""
    ) -> str:
        await executor.wait_for_receipt(tx_hash)
        self._journal.append(("await_transaction", executor.chain, tx_hash, description))
        return tx_hash


class FakeStrategy:
    """Hands out pre-seeded batches, one per call; raises exceptions it is given."""

    def __init__(self, batches: list[Any]) -> None:
        self._batches = list(batches)
        self.calls = 0

    async def get_actions(self) -> list[Any]:
        self.calls += 1
        batch = self._batches.pop(0) if self._batches else []
        if isinstance(batch, Exception):
            raise batch
        return batch


TOKEN = "0x00000000000000000000000000000000000000AA"


@pytest.fixture
def journal() -> list[tuple]:
    return []


@pytest.fixture
def executors(journal: list[tuple]) -> dict[Chain, FakeExecutor]:
    return {
        Chain.ETH: FakeExecutor(Chain.ETH, journal),
        Chain.ETC: FakeExecutor(Chain.ETC, journal),
    }


@pytest.fixture
def registry(executors: dict[Chain, FakeExecutor]) -> ExecutorRegistry:
    return ExecutorRegistry(executors)


@pytest.fixture
def query(journal: list[tuple]) -> FakeQuery:
    return FakeQuery(journal)


@pytest.fixture
def dispatcher(registry: ExecutorRegistry, query: FakeQuery) -> ActionDispatcher:
    return ActionDispatcher(registry, query, TOKEN)
