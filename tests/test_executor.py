"""Unit tests for Web3ChainExecutor helpers that do not need a node."""

from decimal import Decimal

import pytest
from saturnbot import (
    Chain,
    ChainExecutor,
    ConfigurationError,
    OrderType,
    Web3ChainExecutor,
    load_wallet,
)
from saturnbot.chain import to_base_units

from conftest import FakeExecutor

PKEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"


async def _no_lookup(order_tx: str, blockchain: str):
    raise AssertionError("order lookup should not be called")


@pytest.fixture
def executor() -> Web3ChainExecutor:
    return Web3ChainExecutor(Chain.ETC, load_wallet(pkey=PKEY), "http://127.0.0.1:1", _no_lookup)


class TestToBaseUnits:
    def test_whole_tokens(self):
        assert to_base_units(Decimal("1"), 18) == 10**18

    def test_fractional(self):
        assert to_base_units(Decimal("0.000001"), 6) == 1

    def test_exact_for_long_decimals(self):
        assert to_base_units(Decimal("1.123456789012345678"), 18) == 1123456789012345678

    def test_zero_decimals(self):
        assert to_base_units(Decimal("42"), 0) == 42


class TestWeb3ChainExecutor:
    def test_satisfies_protocol(self, executor):
        assert isinstance(executor, ChainExecutor)

    def test_fake_satisfies_protocol(self):
        assert isinstance(FakeExecutor(Chain.ETH, []), ChainExecutor)

    def test_address_and_chain(self, executor):
        assert executor.chain is Chain.ETC
        assert executor.address == load_wallet(pkey=PKEY).address

    async def test_new_order_needs_exchange(self, executor):
        with pytest.raises(ConfigurationError, match="No exchange contract"):
            await executor.new_order(
                "0x00000000000000000000000000000000000000AA",
                OrderType.BUY,
                Decimal("1"),
                Decimal("0.5"),
            )
