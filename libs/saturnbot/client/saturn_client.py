"""SaturnClient — async client for the exchange's public query API."""

import asyncio
import logging
import os
from typing import Any

import aiohttp
from pydantic import ValidationError

from saturnbot.chain.executor import ChainExecutor
from saturnbot.errors import (
    ConfirmationTimeoutError,
    ExchangeApiError,
    OrderNotFoundError,
    TransactionFailedError,
)
from saturnbot.models.orders import ExchangeOrder, ExchangeTrade

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://ticker.saturn.network/api/v2"


class SaturnClient:
    """Order lookups and confirmation waits against the exchange API.

    Usage:
        client = SaturnClient()
        order = await client.get_order_by_tx("0xabc...", "ETH")
        await client.await_order_tx(tx_hash, executor)
        await client.close()
    """

    def __init__(
        self,
        api_url: str | None = None,
        poll_interval: float = 5.0,
        max_polls: int = 60,
    ) -> None:
        self.api_url = (api_url or os.environ.get("SATURN_API_URL", DEFAULT_API_URL)).rstrip("/")
        self.poll_interval = poll_interval
        self.max_polls = max_polls
        self._session: aiohttp.ClientSession | None = None

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _get(self, endpoint: str) -> Any:
        """GET a JSON document; returns None on 404."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=30))

        url = f"{self.api_url}{endpoint}"
        try:
            async with self._session.get(url) as response:
                if response.status == 404:
                    return None
                response.raise_for_status()
                return await response.json()
        except aiohttp.ClientError as e:
            raise ExchangeApiError(f"GET {url} failed: {e}") from e

    # --- Lookups ---

    async def get_order_by_tx(self, order_tx: str, blockchain: str) -> ExchangeOrder:
        """Return the order created by transaction `order_tx`."""
        data = await self._get(f"/orders/by_tx/{blockchain.upper()}/{order_tx}.json")
        if not data:
            raise OrderNotFoundError(order_tx, blockchain)
        try:
            return ExchangeOrder.model_validate(data)
        except ValidationError as e:
            raise ExchangeApiError(f"Malformed order for tx {order_tx}: {e}") from e

    async def get_trade_by_tx(self, trade_tx: str, blockchain: str) -> ExchangeTrade | None:
        """Return the trade made by `trade_tx`, or None if not indexed yet."""
        data = await self._get(f"/trades/by_tx/{blockchain.upper()}/{trade_tx}.json")
        if not data:
            return None
        try:
            return ExchangeTrade.model_validate(data)
        except ValidationError as e:
            raise ExchangeApiError(f"Malformed trade for tx {trade_tx}: {e}") from e

    # --- Confirmation waits ---

    async def await_transaction(
        self, tx_hash: str, executor: ChainExecutor, description: str = ""
    ) -> Any:
        """Wait for `tx_hash` to be mined; raise if it reverted."""
        if description:
            logger.info("%s: %s", description, tx_hash)
        receipt = await executor.wait_for_receipt(tx_hash)
        if receipt.get("status") == 0:
            raise TransactionFailedError(tx_hash, description)
        return receipt

    async def await_order_tx(self, tx_hash: str, executor: ChainExecutor) -> ExchangeOrder:
        """Wait until the order placed by `tx_hash` is mined and indexed."""
        await self.await_transaction(tx_hash, executor, "Placing order")
        chain = executor.chain.value
        for _ in range(self.max_polls):
            try:
                return await self.get_order_by_tx(tx_hash, chain)
            except OrderNotFoundError:
                await asyncio.sleep(self.poll_interval)
        raise ConfirmationTimeoutError(
            f"Order {tx_hash} mined but not indexed after {self.max_polls} polls"
        )

    async def await_trade_tx(self, tx_hash: str, executor: ChainExecutor) -> ExchangeTrade:
        """Wait until the trade made by `tx_hash` is mined and indexed."""
        await self.await_transaction(tx_hash, executor, "Trading")
        chain = executor.chain.value
        for _ in range(self.max_polls):
            trade = await self.get_trade_by_tx(tx_hash, chain)
            if trade is not None:
                return trade
            await asyncio.sleep(self.poll_interval)
        raise ConfirmationTimeoutError(
            f"Trade {tx_hash} mined but not indexed after {self.max_polls} polls"
        )
