"""Chain executors — submit exchange transactions to one blockchain."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from eth_account.signers.local import LocalAccount
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import TimeExhausted

from saturnbot.chain.abi import ERC20_ABI, ETHER_DECIMALS, EXCHANGE_ABI
from saturnbot.errors import ConfigurationError, ConfirmationTimeoutError
from saturnbot.models.actions import OrderType
from saturnbot.models.chains import Chain
from saturnbot.models.orders import ExchangeOrder

logger = logging.getLogger(__name__)

OrderLookup = Callable[[str, str], Awaitable[ExchangeOrder]]

DEFAULT_RECEIPT_TIMEOUT = 600.0


@runtime_checkable
class ChainExecutor(Protocol):
    """Capability to submit exchange transactions on a single chain.

    Every submit method returns the transaction hash as a 0x-prefixed
    hex string without waiting for it to be mined.
    """

    chain: Chain

    @property
    def address(self) -> str: ...

    async def new_order(
        self, token: str, order_type: OrderType, amount: Decimal, price: Decimal
    ) -> str: ...

    async def new_trade(self, amount: Decimal, order_tx: str) -> str: ...

    async def cancel_order(self, order_id: int, contract: str) -> str: ...

    async def wait_for_receipt(
        self, tx_hash: str, timeout: float | None = None
    ) -> Mapping[str, Any]: ...


def to_base_units(amount: Decimal, decimals: int) -> int:
    """Scale a whole-unit quantity to the integer base units of a token."""
    return int(amount.scaleb(decimals).to_integral_value())


class Web3ChainExecutor:
    """ChainExecutor backed by a JSON-RPC node and a local signing key.

    Usage:
        executor = Web3ChainExecutor(Chain.ETH, account, rpc_url, client.get_order_by_tx)
        tx = await executor.new_order(token, OrderType.SELL, amount, price)
        receipt = await executor.wait_for_receipt(tx)
    """

    def __init__(
        self,
        chain: Chain,
        account: LocalAccount,
        rpc_url: str,
        order_lookup: OrderLookup,
        exchange: str | None = None,
        gas_multiplier: float = 1.2,
        receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ) -> None:
        self.chain = chain
        self._account = account
        self._rpc_url = rpc_url
        self._order_lookup = order_lookup
        self._exchange = exchange
        self._gas_multiplier = gas_multiplier
        self._receipt_timeout = receipt_timeout
        self._w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))
        self._decimals: dict[str, int] = {}

    @property
    def address(self) -> str:
        return self._account.address

    def __repr__(self) -> str:
        return f"Web3ChainExecutor({self.chain}, {self.address}, {self._rpc_url})"

    # --- Exchange operations ---

    async def new_order(
        self, token: str, order_type: OrderType, amount: Decimal, price: Decimal
    ) -> str:
        """Place a buy (pay ether) or sell (pay tokens) order on the exchange."""
        if self._exchange is None:
            raise ConfigurationError(
                f"No exchange contract configured for {self.chain}; cannot place orders"
            )
        exchange = self._contract(self._exchange, EXCHANGE_ABI)
        token = AsyncWeb3.to_checksum_address(token)
        price_mul, price_div = price.as_integer_ratio()

        if order_type == OrderType.BUY:
            value = to_base_units(amount * price, ETHER_DECIMALS)
            fn = exchange.functions.sellEther(token, price_mul, price_div)
            return await self._send(fn, value=value)

        units = to_base_units(amount, await self._token_decimals(token))
        await self._approve(token, self._exchange, units)
        fn = exchange.functions.sellERC20Token(token, units, price_mul, price_div)
        return await self._send(fn)

    async def new_trade(self, amount: Decimal, order_tx: str) -> str:
        """Fill `amount` tokens of the order created by `order_tx`."""
        order = await self._order_lookup(order_tx, self.chain.value)
        exchange = self._contract(order.contract, EXCHANGE_ABI)

        if order.type == OrderType.SELL:
            # the maker sells tokens, so we pay ether
            value = to_base_units(amount * order.price, ETHER_DECIMALS)
            fn = exchange.functions.buyOrderWithEth(order.order_id)
            return await self._send(fn, value=value)

        token = AsyncWeb3.to_checksum_address(order.token)
        units = to_base_units(amount, await self._token_decimals(token))
        await self._approve(token, order.contract, units)
        fn = exchange.functions.buyOrderWithERC20Token(order.order_id, token, units)
        return await self._send(fn)

    async def cancel_order(self, order_id: int, contract: str) -> str:
        exchange = self._contract(contract, EXCHANGE_ABI)
        return await self._send(exchange.functions.cancelOrder(order_id))

    async def wait_for_receipt(
        self, tx_hash: str, timeout: float | None = None
    ) -> Mapping[str, Any]:
        """Block until `tx_hash` is mined and return its receipt."""
        timeout = self._receipt_timeout if timeout is None else timeout
        try:
            receipt = await self._w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=timeout
            )
        except TimeExhausted as e:
            raise ConfirmationTimeoutError(
                f"Transaction {tx_hash} not mined on {self.chain} after {timeout:.0f}s"
            ) from e
        return receipt

    # --- Internals ---

    def _contract(self, address: str, abi: list[dict[str, Any]]) -> Any:
        return self._w3.eth.contract(address=AsyncWeb3.to_checksum_address(address), abi=abi)

    async def _token_decimals(self, token: str) -> int:
        if token not in self._decimals:
            erc20 = self._contract(token, ERC20_ABI)
            self._decimals[token] = await erc20.functions.decimals().call()
        return self._decimals[token]

    async def _approve(self, token: str, spender: str, units: int) -> None:
        """Allow `spender` to pull `units` of `token`, and wait for it."""
        erc20 = self._contract(token, ERC20_ABI)
        fn = erc20.functions.approve(AsyncWeb3.to_checksum_address(spender), units)
        tx_hash = await self._send(fn)
        logger.info("Approving %s for %d units of %s: %s", spender, units, token, tx_hash)
        await self.wait_for_receipt(tx_hash)

    async def _send(self, fn: Any, value: int = 0) -> str:
        """Estimate, sign and broadcast a contract call."""
        params: dict[str, Any] = {
            "from": self.address,
            "value": value,
            "chainId": self.chain.chain_id,
            "nonce": await self._w3.eth.get_transaction_count(self.address, "pending"),
        }
        gas_estimate = await fn.estimate_gas(params)
        params["gas"] = int(gas_estimate * self._gas_multiplier)
        params["gasPrice"] = await self._w3.eth.gas_price

        tx = await fn.build_transaction(params)
        signed = self._account.sign_transaction(tx)
        tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        return AsyncWeb3.to_hex(tx_hash)
