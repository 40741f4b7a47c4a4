"""ActionDispatcher — turns actions into deferred, confirmed transactions."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Protocol

from saturnbot.chain.executor import ChainExecutor
from saturnbot.errors import InvalidActionError, UnknownActionTypeError
from saturnbot.execution.resolver import ExecutorRegistry
from saturnbot.models.actions import CancelOrder, NewOrder, Trade, parse_action
from saturnbot.models.orders import ExchangeOrder

logger = logging.getLogger(__name__)

Thunk = Callable[[], Awaitable[Any]]


class ExchangeQuery(Protocol):
    """The parts of the exchange query API the dispatcher relies on."""

    async def get_order_by_tx(self, order_tx: str, blockchain: str) -> ExchangeOrder: ...

    async def await_order_tx(self, tx_hash: str, executor: ChainExecutor) -> Any: ...

    async def await_trade_tx(self, tx_hash: str, executor: ChainExecutor) -> Any: ...

    async def await_transaction(
        self, tx_hash: str, executor: ChainExecutor, description: str = ""
    ) -> Any: ...


class ActionDispatcher:
    """Maps each action to a thunk that submits it and waits for confirmation.

    Nothing touches the chain until a thunk is called.
    """

    def __init__(self, registry: ExecutorRegistry, query: ExchangeQuery, token: str) -> None:
        self._registry = registry
        self._query = query
        self._token = token

    def dispatch(self, raw: Any) -> Thunk:
        """Return a thunk for one action.

        An unrecognised or malformed action is logged now and yields a
        thunk that raises when its turn comes, so the actions before it
        still run.
        """
        try:
            action = parse_action(raw)
        except UnknownActionTypeError as e:
            logger.error("Unknown action type: %r", e.action_type)
            return _failing(e)
        except InvalidActionError as e:
            logger.error("%s", e)
            return _failing(e)

        # exhaustive over the Action union
        if isinstance(action, NewOrder):
            return lambda: self.new_order(action)
        if isinstance(action, Trade):
            return lambda: self.new_trade(action)
        if isinstance(action, CancelOrder):
            return lambda: self.cancel_order(action)
        raise UnknownActionTypeError(getattr(action, "type", None))

    def dispatch_all(self, actions: Iterable[Any]) -> list[Thunk]:
        """Thunks for a whole batch, in the order given."""
        return [self.dispatch(raw) for raw in actions]

    # --- Handlers ---

    async def new_order(self, action: NewOrder) -> Any:
        executor = self._registry.resolve(action.blockchain)
        tx = await executor.new_order(
            self._token, action.order_type, action.amount, action.price
        )
        logger.info(
            "%s %s %s @ %s on %s: %s",
            action.type, action.order_type, action.amount, action.price, action.blockchain, tx,
        )
        return await self._query.await_order_tx(tx, executor)

    async def new_trade(self, action: Trade) -> Any:
        executor = self._registry.resolve(action.blockchain)
        tx = await executor.new_trade(action.amount, action.order_tx)
        logger.info(
            "%s %s against %s on %s: %s",
            action.type, action.amount, action.order_tx, action.blockchain, tx,
        )
        return await self._query.await_trade_tx(tx, executor)

    async def cancel_order(self, action: CancelOrder) -> Any:
        executor = self._registry.resolve(action.blockchain)
        order = await self._query.get_order_by_tx(action.order_tx, action.blockchain)
        tx = await executor.cancel_order(order.order_id, order.contract)
        logger.info(
            "%s #%d (%s) on %s: %s",
            action.type, order.order_id, action.order_tx, action.blockchain, tx,
        )
        return await self._query.await_transaction(
            tx, executor, f"Cancelling order {action.order_tx}"
        )


def _failing(error: Exception) -> Thunk:
    async def thunk() -> Any:
        raise error

    return thunk
