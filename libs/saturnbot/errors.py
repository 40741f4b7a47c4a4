"""Exceptions raised by the saturnbot library."""

from typing import Any


class SaturnBotError(Exception):
    """Base class for errors raised by saturnbot.

    Lets callers tell our failures apart from ones coming out of web3,
    aiohttp or pydantic.
    """


class ConfigurationError(SaturnBotError):
    """Fatal startup problem: bad credentials, config file or chain."""


class UnknownChainError(ConfigurationError):
    """A blockchain identifier matches none of the configured executors."""

    def __init__(self, identifier: str, known: list[str] | None = None) -> None:
        self.identifier = identifier
        self.known = known or []
        message = f"Unknown blockchain '{identifier}'"
        if self.known:
            message += f" (configured: {', '.join(self.known)})"
        super().__init__(message)


class UnknownActionTypeError(SaturnBotError):
    """A strategy emitted an action whose type tag is not recognised."""

    def __init__(self, action_type: Any) -> None:
        self.action_type = action_type
        super().__init__(
            f"Unknown action type {action_type!r}; "
            "expected one of NewOrder, Trade, CancelOrder"
        )


class InvalidActionError(SaturnBotError):
    """A known action type carried missing or malformed fields."""


class ExchangeApiError(SaturnBotError):
    """The exchange query API returned an error response."""


class OrderNotFoundError(ExchangeApiError):
    """No order is indexed for the given transaction hash."""

    def __init__(self, order_tx: str, blockchain: str) -> None:
        self.order_tx = order_tx
        self.blockchain = blockchain
        super().__init__(f"No order found for tx {order_tx} on {blockchain}")


class TransactionFailedError(SaturnBotError):
    """A transaction was mined but reverted."""

    def __init__(self, tx_hash: str, description: str = "") -> None:
        self.tx_hash = tx_hash
        self.description = description
        detail = f" ({description})" if description else ""
        super().__init__(f"Transaction {tx_hash} reverted{detail}")


class ConfirmationTimeoutError(SaturnBotError):
    """Waiting for a transaction or its indexing took too long."""


class PipelineAbortedError(SaturnBotError):
    """A step of an execution batch failed; the rest of the batch was skipped.

    `results` holds every result produced so far, the failed one last.
    """

    def __init__(self, results: list[Any], failed_index: int, skipped: int) -> None:
        self.results = results
        self.failed_index = failed_index
        self.skipped = skipped
        cause = results[-1].error if results else None
        super().__init__(
            f"Batch aborted at step {failed_index + 1}: {cause!r} "
            f"({skipped} remaining step(s) skipped)"
        )
