"""Saturn market-maker bot — action execution library."""

from saturnbot.chain import ChainExecutor, Web3ChainExecutor, load_wallet
from saturnbot.client import SaturnClient
from saturnbot.context import BotContext
from saturnbot.errors import (
    ConfigurationError,
    ConfirmationTimeoutError,
    ExchangeApiError,
    InvalidActionError,
    OrderNotFoundError,
    PipelineAbortedError,
    SaturnBotError,
    TransactionFailedError,
    UnknownActionTypeError,
    UnknownChainError,
)
from saturnbot.execution import (
    ActionDispatcher,
    ExecutionPipeline,
    ExecutionResult,
    ExecutorRegistry,
    PollingLoop,
)
from saturnbot.models import (
    Action,
    ActionType,
    BotConfig,
    CancelOrder,
    Chain,
    ExchangeOrder,
    ExchangeTrade,
    NewOrder,
    OrderType,
    Trade,
    load_config,
    parse_action,
)
from saturnbot.strategy import Strategy, load_strategy

__version__ = "0.3.0"

__all__ = [
    # Context
    "BotContext",
    # Chain
    "ChainExecutor",
    "Web3ChainExecutor",
    "load_wallet",
    # Client
    "SaturnClient",
    # Execution
    "ActionDispatcher",
    "ExecutionPipeline",
    "ExecutionResult",
    "ExecutorRegistry",
    "PollingLoop",
    # Models
    "Action",
    "ActionType",
    "BotConfig",
    "CancelOrder",
    "Chain",
    "ExchangeOrder",
    "ExchangeTrade",
    "NewOrder",
    "OrderType",
    "Trade",
    "load_config",
    "parse_action",
    # Strategy
    "Strategy",
    "load_strategy",
    # Errors
    "ConfigurationError",
    "ConfirmationTimeoutError",
    "ExchangeApiError",
    "InvalidActionError",
    "OrderNotFoundError",
    "PipelineAbortedError",
    "SaturnBotError",
    "TransactionFailedError",
    "UnknownActionTypeError",
    "UnknownChainError",
]
