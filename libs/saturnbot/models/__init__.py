from saturnbot.models.actions import (
    ACTION_MODELS,
    Action,
    ActionType,
    CancelOrder,
    NewOrder,
    OrderType,
    Trade,
    parse_action,
)
from saturnbot.models.chains import Chain
from saturnbot.models.config import BotConfig, load_config
from saturnbot.models.orders import ExchangeOrder, ExchangeTrade

__all__ = [
    "ACTION_MODELS",
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
]
