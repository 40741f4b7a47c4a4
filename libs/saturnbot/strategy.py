"""Strategy protocol and loader.

The bot does not decide what to trade. A strategy object, built from the
bot config and the wallet address, hands it a fresh list of actions each
poll cycle.
"""

import importlib
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from saturnbot.errors import ConfigurationError
from saturnbot.models.actions import CancelOrder, NewOrder, Trade
from saturnbot.models.config import BotConfig


@runtime_checkable
class Strategy(Protocol):
    async def get_actions(self) -> Sequence[NewOrder | Trade | CancelOrder | Mapping[str, Any]]:
        """Return the actions to execute this cycle, in execution order."""
        ...


def load_strategy(path: str, config: BotConfig, address: str) -> Strategy:
    """Import `module:attr` and call it with (config, address)."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"Strategy must be given as 'module:attr', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import strategy module {module_name!r}: {e}") from e

    factory = getattr(module, attr, None)
    if factory is None:
        raise ConfigurationError(f"Module {module_name!r} has no attribute {attr!r}")

    strategy = factory(config, address)
    if not isinstance(strategy, Strategy):
        raise ConfigurationError(f"{path} did not produce an object with get_actions()")
    return strategy
