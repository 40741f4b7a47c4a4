"""BotContext — everything a running bot needs, assembled once at startup."""

from dataclasses import dataclass

from saturnbot.client.saturn_client import SaturnClient
from saturnbot.execution.dispatcher import ActionDispatcher
from saturnbot.execution.loop import PollingLoop
from saturnbot.execution.pipeline import ExecutionPipeline
from saturnbot.execution.resolver import ExecutorRegistry
from saturnbot.models.config import BotConfig
from saturnbot.strategy import Strategy


@dataclass(frozen=True)
class BotContext:
    config: BotConfig
    address: str
    registry: ExecutorRegistry
    client: SaturnClient
    strategy: Strategy
    delay: float = 60.0
    step_timeout: float | None = None

    def build_loop(self) -> PollingLoop:
        """Wire the dispatcher, pipeline and polling loop for this context."""
        dispatcher = ActionDispatcher(self.registry, self.client, self.config.token)
        pipeline = ExecutionPipeline(step_timeout=self.step_timeout)
        return PollingLoop(self.strategy, dispatcher, pipeline, self.delay)
