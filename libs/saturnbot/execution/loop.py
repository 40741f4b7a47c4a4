"""PollingLoop — ask the strategy for actions, execute them, sleep, repeat."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from saturnbot.execution.dispatcher import ActionDispatcher
from saturnbot.execution.pipeline import ExecutionPipeline, ExecutionResult
from saturnbot.strategy import Strategy

logger = logging.getLogger(__name__)


class PollingLoop:
    """Runs one poll cycle after another until the task is cancelled.

    Cycles never overlap: the next one starts only after the previous
    batch has settled and `delay` seconds have passed. A failing cycle is
    logged and the loop carries on.
    """

    def __init__(
        self,
        strategy: Strategy,
        dispatcher: ActionDispatcher,
        pipeline: ExecutionPipeline,
        delay: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._strategy = strategy
        self._dispatcher = dispatcher
        self._pipeline = pipeline
        self._delay = delay
        self._sleep = sleep
        self.cycles = 0

    async def run_once(self) -> list[ExecutionResult] | None:
        """One cycle. Returns the batch results, or None if it failed."""
        self.cycles += 1
        try:
            actions = list(await self._strategy.get_actions())
            if not actions:
                logger.debug("[cycle %d] no actions", self.cycles)
                return []
            logger.info("[cycle %d] executing %d action(s)", self.cycles, len(actions))
            results = await self._pipeline.run(self._dispatcher.dispatch_all(actions))
        except Exception:
            logger.exception("[cycle %d] failed", self.cycles)
            return None
        logger.info("[cycle %d] %d action(s) confirmed", self.cycles, len(results))
        return results

    async def run_forever(self) -> None:
        while True:
            await self.run_once()
            await self._sleep(self._delay)
