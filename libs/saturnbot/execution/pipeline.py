"""ExecutionPipeline — runs a batch of thunks strictly one after another.

Later actions in a batch often depend on earlier ones being confirmed on
chain (a trade against an order placed in the same batch), so steps never
overlap. The first failure aborts the batch: the remaining steps are not
started and nothing already confirmed is rolled back.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from saturnbot.errors import ConfirmationTimeoutError, PipelineAbortedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one step: its confirmed value, or the error it raised."""

    index: int
    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ExecutionPipeline:
    """In-order, abort-on-first-failure execution of deferred steps."""

    def __init__(self, step_timeout: float | None = None) -> None:
        self.step_timeout = step_timeout or None

    async def run(self, steps: Sequence[Callable[[], Awaitable[Any]]]) -> list[ExecutionResult]:
        """Run `steps` in order and return their results in the same order.

        Raises PipelineAbortedError, chained from the step's own error, as
        soon as one step fails.
        """
        results: list[ExecutionResult] = []
        for index, step in enumerate(steps):
            try:
                value = await self._run_step(index, step)
            except Exception as e:
                results.append(ExecutionResult(index=index, error=e))
                raise PipelineAbortedError(
                    results, failed_index=index, skipped=len(steps) - index - 1
                ) from e
            results.append(ExecutionResult(index=index, value=value))
        return results

    async def _run_step(self, index: int, step: Callable[[], Awaitable[Any]]) -> Any:
        if self.step_timeout is None:
            return await step()
        try:
            return await asyncio.wait_for(step(), timeout=self.step_timeout)
        except TimeoutError as e:
            raise ConfirmationTimeoutError(
                f"Step {index + 1} not confirmed within {self.step_timeout:.0f}s"
            ) from e
