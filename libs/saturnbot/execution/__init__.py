from saturnbot.execution.dispatcher import ActionDispatcher, ExchangeQuery, Thunk
from saturnbot.execution.loop import PollingLoop
from saturnbot.execution.pipeline import ExecutionPipeline, ExecutionResult
from saturnbot.execution.resolver import ExecutorRegistry

__all__ = [
    "ActionDispatcher",
    "ExchangeQuery",
    "ExecutionPipeline",
    "ExecutionResult",
    "ExecutorRegistry",
    "PollingLoop",
    "Thunk",
]
