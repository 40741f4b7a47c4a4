"""ExecutorRegistry — picks the chain executor for an action's blockchain."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from saturnbot.chain.executor import ChainExecutor
from saturnbot.errors import UnknownChainError
from saturnbot.models.chains import Chain


class ExecutorRegistry:
    """Fixed set of chain executors, one per configured chain.

    Built once at startup; lookups are case-insensitive.
    """

    def __init__(self, executors: Mapping[Chain | str, ChainExecutor]) -> None:
        self._executors: Mapping[Chain, ChainExecutor] = MappingProxyType(
            {Chain.parse(chain): executor for chain, executor in executors.items()}
        )

    @property
    def chains(self) -> list[Chain]:
        return list(self._executors)

    def resolve(self, identifier: Chain | str) -> ChainExecutor:
        """Return the executor for `identifier`, or raise UnknownChainError."""
        known = [c.value for c in self._executors]
        try:
            chain = Chain.parse(identifier)
        except UnknownChainError:
            raise UnknownChainError(str(identifier), known) from None
        executor = self._executors.get(chain)
        if executor is None:
            raise UnknownChainError(chain.value, known)
        return executor

    def __contains__(self, identifier: object) -> bool:
        try:
            self.resolve(identifier)  # type: ignore[arg-type]
        except UnknownChainError:
            return False
        return True

    def __iter__(self) -> Iterator[Chain]:
        return iter(self._executors)

    def __len__(self) -> int:
        return len(self._executors)
