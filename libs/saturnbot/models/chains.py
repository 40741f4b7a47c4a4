"""Supported blockchains and their connection defaults."""

from enum import StrEnum

from saturnbot.errors import UnknownChainError


class Chain(StrEnum):
    """Blockchains the exchange is deployed on."""

    ETH = "ETH"
    ETC = "ETC"

    @property
    def chain_id(self) -> int:
        return CHAIN_IDS[self]

    @property
    def default_rpc_url(self) -> str:
        return DEFAULT_RPC_NODES[self]

    @classmethod
    def parse(cls, identifier: "str | Chain") -> "Chain":
        """Look up a chain by identifier, ignoring case."""
        if isinstance(identifier, Chain):
            return identifier
        try:
            return cls(str(identifier).strip().upper())
        except ValueError:
            raise UnknownChainError(str(identifier), [c.value for c in cls]) from None


CHAIN_IDS: dict[Chain, int] = {
    Chain.ETH: 1,
    Chain.ETC: 61,
}

DEFAULT_RPC_NODES: dict[Chain, str] = {
    Chain.ETH: "https://mainnet.infura.io/mew",
    Chain.ETC: "https://etc-rpc.binancechain.io/",
}
