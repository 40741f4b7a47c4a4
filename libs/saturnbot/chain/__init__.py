from saturnbot.chain.executor import ChainExecutor, Web3ChainExecutor, to_base_units
from saturnbot.chain.wallet import load_wallet

__all__ = [
    "ChainExecutor",
    "Web3ChainExecutor",
    "load_wallet",
    "to_base_units",
]
