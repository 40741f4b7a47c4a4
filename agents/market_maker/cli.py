"""Command-line options and startup wiring for the market-maker bot."""

import argparse
import logging

from eth_account.signers.local import LocalAccount
from saturnbot import (
    BotConfig,
    BotContext,
    ConfigurationError,
    ExecutorRegistry,
    SaturnClient,
    Web3ChainExecutor,
    load_config,
    load_strategy,
    load_wallet,
)
from saturnbot import __version__ as version

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saturn-market-maker",
        description="Market making bot for Saturn Network",
    )
    parser.add_argument("-v", "--version", action="version", version=version)
    parser.add_argument("-p", "--pkey", help="Private key of the wallet to use for trading")
    parser.add_argument(
        "-m", "--mnemonic",
        help="Mnemonic (i.e. from Saturn Wallet) of the wallet to use for trading",
    )
    parser.add_argument(
        "-i", "--walletid", type=int, default=2,
        help="If using a mnemonic, choose which wallet to use. "
        "Default is Account 2 of Saturn Wallet / MetaMask.",
    )
    parser.add_argument("-j", "--json", help="Trading bot config file")
    parser.add_argument("-d", "--delay", type=float, default=60, help="Polling delay in seconds")
    parser.add_argument(
        "-s", "--strategy",
        help="Strategy factory as 'module:attr' (overrides the config file)",
    )
    parser.add_argument(
        "-t", "--timeout", type=float, default=600,
        help="Seconds to wait for each action to confirm; 0 waits forever",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def build_context(args: argparse.Namespace) -> BotContext:
    """Validate options and assemble the bot. Raises ConfigurationError."""
    wallet = load_wallet(pkey=args.pkey, mnemonic=args.mnemonic, wallet_id=args.walletid)

    if not args.json:
        raise ConfigurationError("Must specify bot config .json file location")
    config = load_config(args.json)

    strategy_path = args.strategy or config.strategy
    if not strategy_path:
        raise ConfigurationError(
            "No strategy given: pass --strategy or set 'strategy' in the bot config"
        )
    if args.delay < 0:
        raise ConfigurationError(f"Delay must not be negative, got {args.delay}")

    client = SaturnClient()
    registry = build_registry(config, wallet, client)
    strategy = load_strategy(strategy_path, config, wallet.address)

    return BotContext(
        config=config,
        address=wallet.address,
        registry=registry,
        client=client,
        strategy=strategy,
        delay=args.delay,
        step_timeout=args.timeout or None,
    )


def build_registry(
    config: BotConfig, wallet: LocalAccount, client: SaturnClient
) -> ExecutorRegistry:
    """One executor, for the chain the bot config trades on."""
    executor = Web3ChainExecutor(
        config.blockchain,
        wallet,
        config.rpc_url,
        client.get_order_by_tx,
        exchange=config.exchange,
    )
    logger.info("Trading on %s via %s as %s", config.blockchain, config.rpc_url, wallet.address)
    return ExecutorRegistry({config.blockchain: executor})
