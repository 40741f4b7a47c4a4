"""Dry run — show what the bot would do with a config, without trading.

Run with: python scripts/dry_run.py bot.json [order_tx ...]
Loads the config, builds the strategy with a throwaway wallet, prints the
actions it wants this cycle, and looks up any given order transactions on
the exchange API.
"""

import asyncio
import sys

from eth_account import Account
from saturnbot import (
    ConfigurationError,
    ExchangeApiError,
    SaturnClient,
    SaturnBotError,
    load_config,
    load_strategy,
    parse_action,
)


async def main(config_path: str, order_txs: list[str]) -> int:
    print("=" * 60)
    print("  SATURN MARKET MAKER — Dry run")
    print("=" * 60)
    print()

    print("[1/3] Loading config...", end=" ")
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        print(f"FAILED\n       {e}")
        return 1
    print(f"OK ({config.blockchain}, token {config.token})")
    print(f"       rpc={config.rpc_url}")
    print(
        f"       spread={config.spread} bandSize={config.band_size} "
        f"dustCutoff={config.dust_cutoff} tokenLimit={config.token_limit} "
        f"fundMinimum={config.fund_minimum}"
    )

    print("[2/3] Asking strategy for actions...")
    if not config.strategy:
        print("       skipped: no 'strategy' in config")
    else:
        address = Account.create().address
        try:
            strategy = load_strategy(config.strategy, config, address)
            actions = await strategy.get_actions()
        except SaturnBotError as e:
            print(f"       FAILED: {e}")
            return 1
        if not actions:
            print("       nothing to do")
        for i, raw in enumerate(actions, start=1):
            try:
                print(f"       {i}. {parse_action(raw)!r}")
            except SaturnBotError as e:
                print(f"       {i}. REJECTED: {e}")

    print("[3/3] Looking up orders...")
    client = SaturnClient()
    try:
        for tx in order_txs:
            try:
                order = await client.get_order_by_tx(tx, config.blockchain.value)
            except ExchangeApiError as e:
                print(f"       {tx}: {e}")
                continue
            print(
                f"       {tx}: #{order.order_id} {order.type} {order.balance} "
                f"@ {order.price} on {order.contract}"
            )
    finally:
        await client.close()

    print()
    print("=" * 60)
    print("  Done. No transactions were sent.")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__.strip().splitlines()[2], file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1], sys.argv[2:])))
