"""Entry point: python -m agents.market_maker -p <pkey> -j config.json"""

import asyncio
import logging
import signal
import sys

from saturnbot import BotContext, ConfigurationError
from saturnbot import __version__ as version

from agents.market_maker.cli import build_context, build_parser


async def main(context: BotContext) -> None:
    loop = asyncio.get_running_loop()
    polling = context.build_loop()
    task = asyncio.ensure_future(polling.run_forever())

    def _signal_handler() -> None:
        logging.getLogger(__name__).info("Shutdown signal received")
        task.cancel()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _signal_handler)

    try:
        await task
    except asyncio.CancelledError:
        pass
    finally:
        await context.client.close()


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        context = build_context(args)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    logging.info("Loading market-maker bot v%s ...", version)
    asyncio.run(main(context))
    return 0


if __name__ == "__main__":
    sys.exit(run())
