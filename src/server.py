"""Protean Engine runner for the Payment Factory domain.

Starts the Engine that processes factory events asynchronously when the
production overlay (event_processing = "async") is active: projectors for
the instance directory and the audit log run here instead of in the
unit of work.

Usage:
    PROTEAN_ENV=production python src/server.py
    python src/server.py --test-mode      # Drain pending messages and exit
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain():
    from payment_factory.domain import payment_factory

    payment_factory.init()
    return payment_factory


async def run(test_mode: bool):
    engine = Engine(_get_domain(), test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Payment Factory Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(args.test_mode))


if __name__ == "__main__":
    main()
