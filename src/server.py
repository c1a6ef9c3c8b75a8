"""Protean Engine runner for the Shipping Webhook domain.

Starts an Engine worker that reads Fulfillment streams and invokes the
ShipmentEventsHandler, which delivers the shipment webhook.

Usage:
    python src/server.py
"""

import asyncio

from protean.server.engine import Engine

from shipping_webhook.utils.logging import configure_logging


def _get_domain():
    from shipping_webhook.domain import shipping_webhook

    shipping_webhook.init()
    return shipping_webhook


async def run():
    engine = Engine(_get_domain())
    await engine.run()


def main():
    configure_logging()
    asyncio.run(run())


if __name__ == "__main__":
    main()
