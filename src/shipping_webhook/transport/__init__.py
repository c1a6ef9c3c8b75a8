"""Webhook transport factory.

Provides get_transport() / set_transport() to swap implementations:
- HttpxTransport for production (default)
- FakeTransport for development and testing

The default is chosen by the WEBHOOK_TRANSPORT environment variable.
"""

import os

from shipping_webhook.transport.port import WebhookTransport

_current_transport: WebhookTransport | None = None


def get_transport() -> WebhookTransport:
    """Return the current webhook transport (singleton)."""
    global _current_transport
    if _current_transport is None:
        adapter = os.environ.get("WEBHOOK_TRANSPORT", "httpx")
        if adapter == "httpx":
            from shipping_webhook.transport.httpx_adapter import HttpxTransport

            _current_transport = HttpxTransport()
        elif adapter == "fake":
            from shipping_webhook.transport.fake_adapter import FakeTransport

            _current_transport = FakeTransport()
        else:
            raise ValueError(f"Unknown webhook transport: {adapter}")
    return _current_transport


def set_transport(transport: WebhookTransport) -> None:
    """Override the active transport (useful for tests)."""
    global _current_transport
    _current_transport = transport


def reset_transport() -> None:
    """Reset to the default transport."""
    global _current_transport
    _current_transport = None
