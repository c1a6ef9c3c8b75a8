"""Webhook transport port (abstract interface).

Defines the contract for delivering a signed payload over HTTP. This
enables swapping between FakeTransport (dev/test) and HttpxTransport
(production) without changing the dispatcher.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TransportResponse:
    """What came back from the endpoint."""

    status_code: int
    body: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class WebhookTransport(ABC):
    """Abstract outbound HTTP interface."""

    @abstractmethod
    def post(self, url: str, body: bytes, headers: dict[str, str]) -> TransportResponse:
        """POST ``body`` to ``url`` once, with no retry.

        Raises:
            DeliveryFailure: the request could not be completed (DNS,
                connection refused, timeout, ...).
        """
        ...
