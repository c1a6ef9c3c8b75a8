"""httpx transport adapter: the production webhook transport."""

import httpx
import structlog

from shipping_webhook.errors import DeliveryFailure
from shipping_webhook.transport.port import TransportResponse, WebhookTransport

logger = structlog.get_logger(__name__)


class HttpxTransport(WebhookTransport):
    """Sends webhooks with httpx using the client's default timeout."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def post(self, url: str, body: bytes, headers: dict[str, str]) -> TransportResponse:
        try:
            if self._client is not None:
                response = self._client.post(url, content=body, headers=headers)
            else:
                with httpx.Client() as client:
                    response = client.post(url, content=body, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            logger.debug("Webhook transport error", url=url, error=str(exc))
            raise DeliveryFailure(f"Webhook request failed: {exc}") from exc

        return TransportResponse(status_code=response.status_code, body=response.text)
