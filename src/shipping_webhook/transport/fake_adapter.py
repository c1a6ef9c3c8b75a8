"""Fake transport adapter: records webhook requests for testing."""

from shipping_webhook.errors import DeliveryFailure
from shipping_webhook.transport.port import TransportResponse, WebhookTransport


class FakeTransport(WebhookTransport):
    """Transport that records requests in memory and answers with a canned response."""

    def __init__(self):
        self.requests: list[dict] = []
        self.status_code = 200
        self.response_body = ""
        self.should_succeed = True
        self.failure_reason = "Connection refused"

    def configure(
        self,
        status_code: int = 200,
        response_body: str = "",
        should_succeed: bool = True,
        failure_reason: str = "Connection refused",
    ):
        """Configure the fake transport behavior for testing.

        ``should_succeed=False`` simulates a transport-level error; a non-2xx
        ``status_code`` simulates an endpoint that rejects the webhook.
        """
        self.status_code = status_code
        self.response_body = response_body
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def post(self, url: str, body: bytes, headers: dict[str, str]) -> TransportResponse:
        self.requests.append({"url": url, "body": body, "headers": dict(headers)})
        if not self.should_succeed:
            raise DeliveryFailure(f"Webhook request failed: {self.failure_reason}")
        return TransportResponse(status_code=self.status_code, body=self.response_body)

    def reset(self):
        """Clear recorded requests (useful between tests)."""
        self.requests.clear()
        self.configure()
