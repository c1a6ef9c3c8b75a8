"""Webhook dispatcher: sends one signed shipment payload to the configured endpoint.

Steps, in order, for every call:
    1. enabled?      disabled -> SKIPPED, no network call
    2. webhook_url   missing  -> FAILED with ConfigurationMissing
    3. build         strict validation -> FAILED with ValidationFailure
    4. sign          HMAC-SHA256 of the canonical JSON body
    5. send          one POST, no retry
    6. evaluate      2xx -> SENT, anything else -> FAILED with DeliveryFailure

Errors are logged here with shipment context and returned in the result;
``DispatchResult.raise_for_error()`` re-raises them for callers that want
exception flow.
"""

from dataclasses import dataclass
from enum import Enum

import structlog

from shipping_webhook.config import get_config_reader
from shipping_webhook.config.port import ConfigReader
from shipping_webhook.config.settings import XML_PATH_WEBHOOK_URL, WebhookSettings
from shipping_webhook.errors import (
    ConfigurationMissing,
    DeliveryFailure,
    ValidationFailure,
    WebhookError,
)
from shipping_webhook.payload.builder import ShipmentPayloadBuilder, validate_required
from shipping_webhook.payload.signing import SIGNATURE_HEADER, canonical_json, sign_payload
from shipping_webhook.shipment.model import Shipment
from shipping_webhook.transport import get_transport
from shipping_webhook.transport.port import WebhookTransport

logger = structlog.get_logger(__name__)


class DispatchStatus(Enum):
    SENT = "Sent"
    SKIPPED = "Skipped"
    FAILED = "Failed"


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a single dispatch attempt."""

    status: DispatchStatus
    status_code: int | None = None
    response_body: str | None = None
    error: WebhookError | None = None

    @property
    def ok(self) -> bool:
        return self.status != DispatchStatus.FAILED

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class WebhookDispatcher:
    """Delivers shipment status updates to the external webhook endpoint."""

    def __init__(
        self,
        config_reader: ConfigReader | None = None,
        transport: WebhookTransport | None = None,
        builder: ShipmentPayloadBuilder | None = None,
    ) -> None:
        self._config_reader = config_reader
        self._transport = transport
        self.builder = builder or ShipmentPayloadBuilder()

    @property
    def config_reader(self) -> ConfigReader:
        return self._config_reader or get_config_reader()

    @property
    def transport(self) -> WebhookTransport:
        return self._transport or get_transport()

    def dispatch(self, shipment: Shipment) -> DispatchResult:
        log = logger.bind(shipment_id=shipment.id, order_id=shipment.order.id)
        settings = WebhookSettings.load(self.config_reader, shipment.store_id)

        if not settings.enabled:
            log.debug("Shipping webhook disabled, skipping dispatch")
            return DispatchResult(status=DispatchStatus.SKIPPED)

        if not settings.webhook_url:
            error = ConfigurationMissing(XML_PATH_WEBHOOK_URL)
            log.warning("Webhook URL is not configured", error=str(error))
            return DispatchResult(status=DispatchStatus.FAILED, error=error)

        payload = self.builder.build(shipment, locale=settings.locale)
        if settings.strict_validation:
            try:
                validate_required(payload)
            except ValidationFailure as exc:
                log.error(
                    "Shipment payload failed validation",
                    missing_fields=exc.missing_fields,
                )
                return DispatchResult(status=DispatchStatus.FAILED, error=exc)

        body = canonical_json(payload)
        headers = {
            "Content-Type": "application/json",
            SIGNATURE_HEADER: sign_payload(body, settings.secret_key),
        }

        try:
            response = self.transport.post(settings.webhook_url, body, headers)
        except DeliveryFailure as exc:
            log.error("Failed to send webhook", url=settings.webhook_url, error=str(exc))
            return DispatchResult(status=DispatchStatus.FAILED, error=exc)

        if not response.is_success:
            error = DeliveryFailure.from_status(response.status_code, response.body)
            log.error(
                "Failed to send webhook",
                url=settings.webhook_url,
                status_code=response.status_code,
                response_body=response.body,
            )
            return DispatchResult(
                status=DispatchStatus.FAILED,
                status_code=response.status_code,
                response_body=response.body,
                error=error,
            )

        log.info("Webhook sent", url=settings.webhook_url, status_code=response.status_code)
        log.debug("Webhook response", response_body=response.body)
        return DispatchResult(
            status=DispatchStatus.SENT,
            status_code=response.status_code,
            response_body=response.body,
        )
