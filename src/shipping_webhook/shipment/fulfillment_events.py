"""Inbound cross-domain event handler: Shipping Webhook reacts to Fulfillment events.

Listens for ShipmentStatusChanged and forwards the shipment to the webhook
dispatcher. This handler is the failure boundary: nothing raised while
parsing or dispatching escapes it, so a webhook problem never rolls back
the shipment update that triggered it.
"""

import structlog
from protean.utils.mixins import handle
from shared.events.fulfillment import ShipmentStatusChanged

from shipping_webhook.dispatch.dispatcher import WebhookDispatcher
from shipping_webhook.domain import shipping_webhook
from shipping_webhook.shipment.model import Shipment

logger = structlog.get_logger(__name__)

shipping_webhook.register_external_event(ShipmentStatusChanged, "Fulfillment.ShipmentStatusChanged.v1")

_dispatcher: WebhookDispatcher | None = None


def get_dispatcher() -> WebhookDispatcher:
    """Return the shared dispatcher; it resolves config and transport per call."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = WebhookDispatcher()
    return _dispatcher


@shipping_webhook.event_handler(stream_category="fulfillment::shipment")
class ShipmentEventsHandler:
    """Sends the shipment webhook whenever a shipment changes status."""

    @handle(ShipmentStatusChanged)
    def on_shipment_status_changed(self, event: ShipmentStatusChanged) -> None:
        if not event.shipment:
            logger.debug(
                "ShipmentStatusChanged carries no shipment snapshot, skipping",
                shipment_id=str(event.shipment_id),
            )
            return

        try:
            shipment = Shipment.model_validate_json(event.shipment)
            result = get_dispatcher().dispatch(shipment)
        except Exception:
            logger.exception(
                "Error processing shipment status webhook",
                shipment_id=str(event.shipment_id),
                order_id=str(event.order_id),
            )
            return

        if not result.ok:
            logger.error(
                "Error processing shipment status webhook",
                shipment_id=str(event.shipment_id),
                order_id=str(event.order_id),
                error=str(result.error),
            )
