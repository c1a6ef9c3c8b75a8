"""Cross-domain event contracts for Fulfillment domain events.

These classes define the event shape for consumption by other domains
(e.g., the Shipping Webhook domain to notify an external service when a
shipment changes status). They are registered as external events via
domain.register_external_event() with matching __type__ strings so
Protean's stream deserialization works correctly.

The shipment snapshot travels as JSON so consumers receive the fully
materialized aggregate (order, addresses, items, tracks) without having
to query the Fulfillment domain.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String, Text


class ShipmentStatusChanged(BaseEvent):
    """A shipment was persisted after a status-relevant change."""

    __version__ = 1

    shipment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    status = String(max_length=50)
    previous_status = String(max_length=50)
    shipment = Text()  # JSON snapshot of the shipment aggregate
    changed_at = DateTime(required=True)
