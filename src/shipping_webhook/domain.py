"""Shipping Webhook bounded context: outbound shipment status notifications.

Consumes shipment status changes from the Fulfillment domain, builds a
signed JSON payload describing the shipment, and delivers it to a single
configured external endpoint with one synchronous HTTP POST.
"""

from protean.domain import Domain

shipping_webhook = Domain(name="shipping_webhook")
