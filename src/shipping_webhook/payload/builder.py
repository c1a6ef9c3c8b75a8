"""Payload builder: maps a shipment aggregate to the webhook payload.

The payload is a flat dict of string keys to JSON-serializable values.
Building never fails on missing optional data (addresses, tracks, payment,
order items): the affected fields are set to None instead. Mandatory-field
checks are a separate step, see ``validate_required``.

Payload contract:
    identifiers    event_type, reference, shipment_id, order_id,
                   order_increment_id, status
    timestamps     created_at, updated_at (ISO-8601)
    tracking       tracking_number, carrier, carrier_title,
                   estimated_delivery, tracking_link (first track only)
    commercial     parcel_value, parcel_weight, currency, category,
                   covered_value
    parties        sender_* (billing address), recipient_* (shipping
                   address) plus recipient_email and recipient_language
    content        content_description
    customer       customer_id, customer_email, claim_notification_email
    payment        payment_method
    cart           JSON-encoded line items and order totals
"""

import json
from typing import Any

from shipping_webhook.errors import ValidationFailure
from shipping_webhook.payload.carriers import tracking_link
from shipping_webhook.shipment.model import Address, Shipment

EVENT_TYPE = "shipment_status_update"
DEFAULT_CATEGORY = "standard"
DEFAULT_LANGUAGE = "fr"

REQUIRED_FIELDS = (
    "reference",
    "created_at",
    "customer_id",
    "recipient_address",
    "recipient_zipcode",
    "recipient_city",
    "recipient_country",
)


def language_from_locale(locale: str | None) -> str:
    """Two-letter language code from a store locale such as ``en_US``."""
    if not locale or len(locale.strip()) < 2:
        return DEFAULT_LANGUAGE
    return locale.strip()[:2].lower()


def parcel_value(shipment: Shipment) -> float:
    return round(sum(item.price * item.qty for item in shipment.items), 2)


def parcel_weight(shipment: Shipment) -> float:
    return round(sum((item.weight or 0.0) * item.qty for item in shipment.items), 3)


def content_description(shipment: Shipment) -> str:
    return ", ".join(f"{item.name} x{_format_qty(item.qty)}" for item in shipment.items)


def validate_required(payload: dict[str, Any]) -> None:
    """Raise ValidationFailure listing every mandatory field that is empty."""
    missing = [name for name in REQUIRED_FIELDS if _is_empty(payload.get(name))]
    if missing:
        raise ValidationFailure(missing)


class ShipmentPayloadBuilder:
    """Builds the webhook payload for one shipment."""

    def build(self, shipment: Shipment, locale: str | None = None) -> dict[str, Any]:
        order = shipment.order
        track = shipment.first_track
        value = parcel_value(shipment)

        payload: dict[str, Any] = {
            "event_type": EVENT_TYPE,
            "reference": shipment.increment_id,
            "shipment_id": shipment.id,
            "order_id": order.id,
            "order_increment_id": order.increment_id,
            "status": shipment.status,
            "created_at": _isoformat(shipment.created_at),
            "updated_at": _isoformat(shipment.updated_at),
            "tracking_number": track.track_number if track else None,
            "carrier": track.carrier_code if track else None,
            "carrier_title": track.title if track else None,
            "estimated_delivery": _isoformat(track.estimated_delivery) if track else None,
            "tracking_link": tracking_link(track.carrier_code, track.track_number) if track else None,
            "parcel_value": value,
            "parcel_weight": parcel_weight(shipment),
            "currency": order.currency_code,
            "category": DEFAULT_CATEGORY,
            "covered_value": value,
        }
        payload.update(_address_fields("sender", order.billing_address))
        payload.update(_address_fields("recipient", order.shipping_address))
        payload.update(
            {
                "recipient_email": self._recipient_email(shipment),
                "recipient_language": language_from_locale(locale),
                "content_description": content_description(shipment),
                "customer_id": order.customer_id,
                "customer_email": order.customer_email,
                "claim_notification_email": order.customer_email,
                "payment_method": order.payment.method if order.payment else None,
                "cart": self._cart_snapshot(shipment),
            }
        )
        return payload

    def _recipient_email(self, shipment: Shipment) -> str | None:
        address = shipment.order.shipping_address
        if address and address.email:
            return address.email
        return shipment.order.customer_email

    def _cart_snapshot(self, shipment: Shipment) -> str:
        order = shipment.order
        items = [
            {
                "sku": item.order_item.sku if item.order_item else None,
                "name": item.name,
                "qty": item.qty,
                "price": item.price,
                "row_total": item.order_item.row_total if item.order_item else None,
            }
            for item in shipment.items
        ]
        totals = {
            "subtotal": order.subtotal,
            "shipping": order.shipping_amount,
            "tax": order.tax_amount,
            "grand_total": order.grand_total,
        }
        return json.dumps({"items": items, "totals": totals})


def _address_fields(prefix: str, address: Address | None) -> dict[str, Any]:
    if address is None:
        address = Address()
    return {
        f"{prefix}_company": address.company,
        f"{prefix}_name": address.full_name,
        f"{prefix}_address": address.street_line,
        f"{prefix}_zipcode": address.postcode,
        f"{prefix}_city": address.city,
        f"{prefix}_country": address.country_id,
    }


def _isoformat(value) -> str | None:
    return value.isoformat() if value is not None else None


def _format_qty(qty: float) -> str:
    # 2.0 -> "2", 1.5 -> "1.5"
    return str(int(qty)) if float(qty).is_integer() else str(qty)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
