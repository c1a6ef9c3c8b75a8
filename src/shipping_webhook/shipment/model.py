"""Read models for the materialized shipment aggregate.

The Fulfillment domain owns shipments, orders and addresses; this context
only ever reads a snapshot of them. Every sub-entity that the host may not
have (addresses, payment, tracks, order item) is optional. Numeric
identifiers and postcodes are read as strings.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ReadModel(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)


class Address(ReadModel):
    company: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    street: list[str] = Field(default_factory=list)
    postcode: str | None = None
    city: str | None = None
    country_id: str | None = None
    email: str | None = None

    @property
    def full_name(self) -> str | None:
        name = " ".join(part for part in (self.firstname, self.lastname) if part)
        return name or None

    @property
    def street_line(self) -> str | None:
        line = ", ".join(part.strip() for part in self.street if part and part.strip())
        return line or None


class Payment(ReadModel):
    method: str | None = None


class OrderItem(ReadModel):
    sku: str | None = None
    row_total: float | None = None


class Order(ReadModel):
    id: str
    increment_id: str | None = None
    customer_id: str | None = None
    customer_email: str | None = None
    currency_code: str | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    payment: Payment | None = None
    subtotal: float | None = None
    shipping_amount: float | None = None
    tax_amount: float | None = None
    grand_total: float | None = None


class Track(ReadModel):
    track_number: str | None = None
    title: str | None = None
    carrier_code: str | None = None
    estimated_delivery: date | datetime | None = Field(default=None, union_mode="left_to_right")


class ShipmentItem(ReadModel):
    name: str
    qty: float = 0
    price: float = 0.0
    weight: float | None = None
    order_item: OrderItem | None = None


class Shipment(ReadModel):
    """A shipment with its order, tracks and items already loaded."""

    id: str
    increment_id: str | None = None
    status: str | None = None
    store_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tracks: list[Track] = Field(default_factory=list)
    items: list[ShipmentItem] = Field(default_factory=list)
    order: Order

    @property
    def first_track(self) -> Track | None:
        return self.tracks[0] if self.tracks else None
