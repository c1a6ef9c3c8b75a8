from datetime import UTC, datetime

import pytest
from protean.integrations.pytest import DomainFixture
from shipping_webhook.config import set_config_reader
from shipping_webhook.config.memory_adapter import InMemoryConfigReader
from shipping_webhook.config.settings import (
    XML_PATH_LOCALE,
    XML_PATH_WEBHOOK_ENABLED,
    XML_PATH_WEBHOOK_SECRET,
    XML_PATH_WEBHOOK_URL,
)
from shipping_webhook.shipment.model import Shipment
from shipping_webhook.transport import set_transport
from shipping_webhook.transport.fake_adapter import FakeTransport

WEBHOOK_URL = "https://hooks.example.com/shipments"
WEBHOOK_SECRET = "s3cr3t"


@pytest.fixture(scope="session")
def shipping_webhook_bed():
    from shipping_webhook.domain import shipping_webhook

    bed = DomainFixture(shipping_webhook)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shipping_webhook_bed):
    with shipping_webhook_bed.domain_context():
        yield


def _address(**overrides):
    data = {
        "company": "Acme Corp",
        "firstname": "Jane",
        "lastname": "Doe",
        "street": ["12 Rue de la Paix", "Bâtiment B"],
        "postcode": "75002",
        "city": "Paris",
        "country_id": "FR",
        "email": "jane@example.com",
    }
    data.update(overrides)
    return data


def _shipment_data(**overrides) -> dict:
    """Raw snapshot of a shipment as the Fulfillment domain publishes it."""
    data = {
        "id": "shp-001",
        "increment_id": "000000042",
        "status": "shipped",
        "store_id": "1",
        "created_at": datetime(2026, 3, 1, 9, 30, tzinfo=UTC).isoformat(),
        "updated_at": datetime(2026, 3, 2, 14, 0, tzinfo=UTC).isoformat(),
        "tracks": [
            {
                "track_number": "1Z999",
                "title": "United Parcel Service",
                "carrier_code": "ups",
                "estimated_delivery": "2026-03-05",
            }
        ],
        "items": [
            {
                "name": "Mechanical Keyboard",
                "qty": 2,
                "price": 10.0,
                "weight": 2.0,
                "order_item": {"sku": "KB-MECH-001", "row_total": 20.0},
            },
            {
                "name": "Mouse Pad",
                "qty": 1,
                "price": 5.0,
                "weight": None,
                "order_item": {"sku": "MP-XL-BLK", "row_total": 5.0},
            },
        ],
        "order": {
            "id": "ord-001",
            "increment_id": "100000042",
            "customer_id": "cust-7",
            "customer_email": "jane.doe@example.com",
            "currency_code": "EUR",
            "shipping_address": _address(),
            "billing_address": _address(
                company="Acme Billing",
                firstname="John",
                lastname="Smith",
                street=["1 Avenue Foch"],
                postcode="69006",
                city="Lyon",
                email=None,
            ),
            "payment": {"method": "checkmo"},
            "subtotal": 25.0,
            "shipping_amount": 4.95,
            "tax_amount": 5.0,
            "grand_total": 34.95,
        },
    }
    data.update(overrides)
    return data


@pytest.fixture
def shipment_data():
    """Factory for raw snapshot dicts, with top-level overrides."""
    return _shipment_data


@pytest.fixture
def make_shipment():
    """Factory for Shipment models, with top-level overrides."""

    def _make(**overrides) -> Shipment:
        return Shipment.model_validate(_shipment_data(**overrides))

    return _make


@pytest.fixture
def shipment(make_shipment) -> Shipment:
    return make_shipment()


@pytest.fixture
def fake_transport() -> FakeTransport:
    transport = FakeTransport()
    set_transport(transport)
    return transport


@pytest.fixture
def config() -> InMemoryConfigReader:
    """Enabled webhook with URL, secret and an English store locale."""
    reader = InMemoryConfigReader(
        {
            XML_PATH_WEBHOOK_ENABLED: "1",
            XML_PATH_WEBHOOK_URL: WEBHOOK_URL,
            XML_PATH_WEBHOOK_SECRET: WEBHOOK_SECRET,
            XML_PATH_LOCALE: "en_US",
        }
    )
    set_config_reader(reader)
    return reader


@pytest.fixture
def webhook_url() -> str:
    return WEBHOOK_URL


@pytest.fixture
def webhook_secret() -> str:
    return WEBHOOK_SECRET
