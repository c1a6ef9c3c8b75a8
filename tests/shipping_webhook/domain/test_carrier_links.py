"""Tests for carrier tracking-link templates."""

import pytest
from shipping_webhook.payload.carriers import tracking_link


class TestTrackingLink:
    @pytest.mark.parametrize("carrier", ["UPS", "ups", "Ups", " ups "])
    def test_ups_matches_any_case(self, carrier):
        assert tracking_link(carrier, "1Z999") == "https://www.ups.com/track?tracknum=1Z999"

    def test_fedex(self):
        assert tracking_link("fedex", "7489") == "https://www.fedex.com/fedextrack/?trknbr=7489"

    def test_usps(self):
        assert tracking_link("USPS", "9400") == "https://tools.usps.com/go/TrackConfirmAction?tLabels=9400"

    def test_dhl(self):
        assert tracking_link("dhl", "JD01") == "https://www.dhl.com/en/express/tracking.html?AWB=JD01"

    def test_unknown_carrier_is_none(self):
        assert tracking_link("other", "1Z999") is None
        assert tracking_link("colissimo", "6A123") is None

    def test_missing_carrier_or_number_is_none(self):
        assert tracking_link(None, "1Z999") is None
        assert tracking_link("ups", None) is None
        assert tracking_link("ups", "") is None
