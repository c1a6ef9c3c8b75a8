"""Carrier tracking-link templates."""

_TRACKING_URL_TEMPLATES = {
    "ups": "https://www.ups.com/track?tracknum={number}",
    "fedex": "https://www.fedex.com/fedextrack/?trknbr={number}",
    "usps": "https://tools.usps.com/go/TrackConfirmAction?tLabels={number}",
    "dhl": "https://www.dhl.com/en/express/tracking.html?AWB={number}",
}


def tracking_link(carrier_code: str | None, number: str | None) -> str | None:
    """Return the public tracking URL for a carrier, or None if the carrier is unknown."""
    if not carrier_code or not number:
        return None
    template = _TRACKING_URL_TEMPLATES.get(carrier_code.strip().lower())
    if template is None:
        return None
    return template.format(number=number)
