"""Typed webhook settings resolved from a ConfigReader."""

from dataclasses import dataclass

from shipping_webhook.config.port import ConfigReader

XML_PATH_WEBHOOK_ENABLED = "shipping_webhook/general/enabled"
XML_PATH_WEBHOOK_URL = "shipping_webhook/general/webhook_url"
XML_PATH_WEBHOOK_SECRET = "shipping_webhook/general/secret_key"
XML_PATH_STRICT_VALIDATION = "shipping_webhook/general/strict_validation"
XML_PATH_LOCALE = "general/locale/code"

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def _as_str(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class WebhookSettings:
    enabled: bool = False
    webhook_url: str | None = None
    secret_key: str | None = None
    strict_validation: bool = False
    locale: str | None = None

    @classmethod
    def load(cls, reader: ConfigReader, scope_id: str | None = None) -> "WebhookSettings":
        """Read every setting fresh for the given store scope."""
        return cls(
            enabled=_as_bool(reader.get_value(XML_PATH_WEBHOOK_ENABLED, scope_id)),
            webhook_url=_as_str(reader.get_value(XML_PATH_WEBHOOK_URL, scope_id)),
            secret_key=reader.get_value(XML_PATH_WEBHOOK_SECRET, scope_id) or None,
            strict_validation=_as_bool(reader.get_value(XML_PATH_STRICT_VALIDATION, scope_id)),
            locale=_as_str(reader.get_value(XML_PATH_LOCALE, scope_id)),
        )
