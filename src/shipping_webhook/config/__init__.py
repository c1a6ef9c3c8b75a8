"""Configuration reader registry.

Provides get_config_reader() / set_config_reader() to swap implementations:
- EnvConfigReader for deployments (default)
- InMemoryConfigReader for development and testing

The default is chosen by the WEBHOOK_CONFIG_SOURCE environment variable.
"""

import os

from shipping_webhook.config.port import ConfigReader

_current_reader: ConfigReader | None = None


def get_config_reader() -> ConfigReader:
    """Return the configured config reader (singleton)."""
    global _current_reader
    if _current_reader is None:
        source = os.environ.get("WEBHOOK_CONFIG_SOURCE", "env")
        if source == "env":
            from shipping_webhook.config.env_adapter import EnvConfigReader

            _current_reader = EnvConfigReader()
        elif source == "memory":
            from shipping_webhook.config.memory_adapter import InMemoryConfigReader

            _current_reader = InMemoryConfigReader()
        else:
            raise ValueError(f"Unknown config source: {source}")
    return _current_reader


def set_config_reader(reader: ConfigReader) -> None:
    """Override the active config reader (useful for tests)."""
    global _current_reader
    _current_reader = reader


def reset_config_reader() -> None:
    """Reset to the default config reader."""
    global _current_reader
    _current_reader = None
