"""Configuration reader port: abstract access to scoped settings.

Paths follow the ``section/group/field`` convention of the host platform's
configuration store. A scope is a store identifier; readers fall back to the
default (unscoped) value when a scope has no override.
"""

from abc import ABC, abstractmethod


class ConfigReader(ABC):
    """Abstract interface for configuration readers."""

    @abstractmethod
    def get_value(self, path: str, scope_id: str | None = None) -> str | None:
        """Return the raw value stored at ``path``, or None if unset."""
        ...
