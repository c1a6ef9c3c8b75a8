"""In-memory configuration reader: scoped values held in a dict."""

from shipping_webhook.config.port import ConfigReader


class InMemoryConfigReader(ConfigReader):
    """Config reader backed by a dict, with optional per-scope overrides."""

    def __init__(self, values: dict[str, str] | None = None):
        self._defaults: dict[str, str] = dict(values or {})
        self._scoped: dict[str, dict[str, str]] = {}

    def set_value(self, path: str, value, scope_id: str | None = None) -> None:
        target = self._scoped.setdefault(str(scope_id), {}) if scope_id else self._defaults
        if value is None:
            target.pop(path, None)
        else:
            target[path] = str(value)

    def get_value(self, path: str, scope_id: str | None = None) -> str | None:
        if scope_id:
            scoped = self._scoped.get(str(scope_id), {})
            if path in scoped:
                return scoped[path]
        return self._defaults.get(path)

    def reset(self) -> None:
        self._defaults.clear()
        self._scoped.clear()
