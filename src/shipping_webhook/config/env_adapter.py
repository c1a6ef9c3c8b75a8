"""Environment-variable configuration reader.

``shipping_webhook/general/webhook_url`` is read from
``SHIPPING_WEBHOOK_GENERAL_WEBHOOK_URL``; a store-level override lives in
``SHIPPING_WEBHOOK_GENERAL_WEBHOOK_URL__<STORE_ID>``.
"""

import os

from shipping_webhook.config.port import ConfigReader


def env_var_name(path: str, scope_id: str | None = None) -> str:
    name = path.replace("/", "_").upper()
    if scope_id:
        name = f"{name}__{str(scope_id).upper()}"
    return name


class EnvConfigReader(ConfigReader):
    def __init__(self, environ=None):
        self._environ = environ if environ is not None else os.environ

    def get_value(self, path: str, scope_id: str | None = None) -> str | None:
        if scope_id:
            scoped = self._environ.get(env_var_name(path, scope_id))
            if scoped is not None:
                return scoped
        return self._environ.get(env_var_name(path))
