"""Error kinds reported by the webhook dispatcher.

The dispatcher never lets these escape on its own: they are carried inside a
``DispatchResult`` and can be re-raised with ``DispatchResult.raise_for_error()``.
"""


class WebhookError(Exception):
    """Base class for every shipping webhook failure."""


class ConfigurationMissing(WebhookError):
    """A required configuration value is absent."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Configuration value '{path}' is not set")


class ValidationFailure(WebhookError):
    """One or more mandatory payload fields are empty."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required payload fields: {', '.join(self.missing_fields)}")


class DeliveryFailure(WebhookError):
    """The endpoint answered outside 2xx, or the request never completed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int, response_body: str | None = None) -> "DeliveryFailure":
        return cls(
            f"Webhook request failed with status code: {status_code}",
            status_code=status_code,
            response_body=response_body,
        )
