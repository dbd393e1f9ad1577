"""Request-scoped failures of the webhook pipeline.

Every error carries the HTTP status the endpoint answers with; the handler
registered in ``skuhook.main`` turns them into ``{"ok": false, "error": ...}``.
"""


class WebhookError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SignatureMismatch(WebhookError):
    """Presented HMAC does not match the digest of the raw body."""

    status_code = 401


class MalformedPayload(WebhookError):
    """Body is not JSON or does not have the line_items shape."""

    status_code = 400


class DispatchError(WebhookError):
    """Line items could not be dispatched."""


class CatalogUnavailable(DispatchError):
    """Catalog backend could not be read. Senders retry on 5xx."""

    status_code = 503


class NotificationFailure(DispatchError):
    """Fulfillment backend rejected or never received a matched SKU."""

    status_code = 502

    def __init__(self, message: str, sku: str | None = None) -> None:
        super().__init__(message)
        self.sku = sku
