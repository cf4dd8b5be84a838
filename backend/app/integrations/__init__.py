"""External service integrations."""

from app.integrations.email_client import EmailClient, EmailDeliveryError

__all__ = [
    "EmailClient",
    "EmailDeliveryError",
]
