"""Application delivery exceptions."""
from typing import Optional


class DeliveryError(Exception):
    """Base exception for application delivery errors."""

    pass


class MissingApiKeyError(DeliveryError):
    """Raised when no email provider API key is configured."""

    def __init__(self):
        super().__init__("Missing RESEND_API_KEY environment variable")


class MissingRecipientError(DeliveryError):
    """Raised when sending without a recipient address."""

    def __init__(self):
        super().__init__("Recipient email address is required")


class DeliveryFailedError(DeliveryError):
    """Raised when the email provider rejects or cannot be reached."""

    def __init__(self, detail: str, status: Optional[int] = None):
        self.status = status
        self.detail = detail
        prefix = f"HTTP {status}: " if status is not None else ""
        super().__init__(f"Unable to send application: {prefix}{detail}")
