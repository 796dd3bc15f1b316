"""Application delivery."""
from .email_renderer import application_subject, render_html_email
from .exceptions import DeliveryError, DeliveryFailedError, MissingApiKeyError, MissingRecipientError
from .resend_sender import ResendApplicationSender

__all__ = [
    "DeliveryError",
    "DeliveryFailedError",
    "MissingApiKeyError",
    "MissingRecipientError",
    "ResendApplicationSender",
    "application_subject",
    "render_html_email",
]
