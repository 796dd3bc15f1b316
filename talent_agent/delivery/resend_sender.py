"""Send tailored applications through the Resend email API."""
import asyncio
import logging
from typing import Optional

import aiohttp

from config.settings import settings
from talent_agent.tailoring.formatter import format_resume_text
from talent_agent.tailoring.tailor import TailoredResume

from .email_renderer import application_subject, render_html_email
from .exceptions import DeliveryFailedError, MissingApiKeyError, MissingRecipientError

logger = logging.getLogger(__name__)


class ResendApplicationSender:
    """Email a tailored résumé and cover letter to a hiring contact."""

    API_URL = "https://api.resend.com/emails"

    def __init__(
        self,
        api_key: Optional[str] = None,
        from_address: str = "Healthcare Agent <onboarding@resend.dev>",
        timeout: int = 15,
    ):
        """
        Initialize the sender.

        Args:
            api_key: Resend API key
            from_address: Sender shown on the email
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.from_address = from_address
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "ResendApplicationSender":
        """Build a sender from application settings."""
        return cls(
            api_key=settings.resend_api_key,
            from_address=settings.application_from_address,
        )

    def build_payload(
        self,
        resume: TailoredResume,
        to: str,
        plain_text: Optional[str] = None,
    ) -> dict:
        """Request body for the Resend send-email endpoint."""
        return {
            "from": self.from_address,
            "to": [to],
            "subject": application_subject(resume),
            "html": render_html_email(resume),
            "text": plain_text if plain_text is not None else format_resume_text(resume),
        }

    async def send(
        self,
        resume: TailoredResume,
        to: str,
        plain_text: Optional[str] = None,
    ) -> str:
        """
        Send the application email.

        Args:
            resume: Tailored résumé to send
            to: Recipient address
            plain_text: Plain-text body; rendered from ``resume`` if omitted

        Returns:
            Provider message id

        Raises:
            MissingApiKeyError: No API key configured
            MissingRecipientError: Empty recipient
            DeliveryFailedError: Provider rejected the request or was unreachable
        """
        if not self.api_key:
            raise MissingApiKeyError()
        to = (to or "").strip()
        if not to:
            raise MissingRecipientError()

        payload = self.build_payload(resume, to, plain_text)
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.API_URL,
                    json=payload,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status >= 300:
                        detail = await response.text()
                        raise DeliveryFailedError(detail, status=response.status)
                    try:
                        data = await response.json(content_type=None)
                    except ValueError:
                        # 2xx with an empty or non-JSON body: accepted, no id
                        logger.warning("Resend returned a non-JSON body (status %s)", response.status)
                        data = {}
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Resend request failed: %s", e)
            raise DeliveryFailedError(str(e)) from e

        message_id = str(data.get("id", "")) if isinstance(data, dict) else ""
        logger.info(
            "Sent application for '%s' to %s (message %s)",
            resume.source_job.title, to, message_id or "?",
        )
        return message_id
