"""SMTP integration for transactional email."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the SMTP server rejects or drops a message."""


class EmailClient:
    """Client for sending mail through the configured SMTP relay."""

    def __init__(self):
        self.host = settings.SMTP_HOST
        self.port = settings.SMTP_PORT
        self.username = settings.SMTP_USER
        self.password = settings.SMTP_PASSWORD
        self.from_address = settings.EMAIL_FROM

    @property
    def configured(self) -> bool:
        return bool(self.host and self.username and self.password)

    @retry(
        retry=retry_if_exception_type(EmailDeliveryError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def send(
        self,
        to: str,
        subject: str,
        text: str,
        html: Optional[str] = None,
    ) -> dict:
        """
        Send a single message.
        Returns dict with 'id' and 'status'.
        """
        if not self.configured:
            # Dev mode - just log
            logger.warning("SMTP not configured; email to %s not sent: %s", to, subject)
            return {"id": "dev_mode", "status": "skipped"}

        message = EmailMessage()
        message["From"] = self.from_address
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text)
        if html:
            message.add_alternative(html, subtype="html")

        # smtplib is blocking, run in executor
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._deliver, message)
        logger.info("Email '%s' sent to %s", subject, to)
        return {"id": message.get("Message-ID"), "status": "sent"}

    def _deliver(self, message: EmailMessage) -> None:
        try:
            if self.port == 465:
                with smtplib.SMTP_SSL(self.host, self.port, timeout=30) as server:
                    server.login(self.username, self.password)
                    server.send_message(message)
            else:
                with smtplib.SMTP(self.host, self.port, timeout=30) as server:
                    server.starttls()
                    server.login(self.username, self.password)
                    server.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"SMTP error: {e}") from e
