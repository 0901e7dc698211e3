import smtplib
from email.message import EmailMessage
from typing import Callable, Optional

import requests

from ..core.config import settings
from ..core.logging import logger

SenderOverride = Callable[[str, str, str], bool]


class EmailService:
    def __init__(self):
        self._sender_override: Optional[SenderOverride] = None

    @property
    def sender_address(self) -> Optional[str]:
        return settings.email_from or settings.email_user

    def is_configured(self) -> bool:
        if settings.mail_relay_url:
            return True
        return bool(settings.smtp_host and settings.email_user)

    def set_sender_override(self, sender: Optional[SenderOverride]) -> Optional[SenderOverride]:
        """Temporarily override the send implementation (useful for captures/tests)."""
        previous = self._sender_override
        self._sender_override = sender
        return previous

    def send_email(self, to: str, subject: str, html: str) -> bool:
        """Deliver an HTML email. Failures are logged, never raised."""
        if not to or not isinstance(to, str):
            logger.warning(f"No recipient for '{subject}', skipping email send")
            return False

        if self._sender_override:
            try:
                return bool(self._sender_override(to, subject, html))
            except Exception as exc:
                logger.error(f"Sender override failed for {to}: {exc}")
                return False

        if not self.is_configured():
            logger.warning("Email credentials not configured, skipping email send")
            return False

        if settings.mail_relay_url:
            return self._send_via_relay(to, subject, html)
        return self._send_via_smtp(to, subject, html)

    def _send_via_relay(self, to: str, subject: str, html: str) -> bool:
        payload = {
            "to": to,
            "from": self.sender_address,
            "subject": subject,
            "html": html,
        }

        try:
            response = requests.post(settings.mail_relay_url, json=payload, timeout=settings.mail_timeout)
            response.raise_for_status()

            logger.info(f"Email relayed to {to}: {subject}")
            return True

        except (requests.exceptions.RequestException, TypeError, ValueError) as e:
            logger.error(f"Failed to relay email to {to}: {e}")
            return False

    def _send_via_smtp(self, to: str, subject: str, html: str) -> bool:
        try:
            msg = EmailMessage()
            msg["Subject"] = subject
            msg["From"] = self.sender_address
            msg["To"] = to
            msg.set_content("This message requires an HTML-capable email client.")
            msg.add_alternative(html, subtype="html")

            with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=settings.mail_timeout) as smtp:
                if settings.smtp_use_tls:
                    smtp.starttls()
                if settings.email_user and settings.email_pass:
                    smtp.login(settings.email_user, settings.email_pass)
                smtp.send_message(msg)

            logger.info(f"Email sent to {to}: {subject}")
            return True

        except (smtplib.SMTPException, OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to send email to {to}: {e}")
            return False


# Global instance
email_service = EmailService()
