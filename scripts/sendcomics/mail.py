"""
Outbound digest messages and SMTP delivery.
"""

import logging
import smtplib
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import Iterable, List, Optional

from .config import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundMessage:
    """A single digest email, addressed to one subscriber."""

    sender: str
    recipient: str
    subject: str
    body: str

    def to_email(self) -> EmailMessage:
        """Build the stdlib email message for sending."""
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = self.recipient
        message["Subject"] = self.subject
        message.set_content(self.body)
        return message


@dataclass
class SendResult:
    """Results from a mail delivery run."""

    success: bool = False
    recipients_sent: int = 0
    errors: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"Sent {self.recipients_sent} digests"
            f"{f' ({len(self.errors)} errors)' if self.errors else ''}"
        )


class Mailer:
    """Delivers outbound messages over SMTP."""

    def __init__(
        self,
        server: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
    ) -> None:
        self.server = server or config.get("mail.smtp_server", "smtp.gmail.com")
        self.port = port or config.get("mail.smtp_port", 587)
        self.username = username or config.smtp_username
        self.password = password or config.smtp_password
        self.use_tls = config.get("mail.use_tls", True) if use_tls is None else use_tls

    @property
    def is_configured(self) -> bool:
        """Check if SMTP credentials are available."""
        return bool(self.username and self.password)

    def send(self, messages: Iterable[OutboundMessage]) -> SendResult:
        """
        Send each message in its own SMTP transaction.

        Args:
            messages: Messages to deliver.

        Returns:
            SendResult. A failure for one recipient is recorded and the
            remaining messages are still sent.
        """
        result = SendResult()

        if not self.is_configured:
            result.errors.append("SMTP credentials not set (SMTP_USERNAME / SMTP_PASSWORD)")
            return result

        messages = list(messages)
        if not messages:
            result.success = True
            return result

        try:
            client = smtplib.SMTP(self.server, self.port, timeout=30)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Could not connect to %s:%s: %s", self.server, self.port, e)
            result.errors.append(f"Could not connect to {self.server}:{self.port}: {e}")
            return result

        with client as smtp:
            try:
                if self.use_tls:
                    smtp.starttls()
                smtp.login(self.username, self.password)
            except (smtplib.SMTPException, OSError) as e:
                logger.error("SMTP login to %s failed: %s", self.server, e)
                result.errors.append(f"SMTP login failed: {e}")
                return result

            for message in messages:
                try:
                    smtp.send_message(message.to_email())
                    result.recipients_sent += 1
                    logger.info("Sent digest to %s", message.recipient)
                except (smtplib.SMTPException, OSError) as e:
                    logger.error("Failed to send digest to %s: %s", message.recipient, e)
                    result.errors.append(f"{message.recipient}: {e}")

        result.success = not result.errors
        return result
