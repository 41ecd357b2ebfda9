"""
Outgoing email.

SmtpNotifier talks to a real SMTP relay through aiosmtplib; LoggingNotifier
only writes the message to the log and is used when SMTP_HOST is localhost.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from config import ApplicationConfig
from src.app.services.notifier import DeliveryResult, Notifier

logger = logging.getLogger(__name__)


class SmtpNotifier(Notifier):
    def __init__(
        self,
        hostname: str,
        port: int,
        username: str = None,
        password: str = None,
        start_tls: bool = True,
        from_email: str = None,
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.start_tls = start_tls
        self.from_email = from_email

    async def send(self, to: str, subject: str, body: str) -> DeliveryResult:
        message = EmailMessage()
        message["From"] = self.from_email
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.hostname,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=self.start_tls,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error(f"Failed to send email to {to}: {exc}")
            return DeliveryResult(delivered=False, error=str(exc) or exc.__class__.__name__)

        logger.info(f"Email sent to {to}: {subject}")
        return DeliveryResult(delivered=True)


class LoggingNotifier(Notifier):
    """Development notifier, every message counts as delivered"""

    async def send(self, to: str, subject: str, body: str) -> DeliveryResult:
        logger.info(f"[EMAIL] To: {to} | Subject: {subject}\n{body}")
        return DeliveryResult(delivered=True)


def build_notifier(config=ApplicationConfig) -> Notifier:
    if config.SMTP_HOST == "localhost":
        return LoggingNotifier()
    return SmtpNotifier(
        hostname=config.SMTP_HOST,
        port=config.SMTP_PORT,
        username=config.SMTP_USER,
        password=config.SMTP_PASSWORD,
        start_tls=config.SMTP_START_TLS,
        from_email=config.EMAILS_FROM_EMAIL,
    )
