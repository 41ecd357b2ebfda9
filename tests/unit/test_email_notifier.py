from unittest.mock import AsyncMock

import aiosmtplib
import pytest

from config import ApplicationConfig
from src.adapter.services import email_notifier
from src.adapter.services.email_notifier import LoggingNotifier, SmtpNotifier, build_notifier


def make_smtp_notifier():
    return SmtpNotifier(
        hostname="smtp.acme.com",
        port=587,
        username="mailer",
        password="secret",
        from_email="noreply@acme.com",
    )


@pytest.mark.asyncio
async def test_smtp_notifier_sends_message(monkeypatch):
    send = AsyncMock()
    monkeypatch.setattr(email_notifier.aiosmtplib, "send", send)

    result = await make_smtp_notifier().send("ana@acme.com", "Hello", "Body text")

    assert result.delivered is True
    message = send.call_args.args[0]
    assert message["To"] == "ana@acme.com"
    assert message["From"] == "noreply@acme.com"
    assert message["Subject"] == "Hello"
    assert send.call_args.kwargs["hostname"] == "smtp.acme.com"
    assert send.call_args.kwargs["start_tls"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [aiosmtplib.SMTPConnectError("connection refused"), ConnectionResetError("reset by peer")],
)
async def test_smtp_notifier_reports_failure(monkeypatch, error):
    monkeypatch.setattr(email_notifier.aiosmtplib, "send", AsyncMock(side_effect=error))

    result = await make_smtp_notifier().send("ana@acme.com", "Hello", "Body text")

    assert result.delivered is False
    assert result.error


@pytest.mark.asyncio
async def test_logging_notifier_always_delivers():
    result = await LoggingNotifier().send("ana@acme.com", "Hello", "Body text")

    assert result.delivered is True


def test_build_notifier_for_localhost(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "SMTP_HOST", "localhost")

    assert isinstance(build_notifier(ApplicationConfig), LoggingNotifier)


def test_build_notifier_for_relay(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "SMTP_HOST", "smtp.acme.com")

    notifier = build_notifier(ApplicationConfig)

    assert isinstance(notifier, SmtpNotifier)
    assert notifier.hostname == "smtp.acme.com"
