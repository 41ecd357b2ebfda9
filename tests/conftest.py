from typing import List, Tuple

import pytest

from config import ApplicationConfig
from src.app.services.notifier import DeliveryResult, Notifier


class RecordingNotifier(Notifier):
    """Keeps every message in memory; set fail=True to simulate an SMTP outage"""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []
        self.fail = False

    async def send(self, to: str, subject: str, body: str) -> DeliveryResult:
        if self.fail:
            return DeliveryResult(delivered=False, error="SMTP connection refused")
        self.sent.append((to, subject, body))
        return DeliveryResult(delivered=True)

    def last_token(self, marker: str) -> str:
        """Token following `marker` in the last message body, e.g. '/verify-email/'"""
        for _, _, body in reversed(self.sent):
            if marker in body:
                return body.split(marker, 1)[1].split()[0]
        raise AssertionError(f"No message containing {marker}")


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def notifier():
    return RecordingNotifier()
