from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class DeliveryResult(BaseModel):
    """Outcome of one notification dispatch"""

    delivered: bool
    error: Optional[str] = None


class Notifier(ABC):
    """
    Outgoing notification channel (email today).

    Implementations report delivery problems through DeliveryResult
    instead of raising, so callers can record the failure and move on.
    """

    @abstractmethod
    async def send(self, to: str, subject: str, body: str) -> DeliveryResult:
        pass
