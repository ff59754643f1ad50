"""The interface every email delivery adapter implements."""

from abc import ABC, abstractmethod
from typing import TypedDict


class Delivery(TypedDict, total=False):
    """Outcome of one send attempt.

    ``status`` is "sent" or "failed"; ``error`` is only present on failure.
    """

    message_id: str | None
    status: str
    error: str


class EmailPort(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str, html_body: str | None = None) -> Delivery:
        """Deliver one message to ``to``.

        Adapters report delivery problems in the returned Delivery rather
        than raising.
        """

    @staticmethod
    def sent(message_id: str) -> Delivery:
        return {"message_id": message_id, "status": "sent"}

    @staticmethod
    def failed(error: str) -> Delivery:
        return {"message_id": None, "status": "failed", "error": error}
