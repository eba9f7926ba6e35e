from abc import ABC, abstractmethod


class NotificationError(Exception):
    """Raised when a message could not be handed to the transport"""


class INotifier(ABC):
    """Outbound message delivery - application layer"""

    @abstractmethod
    async def send(self, to_address: str, subject: str, html_body: str) -> None:
        """
        Send an HTML message.

        Raises:
            NotificationError: if delivery failed
        """
        pass
