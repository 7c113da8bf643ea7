from abc import ABC, abstractmethod

from src.service.ticket.app.dto.mail_message import MailMessage


class IMailSender(ABC):
    """Messaging port. Any transport failure surfaces as an exception."""

    @abstractmethod
    async def send(self, *, message: MailMessage) -> None:
        pass
