"""Mock mail sender for demonstration and tests."""

from datetime import datetime, timezone
from typing import List

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.mail_message import MailMessage
from src.service.ticket.app.interface.i_mail_sender import IMailSender


@attrs.define(frozen=True)
class SentMail:
    message: MailMessage
    sent_at: datetime


class MockMailSenderImpl(IMailSender):
    """Logs instead of delivering; keeps every message in ``sent_messages``."""

    def __init__(self, *, debug: bool = True) -> None:
        self.debug = debug
        self.sent_messages: List[SentMail] = []

    @Logger.io
    async def send(self, *, message: MailMessage) -> None:
        sent = SentMail(message=message, sent_at=datetime.now(timezone.utc))
        self.sent_messages.append(sent)

        if self.debug:
            attachments = ', '.join(a.filename for a in message.attachments) or '-'
            Logger.base.info(
                f'📧 [MOCK_MAIL] subject="{message.subject}" '
                f'attachments=[{attachments}] at {sent.sent_at:%Y-%m-%d %H:%M:%S}'
            )
