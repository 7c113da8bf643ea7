"""
Send Ticket By Email Use Case

Resolves the recipient, renders the ticket through
GenerateTicketArtifactUseCase and hands the message to the mail sender.

Recipient resolution:
- an explicit ``email`` override wins
- otherwise the email of the ticket owner is used
- no owner and no override, or an owner without an address, is rejected
"""

from typing import Optional

from opentelemetry import trace

from src.platform.exception.exceptions import DispatchError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.command.generate_ticket_artifact_use_case import (
    GenerateTicketArtifactUseCase,
)
from src.service.ticket.app.dto.lookup_record import EventRecord, UserRecord
from src.service.ticket.app.dto.mail_message import MailAttachment, MailMessage
from src.service.ticket.app.dto.ticket_artifact import TicketArtifact
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticket.app.interface.i_mail_sender import IMailSender
from src.service.ticket.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade


class SendTicketByEmailUseCase:
    def __init__(
        self,
        *,
        ticket_facade: TicketDataAccessFacade,
        event_query_repo: IEventQueryRepo,
        user_query_repo: IUserQueryRepo,
        mail_sender: IMailSender,
        artifact_generator: GenerateTicketArtifactUseCase,
    ) -> None:
        self.ticket_facade = ticket_facade
        self.event_query_repo = event_query_repo
        self.user_query_repo = user_query_repo
        self.mail_sender = mail_sender
        self.artifact_generator = artifact_generator
        self.tracer = trace.get_tracer(__name__)

    @staticmethod
    def _resolve_recipient(user: Optional[UserRecord], override: Optional[str]) -> str:
        if user is None and not override:
            raise ValidationError('No valid user found to send the ticket to', field='user_id')

        recipient = override or (user.email if user else None)
        if not recipient:
            raise ValidationError(
                'No valid email address provided to send the ticket', field='email'
            )
        return recipient

    @staticmethod
    def _compose(
        *, recipient: str, ticket: TicketRecord, event: EventRecord, artifact: TicketArtifact
    ) -> MailMessage:
        when = event.start_date.strftime('%Y-%m-%d') if event.start_date else 'a date to be announced'
        return MailMessage(
            to=recipient,
            subject=f'Your ticket for {event.name}',
            text=f'Attached is your ticket for {event.name}, taking place on {when}.',
            html=(
                f'<h1>Your ticket for {event.name}</h1>'
                f'<p>Thank you for your purchase!</p>'
                f'<p>Attached is your ticket for the event taking place on {when}.</p>'
                f'<p>Show this ticket printed or on your mobile device to enter the event.</p>'
                f'<p>Ticket code: <strong>{ticket.code}</strong></p>'
            ),
            attachments=[MailAttachment(filename=artifact.filename, content=artifact.content)],
        )

    @Logger.io
    async def execute(self, *, ticket_id: str, email: Optional[str] = None) -> bool:
        with self.tracer.start_as_current_span(
            'use_case.send_ticket_by_email',
            attributes={'ticket.id': ticket_id},
        ):
            ticket = await self.ticket_facade.find_by_id(ticket_id)
            if ticket is None:
                raise ValidationError('Ticket does not exist', field='ticket_id')

            event = await self.event_query_repo.find_by_id(event_id=ticket.event_id)
            if event is None:
                raise ValidationError(
                    'The event associated with the ticket does not exist', field='event_id'
                )

            user = None
            if ticket.user_id:
                user = await self.user_query_repo.find_by_id(user_id=ticket.user_id)

            recipient = self._resolve_recipient(user, email)
            artifact = await self.artifact_generator.execute(ticket_id=ticket_id)
            message = self._compose(
                recipient=recipient, ticket=ticket, event=event, artifact=artifact
            )

            try:
                await self.mail_sender.send(message=message)
            except Exception as e:
                Logger.base.error(f'❌ [SEND_TICKET] Mail delivery failed for ticket {ticket_id}: {e}')
                raise DispatchError('Could not send the ticket by email') from e

            Logger.base.info(f'📧 [SEND_TICKET] Ticket {ticket_id} sent')
            return True
