"""
Generate Ticket Artifact Use Case

Builds the redeemable document for a ticket. The payload is a plain text
rendering; turning it into a printable format belongs to a renderer outside
this service.
"""

from opentelemetry import trace

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.ticket.app.dto.lookup_record import EventRecord
from src.service.ticket.app.dto.ticket_artifact import TicketArtifact
from src.service.ticket.app.dto.ticket_record import TicketRecord
from src.service.ticket.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticket.app.service.ticket_data_access_facade import TicketDataAccessFacade


def render_ticket_text(ticket: TicketRecord, event: EventRecord) -> str:
    start = event.start_date
    lines = [
        f'TICKET: {ticket.code}',
        f'EVENT: {event.name}',
        f'DATE: {start.strftime("%Y-%m-%d") if start else "TBD"}',
        f'TIME: {start.strftime("%H:%M") if start else "TBD"}',
        f'LOCATION: {event.location or "TBD"}',
        f'TYPE: {ticket.type}',
        f'SECTION: {ticket.section or "General"}',
        f'SEAT: {ticket.seat or "Unassigned"}',
        f'PRICE: {ticket.price} {ticket.currency}',
    ]
    return '\n'.join(lines) + '\n'


class GenerateTicketArtifactUseCase:
    def __init__(
        self,
        *,
        ticket_facade: TicketDataAccessFacade,
        event_query_repo: IEventQueryRepo,
    ) -> None:
        self.ticket_facade = ticket_facade
        self.event_query_repo = event_query_repo
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, ticket_id: str) -> TicketArtifact:
        with self.tracer.start_as_current_span(
            'use_case.generate_ticket_artifact',
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

            Logger.base.info(f'📄 [TICKET_ARTIFACT] Rendering ticket {ticket.code}')
            return TicketArtifact(
                content=render_ticket_text(ticket, event).encode('utf-8'),
                filename=f'ticket_{ticket.code}.txt',
            )
